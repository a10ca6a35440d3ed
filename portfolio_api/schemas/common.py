"""
Shared Pydantic building blocks
"""

from pydantic import AfterValidator, BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel
from datetime import datetime, timezone
from typing import Annotated, Any, ClassVar, Dict, FrozenSet, Literal, Optional
import math
import re

ContentStatus = Literal["draft", "published", "archived"]
Role = Literal["admin", "editor", "viewer"]

# well inside the signed 64-bit range SQLite binds
MAX_OFFSET = 2**62


def as_utc(value: datetime) -> datetime:
    """Stored timestamps are naive UTC; mark them so JSON carries the offset."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


UtcDatetime = Annotated[datetime, AfterValidator(as_utc)]

# Scheme is optional, a dotted host with a TLD is not
_URL_RE = re.compile(
    r"^(?:https?://)?"
    r"(?:[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?\.)+[A-Za-z]{2,63}"
    r"(?::\d{1,5})?"
    r"(?:[/?#]\S*)?$"
)
_HEX_COLOR_RE = re.compile(r"^#?(?:[0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")


def check_url(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    if not _URL_RE.match(value):
        raise ValueError("must be a valid URL")
    return value


def check_hex_color(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    if not _HEX_COLOR_RE.match(value):
        raise ValueError("must be a valid hex color")
    return value


def blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


def to_plain(value: Any) -> Any:
    """Nested models become camelCase dicts, the shape stored in JSON columns."""
    if isinstance(value, BaseModel):
        return value.model_dump(by_alias=True, exclude_none=True)
    if isinstance(value, list):
        return [to_plain(v) for v in value]
    if isinstance(value, dict):
        return {k: to_plain(v) for k, v in value.items()}
    return value


class CamelModel(BaseModel):
    """camelCase on the wire, snake_case in Python"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class InputModel(CamelModel):
    """Request body: strings are trimmed before length checks"""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )

    def to_data(self) -> Dict[str, Any]:
        return {name: to_plain(getattr(self, name)) for name in type(self).model_fields}


class PatchModel(InputModel):
    """Partial update body.

    Only the fields the client actually sent end up in ``to_patch()``;
    ``non_nullable`` fields may be omitted but not sent as null.
    """
    non_nullable: ClassVar[FrozenSet[str]] = frozenset()

    @model_validator(mode="after")
    def _reject_nulls(self):
        nulled = sorted(
            name for name in self.model_fields_set
            if name in self.non_nullable and getattr(self, name) is None
        )
        if nulled:
            raise ValueError(f"{', '.join(nulled)} cannot be null")
        return self

    def to_patch(self) -> Dict[str, Any]:
        return {name: to_plain(getattr(self, name)) for name in self.model_fields_set}


class Pagination(CamelModel):
    page: int
    limit: int
    total: int
    total_pages: int

    @classmethod
    def build(cls, page: int, limit: int, total: int) -> "Pagination":
        return cls(page=page, limit=limit, total=total, total_pages=math.ceil(total / limit) if limit else 0)


class ListFilters(BaseModel):
    """Recognized gateway filters; None means unconstrained"""
    status: Optional[ContentStatus] = None
    featured: Optional[bool] = None
    approved: Optional[bool] = None
    limit: Optional[int] = None
    offset: Optional[int] = None

    def without_paging(self) -> "ListFilters":
        return self.model_copy(update={"limit": None, "offset": None})

    @classmethod
    def page(cls, page: int, limit: int, **filters: Any) -> "ListFilters":
        return cls(limit=limit, offset=min((page - 1) * limit, MAX_OFFSET), **filters)
