"""
Site settings Pydantic schemas

Section bodies allow extra keys: the admin UI owns the section layout and
only the fields below are checked.
"""

from pydantic import ConfigDict, EmailStr, Field, field_validator
from pydantic.alias_generators import to_camel
from typing import Any, Dict, List, Literal, Optional

from portfolio_api.schemas.common import CamelModel, InputModel, UtcDatetime, check_hex_color

SECTIONS = ("general", "contact", "theme", "layout", "seo")


class SectionModel(InputModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
        extra="allow",
    )

    def to_section(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class GeneralSettings(SectionModel):
    site_name: Optional[str] = Field(None, min_length=1, max_length=100)
    tagline: Optional[str] = Field(None, max_length=200)
    description: Optional[str] = Field(None, max_length=500)
    logo: Optional[str] = None
    favicon: Optional[str] = None


class ContactSettings(SectionModel):
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(None, max_length=20)
    location: Optional[str] = Field(None, max_length=200)
    social_links: Optional[Dict[str, str]] = None


class ThemeSettings(SectionModel):
    primary_color: Optional[str] = None
    secondary_color: Optional[str] = None
    accent_color: Optional[str] = None
    dark_mode: Optional[bool] = None

    @field_validator("primary_color", "secondary_color", "accent_color")
    @classmethod
    def hex_color(cls, v):
        return check_hex_color(v)


class LayoutSection(CamelModel):
    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    enabled: bool = True
    order: int = Field(..., ge=0)


class LayoutSettings(SectionModel):
    sections: Optional[List[LayoutSection]] = None
    container_width: Optional[Literal["narrow", "normal", "wide"]] = None
    spacing: Optional[Literal["compact", "normal", "relaxed"]] = None
    border_radius: Optional[Literal["none", "small", "medium", "large"]] = None


class SeoSettings(SectionModel):
    default_title: Optional[str] = Field(None, min_length=1, max_length=100)
    default_description: Optional[str] = Field(None, min_length=1, max_length=200)
    default_keywords: Optional[List[str]] = None
    og_image: Optional[str] = None
    twitter_card: Optional[Literal["summary", "summary_large_image"]] = None
    structured_data: Optional[Dict[str, Any]] = None


class SiteSettingsUpdate(InputModel):
    """Any subset of the five sections"""
    general: Optional[GeneralSettings] = None
    contact: Optional[ContactSettings] = None
    theme: Optional[ThemeSettings] = None
    layout: Optional[LayoutSettings] = None
    seo: Optional[SeoSettings] = None

    def to_sections(self) -> Dict[str, Dict[str, Any]]:
        return {
            name: getattr(self, name).to_section()
            for name in SECTIONS
            if name in self.model_fields_set and getattr(self, name) is not None
        }


class LayoutOrderRequest(InputModel):
    section_ids: List[str] = Field(..., min_length=1)


class SiteSettingsEntity(CamelModel):
    id: str
    general: Dict[str, Any] = {}
    contact: Dict[str, Any] = {}
    theme: Dict[str, Any] = {}
    layout: Dict[str, Any] = {}
    seo: Dict[str, Any] = {}
    updated_at: UtcDatetime

    @field_validator(*SECTIONS, mode="before")
    @classmethod
    def missing_section(cls, v):
        return v if isinstance(v, dict) else {}


class SeoCheckRequest(InputModel):
    """Page metadata to score"""
    title: Optional[str] = None
    description: Optional[str] = None
    keywords: List[str] = []
    og_title: Optional[str] = None
    og_description: Optional[str] = None
    og_image: Optional[str] = None
    twitter_title: Optional[str] = None
    twitter_description: Optional[str] = None
    canonical_url: Optional[str] = None
    structured_data: Optional[Dict[str, Any]] = None


class SeoIssue(CamelModel):
    type: Literal["error", "warning", "info"]
    message: str


class SeoReport(CamelModel):
    score: int
    status: str
    issues: List[SeoIssue] = []
