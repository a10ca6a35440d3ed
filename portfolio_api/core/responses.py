"""
JSON envelope helpers
"""

from typing import Any, Optional

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from portfolio_api.schemas.common import Pagination


def _dump(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True, exclude_none=True)
    if isinstance(value, list):
        return [_dump(v) for v in value]
    return jsonable_encoder(value)


def success(
    data: Any = None,
    *,
    message: Optional[str] = None,
    pagination: Optional[Pagination] = None,
    status_code: int = 200,
) -> JSONResponse:
    """``{success: true, data?, message?, pagination?}``"""
    body = {"success": True}
    if data is not None:
        body["data"] = _dump(data)
    if message:
        body["message"] = message
    if pagination is not None:
        body["pagination"] = _dump(pagination)
    return JSONResponse(status_code=status_code, content=body)


def failure(error: str, status_code: int, details: Any = None) -> JSONResponse:
    """``{success: false, error, details?}``"""
    body = {"success": False, "error": error}
    if details is not None:
        body["details"] = jsonable_encoder(details)
    return JSONResponse(status_code=status_code, content=body)
