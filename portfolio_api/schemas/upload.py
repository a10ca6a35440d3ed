"""
Upload response schema
"""

from typing import Optional

from portfolio_api.schemas.common import CamelModel


class StoredFile(CamelModel):
    filename: str
    original_name: str
    size: int
    url: str
    mime_type: Optional[str] = None
