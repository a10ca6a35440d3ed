"""
Local file storage for uploads
"""

from typing import Optional, Pattern, Tuple
import logging
import os
import re
import secrets
import time

from portfolio_api.core.errors import ValidationError
from portfolio_api.schemas.upload import StoredFile

logger = logging.getLogger(__name__)

IMAGE_TYPES = re.compile(r"jpeg|jpg|png|gif|webp|svg")
DOCUMENT_EXTENSIONS = re.compile(r"pdf|doc|docx|txt|md")
DOCUMENT_MIME_TYPES = (
    "application/pdf",
    "application/msword",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    "text/plain",
    "text/markdown",
)
MAX_IMAGES = 10

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9._-]+")


def _split_name(original_name: str) -> Tuple[str, str]:
    name = os.path.basename((original_name or "").replace("\\", "/"))
    stem, ext = os.path.splitext(name)
    stem = _UNSAFE_CHARS.sub("_", stem).strip("._") or "file"
    ext = _UNSAFE_CHARS.sub("", ext)
    return stem, ext


def check_image(original_name: str, content_type: Optional[str]) -> None:
    _, ext = _split_name(original_name)
    if not (IMAGE_TYPES.search(ext.lower()) and IMAGE_TYPES.search(content_type or "")):
        raise ValidationError("Only image files are allowed (jpeg, jpg, png, gif, webp, svg)")


def check_document(original_name: str, content_type: Optional[str]) -> None:
    _, ext = _split_name(original_name)
    if not (DOCUMENT_EXTENSIONS.search(ext.lower()) and content_type in DOCUMENT_MIME_TYPES):
        raise ValidationError("Only document files are allowed (pdf, doc, docx, txt, md)")


class LocalStorage:
    """Writes uploads under ``base_dir`` and serves them from ``public_base``"""

    def __init__(self, base_dir: str, max_size: int, public_base: str = "/uploads") -> None:
        self.base_dir = os.path.abspath(base_dir)
        self.max_size = max_size
        self.public_base = public_base.rstrip("/")
        os.makedirs(self.base_dir, exist_ok=True)

    def unique_name(self, original_name: str) -> str:
        stem, ext = _split_name(original_name)
        return f"{stem}-{int(time.time() * 1000)}-{secrets.randbelow(10 ** 9)}{ext}"

    def url_for(self, filename: str) -> str:
        return f"{self.public_base}/{filename}"

    def _resolve(self, filename: str) -> str:
        if not filename or filename in (".", "..") or "/" in filename or "\\" in filename:
            raise ValidationError("Invalid filename")
        path = os.path.abspath(os.path.join(self.base_dir, filename))
        if os.path.dirname(path) != self.base_dir:
            raise ValidationError("Invalid filename")
        return path

    def check_size(self, data: bytes) -> None:
        if len(data) > self.max_size:
            raise ValidationError(f"File too large (max {self.max_size} bytes)")

    def save_bytes(
        self,
        data: bytes,
        *,
        original_name: str,
        content_type: Optional[str] = None,
        include_mime: bool = False,
    ) -> StoredFile:
        self.check_size(data)

        name = self.unique_name(original_name)
        with open(self._resolve(name), "wb") as f:
            f.write(data)
        logger.info("Stored upload %s (%d bytes)", name, len(data))

        return StoredFile(
            filename=name,
            original_name=original_name,
            size=len(data),
            url=self.url_for(name),
            mime_type=content_type if include_mime else None,
        )

    def delete(self, filename: str) -> None:
        """Remove a stored file; a missing file is not an error"""
        path = self._resolve(filename)
        try:
            os.remove(path)
        except FileNotFoundError:
            logger.info("Upload %s already gone", filename)
