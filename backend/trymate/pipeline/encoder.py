"""Uploaded image validation and base64 encoding.

Accepts anything shaped like FastAPI's UploadFile: a declared
``content_type``, an optional declared ``size`` and an awaitable ``read()``.
"""

from __future__ import annotations

import base64
from dataclasses import dataclass
from typing import Protocol

from trymate.config import settings
from trymate.pipeline.errors import ValidationError


class ImageUpload(Protocol):
    content_type: str | None
    size: int | None

    async def read(self) -> bytes: ...


@dataclass
class ImageBlob:
    """In-memory image upload for programmatic callers."""

    data: bytes
    content_type: str | None = "image/jpeg"
    filename: str = "upload"

    @property
    def size(self) -> int:
        return len(self.data)

    async def read(self) -> bytes:
        return self.data


def _check_media_type(content_type: str | None) -> None:
    if not (content_type or "").startswith("image/"):
        raise ValidationError("Please upload an image file.")


def _check_size(size: int, max_bytes: int) -> None:
    if size > max_bytes:
        limit_mb = max_bytes / (1024 * 1024)
        raise ValidationError(f"Please upload an image smaller than {limit_mb:g}MB.")


async def encode_image(image: ImageUpload, max_bytes: int | None = None) -> str:
    """Validate an uploaded image and return its bytes as base64 text.

    The declared size is checked before reading so oversized uploads are
    rejected without pulling them into memory. When no size is declared the
    actual byte length is checked after the read.
    """
    if max_bytes is None:
        max_bytes = settings.max_image_bytes

    _check_media_type(image.content_type)
    if image.size is not None:
        _check_size(image.size, max_bytes)

    try:
        data = await image.read()
    except OSError as exc:
        raise ValidationError("Could not read the uploaded image.") from exc

    _check_size(len(data), max_bytes)
    return base64.b64encode(data).decode("ascii")
