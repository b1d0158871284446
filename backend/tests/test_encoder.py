"""Tests for encode_image — media type and size validation, base64 output."""

from __future__ import annotations

import base64
from unittest.mock import AsyncMock, MagicMock

import pytest

from trymate.pipeline.encoder import ImageBlob, encode_image
from trymate.pipeline.errors import ValidationError

ONE_MIB = 1024 * 1024


class TestEncodeImage:
    @pytest.mark.asyncio
    async def test_encodes_jpeg(self, image_blob, jpeg_bytes) -> None:
        encoded = await encode_image(image_blob)
        assert base64.b64decode(encoded) == jpeg_bytes

    @pytest.mark.asyncio
    async def test_exactly_one_mib_is_accepted(self) -> None:
        blob = ImageBlob(data=b"\x00" * ONE_MIB, content_type="image/png")
        encoded = await encode_image(blob)
        assert len(base64.b64decode(encoded)) == ONE_MIB

    @pytest.mark.asyncio
    async def test_over_one_mib_is_rejected(self) -> None:
        blob = ImageBlob(data=b"\x00" * (ONE_MIB + 1), content_type="image/png")
        with pytest.raises(ValidationError, match="smaller than 1MB"):
            await encode_image(blob)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("content_type", ["text/plain", "application/pdf", "", None])
    async def test_non_image_media_type_is_rejected(self, content_type) -> None:
        blob = ImageBlob(data=b"hello", content_type=content_type)
        with pytest.raises(ValidationError, match="image file"):
            await encode_image(blob)

    @pytest.mark.asyncio
    async def test_declared_size_checked_before_read(self) -> None:
        """An oversized upload with a declared size is rejected without reading it."""
        upload = MagicMock()
        upload.content_type = "image/jpeg"
        upload.size = 2 * ONE_MIB
        upload.read = AsyncMock(return_value=b"")
        with pytest.raises(ValidationError):
            await encode_image(upload)
        upload.read.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_undeclared_size_checked_after_read(self) -> None:
        upload = MagicMock()
        upload.content_type = "image/jpeg"
        upload.size = None
        upload.read = AsyncMock(return_value=b"\x00" * (ONE_MIB + 10))
        with pytest.raises(ValidationError):
            await encode_image(upload)

    @pytest.mark.asyncio
    async def test_read_failure_is_validation_error(self) -> None:
        upload = MagicMock()
        upload.content_type = "image/jpeg"
        upload.size = 10
        upload.read = AsyncMock(side_effect=OSError("disk gone"))
        with pytest.raises(ValidationError, match="Could not read"):
            await encode_image(upload)

    @pytest.mark.asyncio
    async def test_custom_limit(self) -> None:
        blob = ImageBlob(data=b"\x00" * 100, content_type="image/gif")
        with pytest.raises(ValidationError):
            await encode_image(blob, max_bytes=99)
