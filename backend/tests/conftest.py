"""Shared fixtures: ASGI test client and small image builders."""

from __future__ import annotations

import io

import httpx
import pytest
from PIL import Image

from trymate.main import app
from trymate.pipeline.encoder import ImageBlob


def make_jpeg(width: int = 64, height: int = 64) -> bytes:
    """Encode a solid-color JPEG of the given size."""
    buf = io.BytesIO()
    Image.new("RGB", (width, height), color=(180, 40, 90)).save(buf, format="JPEG")
    return buf.getvalue()


@pytest.fixture
async def client():
    """httpx client wired to the FastAPI app in-process."""
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def jpeg_bytes() -> bytes:
    return make_jpeg()


@pytest.fixture
def image_blob(jpeg_bytes) -> ImageBlob:
    return ImageBlob(data=jpeg_bytes, content_type="image/jpeg", filename="tee.jpg")
