"""Pytest fixtures and shared test configuration.

Fixtures:
    - png_bytes: A real 10x10 pixel PNG built with Pillow
    - png_file: The same PNG wrapped as a SelectedFile
    - backend: AsyncMock standing in for the remote reading service
    - async_client: HTTPX client for the FastAPI host
"""

import io
from collections.abc import AsyncGenerator
from unittest.mock import AsyncMock

import pytest
from httpx import ASGITransport, AsyncClient
from PIL import Image

from palm_reader.api import app
from palm_reader.imaging.encoding import SelectedFile


@pytest.fixture
def png_bytes() -> bytes:
    """Return the bytes of a 10x10 pixel PNG."""
    buffer = io.BytesIO()
    Image.new("RGB", (10, 10), color=(200, 160, 140)).save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def png_file(png_bytes: bytes) -> SelectedFile:
    """Return the 10x10 PNG as a selected file."""
    return SelectedFile.from_bytes("palm.png", "image/png", png_bytes)


@pytest.fixture
def backend() -> AsyncMock:
    """Return a reading backend that answers with a short reading."""
    return AsyncMock(return_value="## 生命线\n悠长而坚韧。")


@pytest.fixture
async def async_client() -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for the FastAPI host.

    Yields:
        Configured AsyncClient for making test requests.
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
