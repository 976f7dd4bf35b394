"""Image encoding for the reading flow.

Turns a user-selected file into a base64 data URL and recovers the raw
payload and media type from it again before the image is sent out.
"""

import asyncio
import base64
import binascii
import logging
import mimetypes
from collections.abc import Awaitable, Callable
from pathlib import Path

from palm_reader.models.schemas import EncodedImage

logger = logging.getLogger(__name__)

# Constants
IMAGE_MEDIA_PREFIX = "image/"
DATA_URL_PREFIX = "data:"
BASE64_MARKER = ";base64"


class ImageReadError(Exception):
    """Raised when the bytes of a selected file cannot be read."""

    pass


class InvalidImageError(Exception):
    """Raised when an encoded image has a malformed data URL envelope."""

    pass


class SelectedFile:
    """A file chosen by the user, not yet read.

    Carries the declared media type so it can be validated before any I/O
    happens. The bytes are only pulled through ``read()``.
    """

    def __init__(
        self,
        name: str,
        media_type: str | None,
        reader: Callable[[], Awaitable[bytes]],
    ) -> None:
        self.name = name
        self.media_type = media_type
        self._reader = reader

    @classmethod
    def from_bytes(cls, name: str, media_type: str | None, content: bytes) -> "SelectedFile":
        """Wrap content that is already in memory (e.g. a browser upload)."""

        async def read() -> bytes:
            return content

        return cls(name, media_type, read)

    @classmethod
    def from_path(cls, path: str | Path, media_type: str | None = None) -> "SelectedFile":
        """Wrap a local file. The media type is guessed from the name if not given."""
        path = Path(path)
        declared = media_type or mimetypes.guess_type(path.name)[0]

        async def read() -> bytes:
            return await asyncio.to_thread(path.read_bytes)

        return cls(path.name, declared, read)

    async def read(self) -> bytes:
        return await self._reader()

    def __repr__(self) -> str:
        return f"SelectedFile(name={self.name!r}, media_type={self.media_type!r})"


def is_image_media_type(media_type: str | None) -> bool:
    """Check that a declared media type names an image."""
    return bool(media_type) and media_type.startswith(IMAGE_MEDIA_PREFIX)


def encode_image(content: bytes, media_type: str) -> EncodedImage:
    """Build a base64 data URL for raw image bytes.

    Args:
        content: Raw file bytes.
        media_type: Declared media type, e.g. ``image/png``.

    Returns:
        EncodedImage holding the data URL.
    """
    payload = base64.b64encode(content).decode("ascii")
    return EncodedImage(data_url=f"{DATA_URL_PREFIX}{media_type}{BASE64_MARKER},{payload}")


async def read_selected_file(file: SelectedFile) -> EncodedImage:
    """Read a selected file and encode it.

    Args:
        file: The file chosen by the user. Its media type is assumed valid.

    Returns:
        EncodedImage for the file contents.

    Raises:
        ImageReadError: If the bytes could not be read.
    """
    try:
        content = await file.read()
    except Exception as e:
        raise ImageReadError(f"Failed to read {file.name}: {e}") from e

    if not isinstance(content, bytes | bytearray):
        raise ImageReadError(f"Reader for {file.name} returned {type(content).__name__}")

    return encode_image(bytes(content), file.media_type or "")


def split_data_url(data_url: str) -> tuple[bytes, str]:
    """Strip the data URL envelope.

    Args:
        data_url: ``data:<media type>;base64,<payload>``.

    Returns:
        Tuple of raw payload bytes and media type.

    Raises:
        InvalidImageError: If the envelope or the base64 payload is malformed.
    """
    header, sep, payload = data_url.partition(",")
    if not sep or not header.startswith(DATA_URL_PREFIX):
        raise InvalidImageError("Invalid data URL: missing header")

    media_type = header.split(";")[0].removeprefix(DATA_URL_PREFIX)
    if not media_type:
        raise InvalidImageError("Invalid data URL: missing media type")

    try:
        raw = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as e:
        raise InvalidImageError(f"Invalid data URL payload: {e}") from e

    return raw, media_type
