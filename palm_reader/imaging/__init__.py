"""Image handling for uploaded palm photos.

Responsibilities:
    - Declared media type validation before any read
    - Reading selected files into memory
    - Base64 data URL encoding and envelope stripping

No pixel-level analysis happens here; the image is passed to the reading
service as-is.
"""

from palm_reader.imaging.encoding import (
    ImageReadError,
    InvalidImageError,
    SelectedFile,
    encode_image,
    is_image_media_type,
    read_selected_file,
    split_data_url,
)

__all__ = [
    "ImageReadError",
    "InvalidImageError",
    "SelectedFile",
    "encode_image",
    "is_image_media_type",
    "read_selected_file",
    "split_data_url",
]
