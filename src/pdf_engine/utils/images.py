"""
Image payload decoding
"""
import base64
import binascii
import io
import re
from typing import Optional, Tuple

from PIL import Image, UnidentifiedImageError

from ..core.errors import DecodeError

_DATA_URL = re.compile(r'^data:(?P<mime>[\w/+.-]+)?(?P<params>(;[^;,]*)*),(?P<data>.*)$', re.DOTALL)

SUPPORTED_FORMATS = {"PNG", "JPEG"}


def declared_format(payload: str) -> Optional[str]:
    """PNG or JPEG as declared by a data URL's MIME type, else None"""
    match = _DATA_URL.match(payload)
    if not match or not match.group('mime'):
        return None
    mime = match.group('mime').lower()
    if mime == "image/png":
        return "PNG"
    if mime in ("image/jpeg", "image/jpg"):
        return "JPEG"
    return mime


def decode_image_payload(payload: str) -> Tuple[bytes, Image.Image]:
    """
    Decode a base64 (or data URL) image payload.

    Returns the raw image bytes and the opened Pillow image. Raises
    DecodeError for bad base64, unreadable images, or content that does not
    match the declared MIME type.
    """
    if not payload or not isinstance(payload, str):
        raise DecodeError("Empty image data")

    expected = declared_format(payload)
    match = _DATA_URL.match(payload)
    encoded = match.group('data') if match else payload

    try:
        raw = base64.b64decode(encoded.strip(), validate=False)
    except (binascii.Error, ValueError) as e:
        raise DecodeError(f"Invalid base64 image data: {e}") from e
    if not raw:
        raise DecodeError("Empty image data")

    try:
        image = Image.open(io.BytesIO(raw))
        image.load()
    except (UnidentifiedImageError, OSError, SyntaxError) as e:
        raise DecodeError(f"Could not decode image: {e}") from e

    if expected is not None and image.format != expected:
        raise DecodeError(f"Image declared as {expected} but contains {image.format}")
    if image.format not in SUPPORTED_FORMATS:
        raise DecodeError(f"Unsupported image format: {image.format}")

    return raw, image


def image_to_png(image: Image.Image) -> bytes:
    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    return buffer.getvalue()
