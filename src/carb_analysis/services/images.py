"""Image payload helpers for multimodal analysis requests."""

import base64
import logging
from collections.abc import Sequence

FALLBACK_MIME_TYPE = "image/jpeg"

# (offset, magic bytes, MIME type); HEIC brands sit after the ISO box size.
_SIGNATURES: tuple[tuple[int, bytes, str], ...] = (
    (0, b"\xff\xd8\xff", "image/jpeg"),
    (0, b"\x89PNG\r\n\x1a\n", "image/png"),
    (8, b"WEBP", "image/webp"),
    (4, b"ftypheic", "image/heic"),
    (4, b"ftypheix", "image/heic"),
    (4, b"ftypmif1", "image/heic"),
)

_logger = logging.getLogger(__name__)


def sniff_mime_type(image_bytes: bytes) -> str:
    """Infer the MIME type of a photo from its leading bytes."""
    for offset, magic, mime_type in _SIGNATURES:
        if image_bytes[offset : offset + len(magic)] == magic:
            if mime_type == "image/webp" and not image_bytes.startswith(b"RIFF"):
                continue
            return mime_type
    return FALLBACK_MIME_TYPE


def to_data_url(image_bytes: bytes) -> str:
    """Embed one photo as a base64 data URL."""
    encoded = base64.b64encode(image_bytes).decode("ascii")
    return f"data:{sniff_mime_type(image_bytes)};base64,{encoded}"


def encode_images(images: Sequence[bytes], limit: int) -> list[str]:
    """Encode up to ``limit`` photos, in order, as data URLs.

    Raises ValueError when no photo is given. Extra photos are dropped with a
    warning.
    """
    if not images:
        raise ValueError("At least one meal image is required")
    if len(images) > limit:
        _logger.warning(
            "Received %s meal images, only the first %s are sent", len(images), limit
        )
    return [to_data_url(image) for image in images[:limit]]
