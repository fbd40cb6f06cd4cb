"""Re-encoding of drive images to WebP with Pillow."""

from __future__ import annotations

import io
import logging

from PIL import Image, ImageOps

logger = logging.getLogger(__name__)

WEBP_MIME_TYPE = "image/webp"
DEFAULT_QUALITY = 85
# libwebp speed/size trade-off, 0 (fast) to 6 (small)
DEFAULT_METHOD = 4

_WEBP_MODES = frozenset({"RGB", "RGBA"})


class TranscodeError(Exception):
    """Raised when the source bytes cannot be decoded as an image."""


def transcode_to_webp(
    data: bytes,
    quality: int = DEFAULT_QUALITY,
    method: int = DEFAULT_METHOD,
) -> bytes:
    """Re-encode an image as lossy WebP at its original resolution.

    The EXIF orientation tag is applied to the pixels and dropped, so
    clients never need to rotate the result.

    Args:
        data: Raw source image bytes (JPEG, PNG, GIF, ...).
        quality: WebP quality, 0-100.
        method: WebP encoder effort, 0-6.

    Returns:
        WebP-encoded bytes.

    Raises:
        TranscodeError: If Pillow cannot decode the input.
    """
    try:
        with Image.open(io.BytesIO(data)) as source:
            image = ImageOps.exif_transpose(source)
            if image.mode not in _WEBP_MODES:
                has_alpha = "A" in image.getbands() or "transparency" in image.info
                image = image.convert("RGBA" if has_alpha else "RGB")
            buffer = io.BytesIO()
            image.save(buffer, format="WEBP", quality=quality, method=method)
    except OSError as exc:
        logger.warning("[transcode_to_webp] cannot decode image; size:%d", len(data))
        raise TranscodeError(f"Cannot decode image: {exc}") from exc

    output = buffer.getvalue()
    logger.info(
        "[transcode_to_webp] transcoded; width:%d;height:%d;in_bytes:%d;out_bytes:%d",
        image.width,
        image.height,
        len(data),
        len(output),
    )
    return output
