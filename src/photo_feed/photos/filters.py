"""Selection of the drive items that the feed can display."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from photo_feed.graph.models import DriveItem

IMAGE_MIME_PREFIX = "image/"

# Pillow cannot decode these without an extra native codec.
_UNSUPPORTED_MIME_MARKERS = ("heic", "heif")
_UNSUPPORTED_EXTENSIONS = (".heic", ".heif")


def is_supported_image(item: DriveItem) -> bool:
    """True for files with an ``image/*`` MIME type that are not HEIC/HEIF."""
    if not item.is_file or not item.mime_type:
        return False
    mime_type = item.mime_type.lower()
    if not mime_type.startswith(IMAGE_MIME_PREFIX):
        return False
    if any(marker in mime_type for marker in _UNSUPPORTED_MIME_MARKERS):
        return False
    return not item.name.lower().endswith(_UNSUPPORTED_EXTENSIONS)


def filter_images(items: list[DriveItem]) -> list[DriveItem]:
    """Return the supported images in their original order."""
    return [item for item in items if is_supported_image(item)]
