"""Chronological ordering of images."""

from __future__ import annotations

from typing import TYPE_CHECKING

from photo_feed.photos.timestamps import EPOCH, sort_timestamp

if TYPE_CHECKING:
    from photo_feed.graph.models import DriveItem


def sort_newest_first(images: list[DriveItem]) -> list[DriveItem]:
    """Order images by descending sort timestamp.

    Images without any sort timestamp count as the Unix epoch and end up
    last. The sort is stable, so ties keep their input order.
    """
    return sorted(images, key=lambda item: sort_timestamp(item) or EPOCH, reverse=True)
