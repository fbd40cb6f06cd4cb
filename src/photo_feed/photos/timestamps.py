"""Effective timestamps for photos.

Two fallback chains are in use. Sorting looks at the filename date, the
capture time and the creation time. Grouping additionally falls back to the
last-modified time. Both chains are kept as they are observed by feed
clients: an item dated only by its modification time sorts last but is
still grouped under its modification day.
"""

from __future__ import annotations

import re
from datetime import UTC, datetime
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from photo_feed.graph.models import DriveItem

EPOCH = datetime(1970, 1, 1, tzinfo=UTC)

_FILENAME_DATE = re.compile(r"^(\d{4})(\d{2})(\d{2})")


def filename_date(name: str) -> datetime | None:
    """Return noon UTC of a ``YYYYMMDD`` filename prefix, e.g. ``20240501_101500.jpg``.

    Prefixes that are not a real calendar date (``20241399...``) are ignored.
    """
    match = _FILENAME_DATE.match(name)
    if match is None:
        return None
    year, month, day = (int(part) for part in match.groups())
    try:
        return datetime(year, month, day, 12, tzinfo=UTC)
    except ValueError:
        return None


def sort_timestamp(item: DriveItem) -> datetime | None:
    """Filename date, then capture time, then creation time."""
    return filename_date(item.name) or item.taken_at or item.created_at


def group_timestamp(item: DriveItem) -> datetime | None:
    """Like sort_timestamp, with the last-modified time as a final fallback."""
    return sort_timestamp(item) or item.modified_at
