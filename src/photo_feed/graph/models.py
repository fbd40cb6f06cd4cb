"""Data models for Microsoft Graph API drive items."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any

# Graph API JSON field names
FIELD_ID = "id"
FIELD_NAME = "name"
FIELD_FOLDER = "folder"
FIELD_FILE = "file"
FIELD_MIME_TYPE = "mimeType"
FIELD_IMAGE = "image"
FIELD_WIDTH = "width"
FIELD_HEIGHT = "height"
FIELD_PHOTO = "photo"
FIELD_TAKEN_DATE_TIME = "takenDateTime"
FIELD_CREATED_DATE_TIME = "createdDateTime"
FIELD_LAST_MODIFIED_DATE_TIME = "lastModifiedDateTime"

# OData response keys
ODATA_NEXT_LINK = "@odata.nextLink"
ODATA_VALUE = "value"


@dataclass
class DriveItem:
    """Represents a single item (file or folder) from a OneDrive listing."""

    id: str
    name: str
    is_folder: bool = False
    mime_type: str | None = None
    width: int | None = None
    height: int | None = None
    taken_at: datetime | None = None
    created_at: datetime | None = None
    modified_at: datetime | None = None

    @property
    def is_file(self) -> bool:
        return not self.is_folder

    @property
    def is_landscape(self) -> bool:
        """True when width >= height; missing dimensions count as zero."""
        return (self.width or 0) >= (self.height or 0)


def parse_timestamp(value: Any) -> datetime | None:
    """Parse a Graph ISO 8601 timestamp into an aware UTC datetime.

    Returns None for missing or unparseable values.
    """
    if not isinstance(value, str) or not value:
        return None
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed.astimezone(UTC)


def parse_drive_item(raw: dict[str, Any]) -> DriveItem:
    """Map a raw Graph API item dict to a DriveItem dataclass."""
    file_facet = raw.get(FIELD_FILE) or {}
    image_facet = raw.get(FIELD_IMAGE) or {}
    photo_facet = raw.get(FIELD_PHOTO) or {}
    return DriveItem(
        id=raw.get(FIELD_ID, ""),
        name=raw.get(FIELD_NAME, ""),
        is_folder=FIELD_FOLDER in raw,
        mime_type=file_facet.get(FIELD_MIME_TYPE) or None,
        width=image_facet.get(FIELD_WIDTH),
        height=image_facet.get(FIELD_HEIGHT),
        taken_at=parse_timestamp(photo_facet.get(FIELD_TAKEN_DATE_TIME)),
        created_at=parse_timestamp(raw.get(FIELD_CREATED_DATE_TIME)),
        modified_at=parse_timestamp(raw.get(FIELD_LAST_MODIFIED_DATE_TIME)),
    )
