"""OneDrive folder lookup and paginated child listing."""

from __future__ import annotations

import logging
from urllib.parse import quote

from photo_feed.graph.client import GRAPH_BASE_URL, GraphClient
from photo_feed.graph.models import (
    FIELD_FOLDER,
    FIELD_NAME,
    ODATA_NEXT_LINK,
    ODATA_VALUE,
    DriveItem,
    parse_drive_item,
)

logger = logging.getLogger(__name__)

PAGE_SIZE = 200
SELECT_FIELDS = (
    "id",
    "name",
    "createdDateTime",
    "lastModifiedDateTime",
    "file",
    "folder",
    "photo",
    "image",
)


class DriveReader:
    """Read-only access to the signed-in user's OneDrive."""

    def __init__(self, graph_client: GraphClient) -> None:
        """Initialise the drive reader.

        Args:
            graph_client: GraphClient bound to an access token.
        """
        self._graph = graph_client

    def find_folder(self, folder_name: str) -> DriveItem | None:
        """Locate a folder by exact display name.

        Calls GET /me/drive/root/search(q='<name>') and scans the results
        for an item whose name matches exactly and that carries a folder
        facet. Search is fuzzy and also returns files, so everything else is
        skipped. When several folders share the name, the first one wins.

        Args:
            folder_name: Display name of the folder to look for.

        Returns:
            The matching folder as a DriveItem, or None if there is none.

        Raises:
            UpstreamError: If the search request fails.
        """
        # OData string literals escape a single quote by doubling it.
        query = quote(folder_name.replace("'", "''"), safe="")
        response = self._graph.get(f"/me/drive/root/search(q='{query}')")

        for raw in response.get(ODATA_VALUE, []):
            if raw.get(FIELD_NAME) == folder_name and FIELD_FOLDER in raw:
                folder = parse_drive_item(raw)
                logger.info(
                    "[find_folder] folder found; folder_name:%s;folder_id:%s",
                    folder_name,
                    folder.id,
                )
                return folder

        logger.warning("[find_folder] folder not found; folder_name:%s", folder_name)
        return None

    def list_children(self, folder_id: str) -> list[DriveItem]:
        """Return every direct child of a folder.

        Requests pages of up to PAGE_SIZE items and follows @odata.nextLink
        until it is absent. Pages are fetched one after another. A failure on
        any page aborts the whole listing.

        Args:
            folder_id: The OneDrive item ID of the folder to enumerate.

        Returns:
            All children in the order Graph returned them.

        Raises:
            UpstreamError: If any page request fails.
        """
        select = ",".join(SELECT_FIELDS)
        next_path: str | None = (
            f"/me/drive/items/{folder_id}/children?$top={PAGE_SIZE}&$select={select}"
        )

        items: list[DriveItem] = []
        page_count = 0
        while next_path is not None:
            response = self._graph.get(next_path)
            page_count += 1
            items.extend(parse_drive_item(raw) for raw in response.get(ODATA_VALUE, []))

            next_link = response.get(ODATA_NEXT_LINK)
            next_path = self._relative_path(next_link) if next_link else None

        logger.info(
            "[list_children] listing complete; folder_id:%s;item_count:%d;page_count:%d",
            folder_id,
            len(items),
            page_count,
        )
        return items

    @staticmethod
    def _relative_path(full_url: str) -> str:
        """Convert a full Graph API URL to a relative path for GraphClient.get()."""
        prefix = GRAPH_BASE_URL
        if full_url.startswith(prefix):
            return full_url[len(prefix) :]
        raise ValueError(f"Unexpected @odata.nextLink outside the Graph API: {full_url}")
