"""Feed service — orchestrates token, folder lookup, listing and grouping."""

from __future__ import annotations

import logging
import random
from collections.abc import Callable
from datetime import UTC, datetime
from typing import TYPE_CHECKING
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from photo_feed.config import DEFAULT_DESCRIPTION_TEMPLATE, ConfigurationError
from photo_feed.graph.auth import TokenProvider, token_provider_from_config
from photo_feed.graph.client import GraphClient, graph_client_from_config
from photo_feed.graph.drive import DriveReader
from photo_feed.photos.filters import filter_images
from photo_feed.photos.grouping import group_into_posts
from photo_feed.photos.models import Feed
from photo_feed.photos.profile import profile_from_config
from photo_feed.photos.sorting import sort_newest_first

if TYPE_CHECKING:
    from datetime import tzinfo

    from photo_feed.config import AppConfig
    from photo_feed.photos.models import Profile

logger = logging.getLogger(__name__)


class NotFoundError(Exception):
    """Raised when the configured folder does not exist in the drive."""

    def __init__(self, folder_name: str) -> None:
        super().__init__(f'Folder "{folder_name}" not found')
        self.folder_name = folder_name


class FeedService:
    """Builds the photo feed for one folder of the drive."""

    def __init__(
        self,
        token_provider: TokenProvider,
        client_factory: Callable[[str], GraphClient],
        folder_name: str,
        profile: Profile,
        tz: tzinfo = UTC,
        description_template: str = DEFAULT_DESCRIPTION_TEMPLATE,
        rng: random.Random | None = None,
    ) -> None:
        """Initialise the feed service.

        Args:
            token_provider: Exchanges the refresh token for an access token.
            client_factory: Builds a GraphClient for a given access token.
            folder_name: Display name of the folder to publish.
            profile: Static profile used for the post author fields.
            tz: Time zone in which calendar days are taken.
            description_template: Post caption template.
            rng: Source of the decorative like counts.
        """
        self._tokens = token_provider
        self._client_factory = client_factory
        self._folder_name = folder_name
        self._profile = profile
        self._tz = tz
        self._description_template = description_template
        self._rng = rng

    def build_feed(self, now: datetime | None = None) -> Feed:
        """Run the full pipeline.

        Steps:
            1. Acquire an access token.
            2. Resolve the folder by name.
            3. List every child of the folder.
            4. Keep supported images only.
            5. Sort newest first.
            6. Group into posts.

        Args:
            now: Reference time for relative post ages.

        Returns:
            Feed whose total_photos counts every image that passed the filter,
            including images that no post shows for lack of a timestamp.

        Raises:
            AuthError: If the token exchange fails.
            NotFoundError: If the folder does not exist.
            UpstreamError: If a Graph call fails.
        """
        logger.info("[build_feed] starting feed pipeline; folder_name:%s", self._folder_name)
        drive = DriveReader(self._client_factory(self._tokens.acquire_token()))

        folder = drive.find_folder(self._folder_name)
        if folder is None:
            raise NotFoundError(self._folder_name)

        items = drive.list_children(folder.id)
        images = sort_newest_first(filter_images(items))
        logger.info(
            "[build_feed] images selected; item_count:%d;image_count:%d",
            len(items),
            len(images),
        )

        posts = group_into_posts(
            images,
            self._profile,
            tz=self._tz,
            now=now,
            rng=self._rng,
            description_template=self._description_template,
        )
        logger.info("[build_feed] pipeline complete; post_count:%d", len(posts))
        return Feed(posts=posts, total_photos=len(images))


def resolve_timezone(name: str) -> tzinfo:
    """Look up an IANA time zone.

    Raises:
        ConfigurationError: If the zone is unknown.
    """
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise ConfigurationError(f"Unknown time zone: {name}") from exc


def feed_service_from_config(config: AppConfig) -> FeedService:
    """Construct a FeedService from application configuration.

    Args:
        config: Application configuration instance.

    Returns:
        Configured FeedService instance.

    Raises:
        ConfigurationError: If the folder name or credentials are missing,
            or the time zone or profile file is invalid.
    """
    if not config.folder_name:
        raise ConfigurationError("PF_FOLDER_NAME not configured")
    return FeedService(
        token_provider=token_provider_from_config(config),
        client_factory=lambda token: graph_client_from_config(token, config),
        folder_name=config.folder_name,
        profile=profile_from_config(config),
        tz=resolve_timezone(config.timezone),
        description_template=config.description_template,
    )
