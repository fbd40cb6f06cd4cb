"""Image proxy — downloads a drive image and re-encodes it for the browser."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING
from urllib.parse import quote

from photo_feed.graph.auth import TokenProvider, token_provider_from_config
from photo_feed.graph.client import GraphClient, graph_client_from_config
from photo_feed.imaging.transcoder import DEFAULT_QUALITY, transcode_to_webp

if TYPE_CHECKING:
    from photo_feed.config import AppConfig

logger = logging.getLogger(__name__)


class ImageProxy:
    """Streams one drive item through the token pipeline as WebP."""

    def __init__(
        self,
        token_provider: TokenProvider,
        client_factory: Callable[[str], GraphClient],
        quality: int = DEFAULT_QUALITY,
    ) -> None:
        self._tokens = token_provider
        self._client_factory = client_factory
        self._quality = quality

    def fetch_webp(self, item_id: str) -> bytes:
        """Download the content of ``item_id`` and return it as WebP.

        Raises:
            AuthError: If the token exchange fails.
            UpstreamError: If the content download fails.
            TranscodeError: If the content is not a decodable image.
        """
        client = self._client_factory(self._tokens.acquire_token())
        raw = client.get_content(f"/me/drive/items/{quote(item_id, safe='')}/content")
        logger.info("[fetch_webp] content downloaded; item_id:%s;bytes:%d", item_id, len(raw))
        return transcode_to_webp(raw, quality=self._quality)


def image_proxy_from_config(config: AppConfig) -> ImageProxy:
    """Construct an ImageProxy from application configuration.

    Raises:
        ConfigurationError: If the client ID or refresh token is missing.
    """
    return ImageProxy(
        token_provider=token_provider_from_config(config),
        client_factory=lambda token: graph_client_from_config(token, config),
        quality=config.webp_quality,
    )
