"""Unit tests for orchestration/image_proxy.py — ImageProxy."""

import io
from unittest.mock import MagicMock, patch

import pytest
from PIL import Image

from photo_feed.config import AppConfig, ConfigurationError
from photo_feed.graph.client import AuthError, UpstreamError
from photo_feed.imaging.transcoder import TranscodeError
from photo_feed.orchestration.image_proxy import ImageProxy, image_proxy_from_config


def _make_proxy() -> tuple[ImageProxy, MagicMock, MagicMock]:
    """Return (proxy, mock_token_provider, mock_graph_client)."""
    mock_tokens = MagicMock()
    mock_tokens.acquire_token.return_value = "fake-token"
    mock_graph = MagicMock()
    proxy = ImageProxy(token_provider=mock_tokens, client_factory=lambda token: mock_graph)
    return proxy, mock_tokens, mock_graph


def _jpeg() -> bytes:
    buffer = io.BytesIO()
    Image.new("RGB", (30, 20), (1, 2, 3)).save(buffer, format="JPEG")
    return buffer.getvalue()


class TestFetchWebp:
    def test_downloads_content_and_transcodes(self) -> None:
        proxy, mock_tokens, mock_graph = _make_proxy()
        mock_graph.get_content.return_value = _jpeg()

        body = proxy.fetch_webp("ITEM!1")

        mock_tokens.acquire_token.assert_called_once()
        mock_graph.get_content.assert_called_once_with("/me/drive/items/ITEM%211/content")
        image = Image.open(io.BytesIO(body))
        assert image.format == "WEBP"
        assert image.size == (30, 20)

    def test_propagates_auth_error(self) -> None:
        proxy, mock_tokens, mock_graph = _make_proxy()
        mock_tokens.acquire_token.side_effect = AuthError("nope")

        with pytest.raises(AuthError):
            proxy.fetch_webp("x")

        mock_graph.get_content.assert_not_called()

    def test_propagates_upstream_error(self) -> None:
        proxy, _, mock_graph = _make_proxy()
        mock_graph.get_content.side_effect = UpstreamError(404, "itemNotFound")

        with pytest.raises(UpstreamError):
            proxy.fetch_webp("missing")

    def test_non_image_content_raises_transcode_error(self) -> None:
        proxy, _, mock_graph = _make_proxy()
        mock_graph.get_content.return_value = b"%PDF-1.7"

        with pytest.raises(TranscodeError):
            proxy.fetch_webp("doc")


class TestImageProxyFromConfig:
    def test_uses_configured_quality(self) -> None:
        config = AppConfig(client_id="cid", refresh_token="rt", webp_quality=60)
        with patch("photo_feed.graph.auth.msal.PublicClientApplication"):
            proxy = image_proxy_from_config(config)
        assert proxy._quality == 60

    def test_requires_credentials(self) -> None:
        with pytest.raises(ConfigurationError):
            image_proxy_from_config(AppConfig())
