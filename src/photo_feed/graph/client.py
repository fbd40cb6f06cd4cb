"""Microsoft Graph API client authenticated with a bearer access token."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any
from urllib import request as urllib_request
from urllib.error import HTTPError

if TYPE_CHECKING:
    from photo_feed.config import AppConfig

logger = logging.getLogger(__name__)

GRAPH_BASE_URL = "https://graph.microsoft.com/v1.0"
DEFAULT_TIMEOUT = 30


class AuthError(Exception):
    """Raised when the refresh token cannot be exchanged for an access token."""


class UpstreamError(Exception):
    """Raised when the Graph API returns a non-2xx response."""

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(f"Graph API error {status_code}: {message}")
        self.status_code = status_code
        self.message = message


class GraphClient:
    """Client for Microsoft Graph API calls made on behalf of one access token."""

    def __init__(self, access_token: str, timeout: int = DEFAULT_TIMEOUT) -> None:
        """Initialise the client.

        Args:
            access_token: Bearer token obtained from the TokenProvider.
            timeout: Socket timeout in seconds for each request.
        """
        self._access_token = access_token
        self._timeout = timeout

    def get(self, path: str) -> dict[str, Any]:
        """Perform an authenticated GET request and decode the JSON body.

        Args:
            path: URL path relative to GRAPH_BASE_URL (must start with '/').

        Returns:
            Parsed JSON response body as a dict.

        Raises:
            UpstreamError: If the API returns a non-2xx status code.
        """
        body = self._send(path, accept="application/json")
        return json.loads(body)  # type: ignore[no-any-return]

    def get_content(self, path: str) -> bytes:
        """Perform an authenticated GET request and return the raw body.

        Graph answers ``/content`` requests with a redirect to a pre-signed
        download URL, which urllib follows.

        Args:
            path: URL path relative to GRAPH_BASE_URL (must start with '/').

        Returns:
            Raw response bytes.

        Raises:
            UpstreamError: If the API returns a non-2xx status code.
        """
        return self._send(path, accept="*/*")

    def _send(self, path: str, accept: str) -> bytes:
        url = f"{GRAPH_BASE_URL}{path}"
        req = urllib_request.Request(
            url,
            headers={
                "Authorization": f"Bearer {self._access_token}",
                "Accept": accept,
            },
            method="GET",
        )
        try:
            with urllib_request.urlopen(req, timeout=self._timeout) as resp:
                return resp.read()  # type: ignore[no-any-return]
        except HTTPError as exc:
            raw = exc.read()
            try:
                detail = json.loads(raw).get("error", {}).get("message", exc.reason)
            except Exception:
                detail = exc.reason
            logger.warning("[_send] graph request failed; status:%d;path:%s", exc.code, path)
            raise UpstreamError(exc.code, str(detail)) from exc


def graph_client_from_config(access_token: str, config: AppConfig) -> GraphClient:
    """Construct a GraphClient from an access token and application configuration.

    Args:
        access_token: Bearer token obtained from the TokenProvider.
        config: Application configuration instance.

    Returns:
        Configured GraphClient instance.
    """
    return GraphClient(access_token=access_token, timeout=config.http_timeout)
