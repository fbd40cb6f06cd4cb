"""Refresh-token exchange for Microsoft Graph access tokens via MSAL."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import msal

from photo_feed.config import ConfigurationError
from photo_feed.graph.client import AuthError

if TYPE_CHECKING:
    from photo_feed.config import AppConfig

logger = logging.getLogger(__name__)

# MSAL adds the reserved offline_access/openid/profile scopes on its own.
GRAPH_SCOPES = ["User.Read", "Files.Read", "Files.Read.All"]


class TokenProvider:
    """Redeems a stored refresh token for a short-lived Graph access token.

    Nothing is cached between calls: every feed request and every image
    request performs its own exchange.
    """

    def __init__(self, client_id: str, refresh_token: str, authority: str) -> None:
        """Validate credentials and initialise the MSAL public client application.

        Args:
            client_id: Azure AD application (client) ID.
            refresh_token: Long-lived refresh token for the OneDrive account.
            authority: OAuth2 authority base URL, e.g. the common endpoint.

        Raises:
            ConfigurationError: If the client ID or refresh token is empty.
        """
        if not client_id or not refresh_token:
            raise ConfigurationError("Missing PF_CLIENT_ID or PF_REFRESH_TOKEN in environment")
        self._refresh_token = refresh_token
        self._app = msal.PublicClientApplication(client_id=client_id, authority=authority)

    def acquire_token(self) -> str:
        """Exchange the refresh token at the authority's token endpoint.

        Returns:
            Access token string.

        Raises:
            AuthError: If the token endpoint rejects the exchange.
        """
        result: dict[str, Any] = (
            self._app.acquire_token_by_refresh_token(self._refresh_token, scopes=GRAPH_SCOPES)
            or {}
        )
        if "access_token" not in result:
            error = result.get("error", "unknown_error")
            description = result.get("error_description", "No description provided")
            logger.error(
                "[acquire_token] refresh token exchange failed; error:%s;description:%s",
                error,
                description,
            )
            raise AuthError(f"Failed to refresh access token: {error}: {description}")
        logger.info("[acquire_token] access token acquired")
        return str(result["access_token"])


def token_provider_from_config(config: AppConfig) -> TokenProvider:
    """Construct a TokenProvider from application configuration.

    Args:
        config: Application configuration instance.

    Returns:
        Configured TokenProvider instance.

    Raises:
        ConfigurationError: If the client ID or refresh token is not configured.
    """
    return TokenProvider(
        client_id=config.client_id,
        refresh_token=config.refresh_token,
        authority=config.authority,
    )
