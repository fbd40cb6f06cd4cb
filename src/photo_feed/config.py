"""Application configuration loaded from environment variables."""

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_AUTHORITY = "https://login.microsoftonline.com/common"
DEFAULT_PROFILE_PATH = str(Path(__file__).parent / "data" / "user-data.json")
DEFAULT_DESCRIPTION_TEMPLATE = "Fotitos del {date}"


class ConfigurationError(Exception):
    """Raised when a required setting is missing or a setting is malformed."""


@dataclass(frozen=True)
class AppConfig:
    """Centralized application configuration.

    Secrets default to empty strings so that the service can still start
    and answer health checks; the components that need them raise
    ConfigurationError when they are used without being set.
    """

    # Secrets and deployment settings — validated where they are consumed
    client_id: str = ""
    refresh_token: str = ""
    folder_name: str = ""

    # Domain constants — defaults provided, overridable via env
    authority: str = DEFAULT_AUTHORITY
    profile_path: str = DEFAULT_PROFILE_PATH
    timezone: str = "UTC"
    description_template: str = DEFAULT_DESCRIPTION_TEMPLATE
    webp_quality: int = 85
    http_timeout: int = 30


def _int_setting(name: str, default: int) -> int:
    raw = os.environ.get(name, str(default))
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from exc


def load_config() -> AppConfig:
    """Construct an AppConfig from environment variables.

    Environment variables:
        PF_CLIENT_ID: Azure AD application (client) ID.
        PF_REFRESH_TOKEN: Long-lived refresh token for the OneDrive account.
        PF_FOLDER_NAME: Display name of the OneDrive folder to publish.
        PF_AUTHORITY: OAuth2 authority base URL (default: the common endpoint).
        PF_PROFILE_PATH: JSON file with the current user and suggested users.
        PF_TIMEZONE: IANA zone used to bucket photos into calendar days (default: UTC).
        PF_DESCRIPTION_TEMPLATE: Post description, ``{date}`` is substituted.
        PF_WEBP_QUALITY: WebP quality used by the image proxy (default: 85).
        PF_HTTP_TIMEOUT: Socket timeout in seconds for Graph calls (default: 30).

    Returns:
        Configured AppConfig instance.

    Raises:
        ConfigurationError: If a numeric setting is not an integer.
    """
    return AppConfig(
        client_id=os.environ.get("PF_CLIENT_ID", ""),
        refresh_token=os.environ.get("PF_REFRESH_TOKEN", ""),
        folder_name=os.environ.get("PF_FOLDER_NAME", ""),
        authority=os.environ.get("PF_AUTHORITY", DEFAULT_AUTHORITY).rstrip("/"),
        profile_path=os.environ.get("PF_PROFILE_PATH", DEFAULT_PROFILE_PATH),
        timezone=os.environ.get("PF_TIMEZONE", "UTC"),
        description_template=os.environ.get(
            "PF_DESCRIPTION_TEMPLATE", DEFAULT_DESCRIPTION_TEMPLATE
        ),
        webp_quality=_int_setting("PF_WEBP_QUALITY", 85),
        http_timeout=_int_setting("PF_HTTP_TIMEOUT", 30),
    )
