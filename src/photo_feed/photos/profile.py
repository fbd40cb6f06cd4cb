"""Static user profile loaded from a JSON file."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from photo_feed.config import ConfigurationError
from photo_feed.photos.models import CurrentUser, Profile, SuggestedUser

if TYPE_CHECKING:
    from photo_feed.config import AppConfig

logger = logging.getLogger(__name__)


def parse_profile(data: dict[str, Any]) -> Profile:
    """Map the ``currentUser`` / ``suggestedUsers`` JSON document to a Profile.

    Raises:
        ConfigurationError: If ``currentUser`` or one of its fields is missing.
    """
    try:
        raw_user = data["currentUser"]
        current_user = CurrentUser(
            username=raw_user["username"],
            full_name=raw_user.get("fullName", ""),
            avatar=raw_user["avatar"],
        )
        suggested = [
            SuggestedUser(
                username=raw["username"],
                avatar=raw.get("avatar", ""),
                followed_by=raw.get("followedBy", ""),
            )
            for raw in data.get("suggestedUsers", [])
        ]
    except (KeyError, TypeError) as exc:
        raise ConfigurationError(f"Malformed profile document: {exc}") from exc
    return Profile(current_user=current_user, suggested_users=suggested)


def load_profile(path: str) -> Profile:
    """Read and parse a profile JSON file.

    Args:
        path: Filesystem path of the JSON document.

    Returns:
        Parsed Profile.

    Raises:
        ConfigurationError: If the file is missing, not JSON, or malformed.
    """
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        logger.error("[load_profile] cannot read profile; path:%s", path)
        raise ConfigurationError(f"Cannot read profile file {path}: {exc}") from exc
    return parse_profile(data)


def profile_from_config(config: AppConfig) -> Profile:
    """Load the profile file named by the application configuration."""
    return load_profile(config.profile_path)
