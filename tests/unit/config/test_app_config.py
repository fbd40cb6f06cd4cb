"""Unit tests for config.py — AppConfig and load_config()."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from photo_feed.config import (
    DEFAULT_AUTHORITY,
    AppConfig,
    ConfigurationError,
    load_config,
)

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

_ENV = {
    "PF_CLIENT_ID": "test-client-id",
    "PF_REFRESH_TOKEN": "test-refresh-token",
    "PF_FOLDER_NAME": "Fotitos",
}


# ---------------------------------------------------------------------------
# AppConfig tests
# ---------------------------------------------------------------------------


class TestAppConfig:
    def test_defaults(self) -> None:
        config = AppConfig()
        assert config.client_id == ""
        assert config.folder_name == ""
        assert config.authority == "https://login.microsoftonline.com/common"
        assert config.timezone == "UTC"
        assert config.webp_quality == 85
        assert config.description_template == "Fotitos del {date}"

    def test_default_profile_path_points_at_bundled_file(self) -> None:
        assert Path(AppConfig().profile_path).is_file()

    def test_is_frozen(self) -> None:
        config = AppConfig()
        with pytest.raises(AttributeError):
            config.folder_name = "Other"  # type: ignore[misc]


# ---------------------------------------------------------------------------
# load_config tests
# ---------------------------------------------------------------------------


class TestLoadConfig:
    def test_reads_secrets_and_folder_name(self) -> None:
        with patch.dict(os.environ, _ENV, clear=True):
            config = load_config()
        assert config.client_id == "test-client-id"
        assert config.refresh_token == "test-refresh-token"
        assert config.folder_name == "Fotitos"

    def test_missing_values_become_empty_strings(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            config = load_config()
        assert config.client_id == ""
        assert config.refresh_token == ""
        assert config.folder_name == ""
        assert config.authority == DEFAULT_AUTHORITY

    def test_authority_trailing_slash_is_stripped(self) -> None:
        env = {**_ENV, "PF_AUTHORITY": "https://login.microsoftonline.com/consumers/"}
        with patch.dict(os.environ, env, clear=True):
            config = load_config()
        assert config.authority == "https://login.microsoftonline.com/consumers"

    def test_reads_overrides(self) -> None:
        env = {
            **_ENV,
            "PF_TIMEZONE": "Europe/Madrid",
            "PF_WEBP_QUALITY": "70",
            "PF_HTTP_TIMEOUT": "5",
            "PF_DESCRIPTION_TEMPLATE": "Photos from {date}",
            "PF_PROFILE_PATH": "/tmp/profile.json",
        }
        with patch.dict(os.environ, env, clear=True):
            config = load_config()
        assert config.timezone == "Europe/Madrid"
        assert config.webp_quality == 70
        assert config.http_timeout == 5
        assert config.description_template == "Photos from {date}"
        assert config.profile_path == "/tmp/profile.json"

    def test_raises_configuration_error_for_non_integer_quality(self) -> None:
        env = {**_ENV, "PF_WEBP_QUALITY": "high"}
        with patch.dict(os.environ, env, clear=True), pytest.raises(
            ConfigurationError, match="PF_WEBP_QUALITY"
        ):
            load_config()
