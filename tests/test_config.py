"""Unit tests for configuration loading."""

import copy
import re
from pathlib import Path

import pytest

from backend.config import (
    CONFIG_PATH,
    Settings,
    SettingsError,
    _extract_settings,
    _load_config_file,
    get_settings,
)


@pytest.fixture
def raw_config() -> dict:
    """Parsed shipped settings.toml."""
    return _load_config_file(CONFIG_PATH)


class TestSettings:
    """Tests for settings extraction and validation."""

    def test_shipped_defaults(self) -> None:
        settings = get_settings()

        assert settings.algorithm == "HS256"
        assert settings.access_token_expire_minutes == 1440
        assert settings.api_prefix == "/api"
        assert settings.membership_mode == "additive"
        assert settings.enroll_creator is True

    def test_get_settings_is_singleton(self) -> None:
        assert get_settings() is get_settings()

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(SettingsError, match="missing"):
            _load_config_file(tmp_path / "absent.toml")

    def test_missing_section(self, raw_config: dict) -> None:
        raw = copy.deepcopy(raw_config)
        del raw["security"]

        with pytest.raises(SettingsError, match=r"\[security\]"):
            _extract_settings(raw)

    def test_missing_key(self, raw_config: dict) -> None:
        raw = copy.deepcopy(raw_config)
        del raw["teams"]["membership_mode"]

        with pytest.raises(SettingsError, match="teams.membership_mode"):
            _extract_settings(raw)

    def test_unknown_membership_mode(self, raw_config: dict) -> None:
        raw = copy.deepcopy(raw_config)
        raw["teams"]["membership_mode"] = "merge"

        with pytest.raises(SettingsError, match="membership_mode"):
            _extract_settings(raw)

    def test_unknown_time_zone(self, raw_config: dict) -> None:
        raw = copy.deepcopy(raw_config)
        raw["app"]["timezone"] = "Mars/Olympus"

        with pytest.raises(SettingsError, match="Mars/Olympus"):
            _extract_settings(raw)

    def test_logging_section_is_optional(self, raw_config: dict) -> None:
        raw = copy.deepcopy(raw_config)
        raw.pop("logging", None)
        assert _extract_settings(raw)["log_dir"] is None

        raw["logging"] = {"directory": "logs"}
        assert _extract_settings(raw)["log_dir"] == "logs"

    def test_prefix_trailing_slash_is_stripped(self, raw_config: dict) -> None:
        raw = copy.deepcopy(raw_config)
        raw["api"]["prefix"] = "/api/"

        assert _extract_settings(raw)["api_prefix"] == "/api"

    def test_cors_wildcards_become_patterns(self, raw_config: dict) -> None:
        raw = copy.deepcopy(raw_config)
        raw["cors"]["origins"] = ["*", "http://localhost:3000", "http://192.168.1.*:8080"]
        settings = Settings(**_extract_settings(raw))

        origins = settings.cors_origins_list

        assert origins[0] == "*"
        assert origins[1] == "http://localhost:3000"
        assert isinstance(origins[2], re.Pattern)
        assert origins[2].fullmatch("http://192.168.1.20:8080")
