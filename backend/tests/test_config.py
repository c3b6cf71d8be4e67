"""Settings - defaults, environment overrides, validation."""

import pytest
from pydantic import ValidationError

from zodiac_api.config import Settings, get_settings


def test_defaults(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    settings = Settings()
    assert settings.data_file == "data.json"
    assert settings.entry_retention_cap == 100
    assert settings.recent_entries_limit == 10
    assert settings.max_age_years == 120
    assert settings.rate_limit_max_requests == 100
    assert settings.rate_limit_window_seconds == 900
    assert settings.cors_origins == ["*"]
    assert settings.port == 3001


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("ENTRY_RETENTION_CAP", "5")
    monkeypatch.setenv("RECENT_ENTRIES_LIMIT", "3")
    monkeypatch.setenv("CORS_ORIGINS", '["http://localhost:5173"]')
    settings = Settings()
    assert settings.entry_retention_cap == 5
    assert settings.recent_entries_limit == 3
    assert settings.cors_origins == ["http://localhost:5173"]


def test_retention_cap_must_be_positive():
    with pytest.raises(ValidationError):
        Settings(entry_retention_cap=0)


def test_log_format_validated_and_normalized():
    assert Settings(log_format="TEXT").log_format == "text"
    with pytest.raises(ValidationError):
        Settings(log_format="xml")


def test_get_settings_is_cached():
    get_settings.cache_clear()
    try:
        assert get_settings() is get_settings()
    finally:
        get_settings.cache_clear()
