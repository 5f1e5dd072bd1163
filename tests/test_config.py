"""Tests for environment-driven settings."""

import pytest
from pydantic import ValidationError

from readgraph.config import Settings, get_settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("READGRAPH_DEFAULT_K_NEIGHBOURS", raising=False)
    settings = Settings()
    assert settings.default_k_neighbours == 2
    assert settings.log_format == "text"


def test_env_override(monkeypatch):
    monkeypatch.setenv("READGRAPH_DEFAULT_K_NEIGHBOURS", "5")
    monkeypatch.setenv("READGRAPH_LOG_FORMAT", "JSON")
    settings = Settings()
    assert settings.default_k_neighbours == 5
    assert settings.log_format == "json"


def test_negative_k_rejected(monkeypatch):
    monkeypatch.setenv("READGRAPH_DEFAULT_K_NEIGHBOURS", "-1")
    with pytest.raises(ValidationError):
        Settings()


def test_get_settings_is_cached():
    get_settings.cache_clear()
    assert get_settings() is get_settings()
