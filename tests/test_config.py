import pytest

from order_ingest.config import Settings, get_settings, parse_log_level
from order_ingest.errors import ConfigError


def test_defaults(monkeypatch):
    monkeypatch.delenv("ORDER_INGEST_ENCODING", raising=False)
    monkeypatch.delenv("ORDER_INGEST_LOG_LEVEL", raising=False)

    settings = Settings.from_env()

    assert settings.encoding == "utf-8"
    assert settings.log_level == "WARNING"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("ORDER_INGEST_ENCODING", "latin-1")
    monkeypatch.setenv("ORDER_INGEST_LOG_LEVEL", "debug")

    settings = Settings.from_env()

    assert settings.encoding == "latin-1"
    assert settings.log_level == "DEBUG"


def test_invalid_values(monkeypatch):
    monkeypatch.setenv("ORDER_INGEST_ENCODING", "no-such-codec")
    with pytest.raises(ConfigError):
        Settings.from_env()
    with pytest.raises(ConfigError):
        parse_log_level("chatty")


def test_get_settings_reads_environment_lazily(monkeypatch):
    get_settings.cache_clear()
    monkeypatch.setenv("ORDER_INGEST_LOG_LEVEL", "info")
    try:
        assert get_settings().log_level == "INFO"
        assert get_settings() is get_settings()
    finally:
        get_settings.cache_clear()
