import pytest

from vitedemo.settings import get_settings


def test_settings_read_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("API_PORT", "9090")
    monkeypatch.setenv("USERS_API_TIMEOUT_SECONDS", "2.5")
    get_settings.cache_clear()

    config = get_settings()

    assert config.api_port == 9090
    assert config.users_api_timeout_seconds == 2.5
    assert config.database_url == "sqlite+pysqlite:///:memory:"


def test_client_timeout_defaults_to_none() -> None:
    assert get_settings().users_api_timeout_seconds is None
