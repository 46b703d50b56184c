from pathlib import Path

import pytest
from pydantic import ValidationError

from testbook.config.settings import Settings, get_settings


def test_defaults(monkeypatch):
    for name in ("ENV", "LOG_LEVEL", "LOG_FORMAT", "USER_API_BASE_URL", "USER_API_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.ENV == "development"
    assert settings.LOG_LEVEL == "INFO"
    assert settings.LOG_FORMAT == "text"
    assert settings.LOG_DIR == Path("logs")
    assert settings.USER_API_BASE_URL == "https://api.example.com"
    assert settings.USER_API_TIMEOUT == 5.0


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", " debug ")
    monkeypatch.setenv("LOG_FORMAT", "JSON")
    monkeypatch.setenv("USER_API_BASE_URL", "https://users.internal/api/")
    monkeypatch.setenv("USER_API_TIMEOUT", "2.5")

    settings = get_settings()

    assert settings.LOG_LEVEL == "DEBUG"
    assert settings.LOG_FORMAT == "json"
    assert settings.USER_API_BASE_URL == "https://users.internal/api"
    assert settings.USER_API_TIMEOUT == 2.5


def test_get_settings_is_cached():
    assert get_settings() is get_settings()


@pytest.mark.parametrize("field, value", [
    ("LOG_LEVEL", "verbose"),
    ("LOG_FORMAT", "xml"),
    ("ENV", "qa"),
    ("USER_API_TIMEOUT", 0),
    ("USER_API_TIMEOUT", -1.5),
])
def test_rejects_invalid_values(field, value):
    with pytest.raises(ValidationError):
        Settings(_env_file=None, **{field: value})
