import pytest

import config
from config import ConfigurationError, load_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ("PRODUCTS_DB_FILE", "API_KEYS", "LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setattr(config, "load_dotenv", lambda: False)
    monkeypatch.setattr(config, "_settings", None)


def test_defaults():
    settings = load_settings()

    assert settings.db_file == "products.db"
    assert settings.api_keys == []
    assert settings.log_level == "INFO"


def test_values_from_environment(monkeypatch):
    monkeypatch.setenv("PRODUCTS_DB_FILE", "/tmp/shop.db")
    monkeypatch.setenv("API_KEYS", " a1 , ,b2,")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = load_settings()

    assert settings.db_file == "/tmp/shop.db"
    assert settings.api_keys == ["a1", "b2"]
    assert settings.log_level == "DEBUG"


def test_invalid_log_level(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "chatty")

    with pytest.raises(ConfigurationError):
        load_settings()


def test_get_settings_is_cached():
    assert config.get_settings() is config.get_settings()


def test_parse_api_keys():
    assert config.parse_api_keys(" a1 , ,b2,") == ["a1", "b2"]
    assert config.parse_api_keys("") == []
