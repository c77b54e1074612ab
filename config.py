# config.py
"""Application settings.

Values come from the environment, with a `.env` file in the working
directory loaded first.
"""
import logging
import os
from dataclasses import dataclass
from typing import List, Optional

from dotenv import load_dotenv


class ConfigurationError(Exception):
    """Raised when a setting is present but invalid."""


@dataclass(frozen=True)
class Settings:
    db_file: str
    api_keys: List[str]
    log_level: str


def parse_api_keys(raw: str) -> List[str]:
    return [k.strip() for k in raw.split(",") if k.strip()]


def _parse_log_level(raw: str) -> str:
    level = raw.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigurationError(f"LOG_LEVEL '{raw}' is not a valid logging level")
    return level


def load_settings() -> Settings:
    """Read settings from `.env` and the process environment."""
    load_dotenv()
    return Settings(
        db_file=os.getenv("PRODUCTS_DB_FILE", "products.db"),
        api_keys=parse_api_keys(os.getenv("API_KEYS", "")),
        log_level=_parse_log_level(os.getenv("LOG_LEVEL", "INFO")),
    )


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the cached settings, loading them on first use."""
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings
