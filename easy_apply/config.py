"""Load run settings from the environment (and an optional .env file)."""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from easy_apply.log import get_logger

log = get_logger(__name__)

load_dotenv()

PACKAGE_DIR: Path = Path(__file__).resolve().parent
DEFAULT_SELECTORS_PATH: Path = PACKAGE_DIR / "selectors.yaml"

DEFAULT_KEYWORDS = "AI Engineer"
DEFAULT_LOCATION = "Remote"
DEFAULT_MAX_APPS = 5
DEFAULT_PHONE = "9999999999"


class ConfigError(Exception):
    """Raised when required configuration is missing or malformed."""


@dataclass(frozen=True)
class Settings:
    email: str
    password: str
    keywords: str = DEFAULT_KEYWORDS
    location: str = DEFAULT_LOCATION
    max_applications: int = DEFAULT_MAX_APPS
    webhook_url: str = ""
    phone: str = DEFAULT_PHONE
    headless: bool = True
    chrome_path: str = ""
    selectors_path: Path = DEFAULT_SELECTORS_PATH


def get_env(key: str, default: str = "") -> str:
    return os.environ.get(key, default).strip()


def _parse_max_apps(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise ConfigError(f"MAX_APPS must be an integer, got {raw!r}") from None
    if value < 0:
        raise ConfigError(f"MAX_APPS must not be negative, got {value}")
    return value


def load_settings() -> Settings:
    """Build Settings from env vars. Raises ConfigError when credentials are missing."""
    email = get_env("INDEED_EMAIL")
    password = get_env("INDEED_PASSWORD")
    if not email or not password:
        raise ConfigError("Missing INDEED_EMAIL or INDEED_PASSWORD env vars.")

    selectors_file = get_env("SELECTORS_FILE")
    return Settings(
        email=email,
        password=password,
        keywords=get_env("KEYWORDS") or DEFAULT_KEYWORDS,
        location=get_env("LOCATION") or DEFAULT_LOCATION,
        max_applications=_parse_max_apps(get_env("MAX_APPS") or str(DEFAULT_MAX_APPS)),
        webhook_url=get_env("N8N_WEBHOOK_URL") or get_env("WEBHOOK_URL"),
        phone=get_env("PHONE") or DEFAULT_PHONE,
        headless=get_env("RUN_HEADLESS", "true").lower() in ("1", "true", "yes"),
        chrome_path=get_env("CHROME_PATH"),
        selectors_path=Path(selectors_file) if selectors_file else DEFAULT_SELECTORS_PATH,
    )
