# config.py

import os
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# ─── Defaults ───────────────────────────────────────────────────────────────────

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
ENV_FILES = {
    "prod": PROJECT_ROOT / ".env.production",
    "dev": PROJECT_ROOT / ".env.development",
}

DEFAULT_PORT = 3000
DEFAULT_SHEET_TAB = "tweet-safwaan"
DEFAULT_ENRICHMENT_TIMEOUT = 10.0


class ConfigError(ValueError):
    """Raised when the process cannot start with the current environment."""


@dataclass(frozen=True)
class Settings:
    """Process-wide configuration, read once at startup."""

    sheet_id: str
    credentials_path: str
    credentials: dict
    enrichment_api_url: str
    enrichment_api_key: Optional[str] = None
    port: int = DEFAULT_PORT
    sheet_tab: str = DEFAULT_SHEET_TAB
    enrichment_timeout: float = DEFAULT_ENRICHMENT_TIMEOUT

    @property
    def append_range(self) -> str:
        return f"'{self.sheet_tab}'!A1"

    @property
    def directory_range(self) -> str:
        return f"'{self.sheet_tab}'!A:E"

    @classmethod
    def from_env(cls, environ=None) -> "Settings":
        """Build settings from environment variables, failing on anything missing."""
        environ = os.environ if environ is None else environ

        required = ("GOOGLE_SHEET_ID", "GOOGLE_API_CREDENTIALS", "ENRICHMENT_API_URL")
        missing = [name for name in required if not environ.get(name)]
        if missing:
            raise ConfigError(
                f"Missing required environment variables: {', '.join(missing)}. Check your .env file."
            )

        credentials_path = environ["GOOGLE_API_CREDENTIALS"]
        credentials = load_credentials(credentials_path)

        return cls(
            sheet_id=environ["GOOGLE_SHEET_ID"],
            credentials_path=credentials_path,
            credentials=credentials,
            enrichment_api_url=environ["ENRICHMENT_API_URL"],
            enrichment_api_key=environ.get("ENRICHMENT_API_KEY") or None,
            port=_as_number(environ, "PORT", int, DEFAULT_PORT),
            sheet_tab=environ.get("SHEET_TAB") or DEFAULT_SHEET_TAB,
            enrichment_timeout=_as_number(environ, "ENRICHMENT_TIMEOUT", float, DEFAULT_ENRICHMENT_TIMEOUT),
        )


def _as_number(environ, name, cast, default):
    raw = environ.get(name)
    if not raw:
        return default
    try:
        return cast(raw)
    except ValueError:
        raise ConfigError(f"{name} must be a number, got {raw!r}")


def load_credentials(path: str) -> dict:
    """Read and parse the service-account JSON document at `path`."""
    if not os.path.exists(path):
        raise ConfigError(f"Google API credentials file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            credentials = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"Could not read Google API credentials from {path}: {e}")

    if not isinstance(credentials, dict):
        raise ConfigError(f"Google API credentials in {path} must be a JSON object")

    return credentials


def load_env_file(env: str = "prod") -> Path:
    """Load the dotenv file for `env` ("dev" or "prod") without overriding real env vars."""
    env_file = ENV_FILES[env]
    load_dotenv(env_file)
    return env_file


def load_settings(environ=None) -> Settings:
    settings = Settings.from_env(environ)
    logger.info("Loaded settings for sheet %s (tab %r)", settings.sheet_id, settings.sheet_tab)
    return settings
