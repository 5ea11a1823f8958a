"""
Configuration
Process-wide settings for the HomeBank client, read once from the environment.

Environment:
  HOMEBANK_API_BASE_URL      (default: http://localhost:8080/api)
  HOMEBANK_REQUEST_TIMEOUT   (default: 30, seconds; 0 disables the timeout)
  HOMEBANK_STRICT_RECONCILE  (default: false)
  LOG_LEVEL                  (default: INFO)
  HOMEBANK_LOG_DIR           (default: ./logs)
"""

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv, find_dotenv

load_dotenv(find_dotenv(usecwd=True), override=False)

DEFAULT_BASE_URL = "http://localhost:8080/api"
DEFAULT_TIMEOUT = 30.0

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    base_url: str = DEFAULT_BASE_URL
    request_timeout: Optional[float] = DEFAULT_TIMEOUT
    strict_reconcile: bool = False
    log_level: str = "INFO"
    log_dir: Path = Path("logs")


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


def _env_timeout(name: str) -> Optional[float]:
    raw = os.getenv(name, str(DEFAULT_TIMEOUT))
    try:
        value = float(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be a number of seconds, got {raw!r}") from e
    return value if value > 0 else None


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Build the settings from the environment (and .env, if present).

    Cached: the first call fixes the configuration for the process.
    Use ``get_settings.cache_clear()`` to re-read the environment.
    """
    return Settings(
        base_url=os.getenv("HOMEBANK_API_BASE_URL", DEFAULT_BASE_URL).rstrip("/"),
        request_timeout=_env_timeout("HOMEBANK_REQUEST_TIMEOUT"),
        strict_reconcile=_env_flag("HOMEBANK_STRICT_RECONCILE"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        log_dir=Path(os.getenv("HOMEBANK_LOG_DIR", str(Path.cwd() / "logs"))),
    )
