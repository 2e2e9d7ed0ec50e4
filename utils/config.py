"""
Service configuration read from the environment (and a local .env file).

The scorer itself takes no configuration; these settings only shape the
HTTP layer and logging.
"""
import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional, Tuple

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

load_dotenv()


def _get_env(name: str, default: Optional[str] = None) -> Optional[str]:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    return value.strip()


def _get_env_int(name: str, default: int) -> int:
    raw = _get_env(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning(f"Ignoring {name}={raw!r}: not an integer, using {default}")
        return default
    if value <= 0:
        logger.warning(f"Ignoring {name}={raw!r}: must be positive, using {default}")
        return default
    return value


def _get_env_list(name: str, default: Tuple[str, ...]) -> Tuple[str, ...]:
    raw = _get_env(name)
    if raw is None:
        return default
    values = tuple(item.strip() for item in raw.split(",") if item.strip())
    return values or default


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    log_format: str = "text"
    cors_allowed_origins: Tuple[str, ...] = ("*",)
    max_upload_size_mb: int = 5
    max_batch_size: int = 25

    @property
    def max_upload_bytes(self) -> int:
        return self.max_upload_size_mb * 1024 * 1024

    @classmethod
    def from_env(cls) -> "Settings":
        log_format = (_get_env("LOG_FORMAT", cls.log_format) or cls.log_format).lower()
        if log_format not in ("text", "json"):
            logger.warning(f"Unknown LOG_FORMAT {log_format!r}, using text")
            log_format = "text"
        return cls(
            log_level=(_get_env("LOG_LEVEL", cls.log_level) or cls.log_level).upper(),
            log_format=log_format,
            cors_allowed_origins=_get_env_list("CORS_ALLOWED_ORIGINS", cls.cors_allowed_origins),
            max_upload_size_mb=_get_env_int("MAX_UPLOAD_SIZE_MB", cls.max_upload_size_mb),
            max_batch_size=_get_env_int("MAX_BATCH_SIZE", cls.max_batch_size),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()
