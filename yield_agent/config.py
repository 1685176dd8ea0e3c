"""Configuration helpers for the Yield Agent backend."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from functools import lru_cache
from typing import List, Mapping

from dotenv import load_dotenv

ENV_PREFIX = "YIELD_AGENT_"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_ALLOWED_ORIGINS = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
    "http://localhost:3001",
    "http://127.0.0.1:3001",
]

load_dotenv(override=False)


@dataclass(frozen=True)
class AppSettings:
    """Settings for the HTTP layer; the planning engine itself takes none."""

    allowed_origins: List[str] = field(default_factory=lambda: list(DEFAULT_ALLOWED_ORIGINS))
    log_level: str = DEFAULT_LOG_LEVEL

    @property
    def log_level_number(self) -> int:
        """Return the numeric logging level for ``log_level``."""

        return logging.getLevelName(self.log_level)


def _parse_origins(raw: str | None) -> List[str]:
    if not raw:
        return list(DEFAULT_ALLOWED_ORIGINS)
    origins = [origin.strip() for origin in raw.split(",") if origin.strip()]
    return origins or list(DEFAULT_ALLOWED_ORIGINS)


def _parse_log_level(raw: str | None) -> str:
    """Accept standard level names only; anything else falls back to INFO."""

    if not raw:
        return DEFAULT_LOG_LEVEL
    level = raw.strip().upper()
    if isinstance(logging.getLevelName(level), int):
        return level
    return DEFAULT_LOG_LEVEL


def settings_from_environ(environ: Mapping[str, str]) -> AppSettings:
    return AppSettings(
        allowed_origins=_parse_origins(environ.get(f"{ENV_PREFIX}ALLOWED_ORIGINS")),
        log_level=_parse_log_level(environ.get(f"{ENV_PREFIX}LOG_LEVEL")),
    )


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    """Read environment variables and return cached settings."""

    return settings_from_environ(os.environ)
