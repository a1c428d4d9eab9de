"""Railway runtime configuration sourced from environment."""

from __future__ import annotations

import os
from dataclasses import dataclass

from railway.api.logging import RailwayLoggingConfig


def _str(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip()
    return value if value else default


def resolve_log_level_name(default: str = "INFO") -> str:
    """Resolve log level with railway-prefixed override."""
    value = os.getenv("RAILWAY_LOG_LEVEL")
    if value is None:
        value = os.getenv("LOG_LEVEL", default)
    return value.strip().upper() or default


@dataclass(frozen=True, slots=True)
class RailwayConfig:
    """Immutable railway runtime configuration."""

    log_level: str
    log_format: str
    log_file: str | None

    def logging_config(self) -> RailwayLoggingConfig:
        return RailwayLoggingConfig(
            level_name=self.log_level,
            console_format=self.log_format,
            file_path=self.log_file,
            file_format="json",
        )


def load_railway_config() -> RailwayConfig:
    """Load immutable railway configuration from env vars."""
    log_format = _str("RAILWAY_LOG_FORMAT", "text").lower()
    if log_format not in {"text", "json"}:
        log_format = "text"
    log_file = os.getenv("RAILWAY_LOG_FILE", "").strip() or None
    return RailwayConfig(
        log_level=resolve_log_level_name(),
        log_format=log_format,
        log_file=log_file,
    )
