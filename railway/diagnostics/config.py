"""Diagnostics capability configuration from environment."""

from __future__ import annotations

import os
from dataclasses import dataclass


def _flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


@dataclass(frozen=True, slots=True)
class DiagnosticsConfig:
    enabled: bool = True
    buffer_capacity: int = 1_000
    category_allowlist: tuple[str, ...] = ()


def load_diagnostics_config() -> DiagnosticsConfig:
    return DiagnosticsConfig(
        enabled=_flag("RAILWAY_DIAGNOSTICS_ENABLED", True),
        buffer_capacity=max(10, _int("RAILWAY_DIAGNOSTICS_BUFFER_CAP", 1_000)),
        category_allowlist=_parse_category_allowlist(
            os.getenv("RAILWAY_DIAGNOSTICS_CATEGORY_ALLOWLIST", "")
        ),
    )


def _parse_category_allowlist(raw: str) -> tuple[str, ...]:
    values = tuple(item.strip().lower() for item in raw.split(",") if item.strip())
    return tuple(dict.fromkeys(values))
