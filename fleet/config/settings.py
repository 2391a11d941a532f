"""
config/settings.py
──────────────────────────────────────────────────────────────────────────────
Single source of truth for all tuneable parameters.

All values can be overridden via environment variables or a .env file placed
at the project root.  The frozen dataclass ensures settings are never mutated
at runtime.

  FLEET_DEFAULT_MAX_SPEED         → default ship max speed (informational)
  FLEET_DEFAULT_MAX_CONTAINERS    → default ship container bound
  FLEET_DEFAULT_MAX_WEIGHT        → default ship weight bound
  FLEET_UNIQUE_CONTAINER_NUMBERS  → reject duplicate container numbers per ship
  FLEET_REPLACE_REVALIDATES       → enforce max_weight on replace_container()
"""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

from fleet.domain.exceptions import ConfigurationError

# Load .env from project root (two levels up from this file)
load_dotenv(Path(__file__).parent.parent.parent / ".env")

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _env(key: str, default: str) -> str:
    return os.getenv(key, default)


def _env_int(key: str, default: int) -> int:
    raw = os.getenv(key, str(default))
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"{key} must be an integer (got {raw!r})") from None


def _env_float(key: str, default: float) -> float:
    raw = os.getenv(key, str(default))
    try:
        return float(raw)
    except ValueError:
        raise ConfigurationError(f"{key} must be a number (got {raw!r})") from None


def _env_bool(key: str, default: bool) -> bool:
    raw = os.getenv(key)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ConfigurationError(f"{key} must be a boolean (got {raw!r})")


@dataclass(frozen=True)
class Settings:
    """Immutable application settings loaded from environment variables."""

    # ── Ship defaults ──────────────────────────────────────────────────────
    default_max_speed: float = field(
        default_factory=lambda: _env_float("FLEET_DEFAULT_MAX_SPEED", 25.5)
    )
    default_max_containers: int = field(
        default_factory=lambda: _env_int("FLEET_DEFAULT_MAX_CONTAINERS", 100)
    )
    default_max_weight: float = field(
        default_factory=lambda: _env_float("FLEET_DEFAULT_MAX_WEIGHT", 50000.0)
    )

    # ── Policy switches ────────────────────────────────────────────────────
    # Duplicate numbers make by-number lookups ambiguous; on by default.
    unique_container_numbers: bool = field(
        default_factory=lambda: _env_bool("FLEET_UNIQUE_CONTAINER_NUMBERS", True)
    )
    # Off by default: replacements are not checked against max_weight.
    replace_revalidates: bool = field(
        default_factory=lambda: _env_bool("FLEET_REPLACE_REVALIDATES", False)
    )

    # ── Labels ─────────────────────────────────────────────────────────────
    fleet_name: str = field(
        default_factory=lambda: _env("FLEET_NAME", "fleet")
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Returns a cached singleton Settings instance.

    Use this everywhere instead of instantiating Settings() directly —
    it guarantees a single object is shared across the entire process.
    """
    return Settings()
