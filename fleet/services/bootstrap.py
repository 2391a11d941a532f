"""
services/bootstrap.py
──────────────────────────────────────────────────────────────────────────────
Dependency wiring.

@lru_cache(maxsize=1) makes get_fleet_service() return the same instance
across calls, so every caller in the process shares one ship registry.
Tests build FleetService(settings) directly instead.
"""
from __future__ import annotations

import logging
from functools import lru_cache

from fleet.config.settings import get_settings
from fleet.services.fleet import FleetService

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_fleet_service() -> FleetService:
    """Build and return the FleetService singleton.

    Raises:
        ConfigurationError: If an environment variable holds a malformed value.
    """
    settings = get_settings()
    logger.info(
        "Building FleetService | fleet=%s max_containers=%d max_weight=%s "
        "unique_numbers=%s replace_revalidates=%s",
        settings.fleet_name,
        settings.default_max_containers,
        settings.default_max_weight,
        settings.unique_container_numbers,
        settings.replace_revalidates,
    )
    return FleetService(settings)
