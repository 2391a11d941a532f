"""
domain/hazard.py
──────────────────────────────────────────────────────────────────────────────
Hazard notification for dangerous loading conditions.

There is no sensor integration: a notification is a WARNING record on this
module's logger.  Liquid and gas containers call notify_hazard() from their
load path *before* capacity validation, so a notification can fire for a
load that is subsequently rejected.
"""
from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def notify_hazard(container_number: str) -> None:
    """Signal an unsafe loading condition for ``container_number``."""
    logger.warning("Dangerous event detected in container %s", container_number)
