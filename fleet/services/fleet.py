"""
services/fleet.py
──────────────────────────────────────────────────────────────────────────────
FleetService: a registry of named ships plus the cross-ship operations.

This is the primary entry point for callers that manage more than one ship
(the interactive front end, scripts, a future API).  It only speaks in domain
objects and never renders output.

Ship bounds not given to commission_ship() fall back to the Settings
defaults, and every ship inherits the fleet's uniqueness / replace policy.
"""
from __future__ import annotations

import logging
from typing import Any

from fleet.config.settings import Settings
from fleet.domain.exceptions import DuplicateContainerError, DuplicateShipError, ShipNotFoundError
from fleet.domain.models import BaseContainer, ContainerKind, FleetInfo, TransferResult, new_container
from fleet.domain.ship import Ship

logger = logging.getLogger(__name__)


class FleetService:
    """Named-ship registry.

    Inject via services/bootstrap.py — do not instantiate directly in
    application code.

    Args:
        settings: Shared application settings.
    """

    def __init__(self, settings: Settings) -> None:
        self._settings = settings
        self._ships: dict[str, Ship] = {}

    # ── Registry ───────────────────────────────────────────────────────────

    @property
    def ships(self) -> tuple[str, ...]:
        """Ship names in commission order."""
        return tuple(self._ships)

    def commission_ship(
        self,
        name: str,
        max_speed: float | None = None,
        max_containers: int | None = None,
        max_weight: float | None = None,
    ) -> Ship:
        """Create and register a ship.

        Raises:
            DuplicateShipError: A ship with this name is already registered.
            ConstructionError: A negative bound was given.
        """
        if name in self._ships:
            raise DuplicateShipError(f"Ship {name!r} is already commissioned")
        s = self._settings
        ship = Ship(
            max_speed=s.default_max_speed if max_speed is None else max_speed,
            max_containers=s.default_max_containers if max_containers is None else max_containers,
            max_weight=s.default_max_weight if max_weight is None else max_weight,
            name=name,
            unique_numbers=s.unique_container_numbers,
            revalidate_on_replace=s.replace_revalidates,
        )
        self._ships[name] = ship
        logger.info(
            "commission_ship | name=%s max_containers=%d max_weight=%s",
            name, ship.max_containers, ship.max_weight,
        )
        return ship

    def decommission_ship(self, name: str) -> Ship:
        """Remove a ship (and the containers aboard it) from the registry."""
        ship = self.get_ship(name)
        del self._ships[name]
        logger.info("decommission_ship | name=%s containers=%d", name, ship.container_count)
        return ship

    def get_ship(self, name: str) -> Ship:
        try:
            return self._ships[name]
        except KeyError:
            raise ShipNotFoundError(f"Ship {name!r} not found") from None

    # ── Containers ─────────────────────────────────────────────────────────

    def create_container(
        self,
        variant: str | ContainerKind,
        container_number: str,
        load_capacity: float,
        empty_weight: float,
        **fields: Any,
    ) -> BaseContainer:
        """Build a container; see fleet.domain.models.new_container()."""
        return new_container(variant, container_number, load_capacity, empty_weight, **fields)

    def load_container(self, ship_name: str, container: BaseContainer) -> None:
        """Put a container aboard a registered ship.

        Raises:
            ShipNotFoundError: ship_name is not registered.
            DuplicateContainerError: This container object is already aboard
                another registered ship.
            CapacityExceededError / WeightExceededError: Raised by the ship.
        """
        ship = self.get_ship(ship_name)
        for name, other in self._ships.items():
            if other is not ship and any(c is container for c in other.containers):
                raise DuplicateContainerError(name, container.container_number)
        ship.load_container(container)

    def locate(self, container_number: str) -> str | None:
        """Name of the first ship carrying ``container_number``, or None."""
        for name, ship in self._ships.items():
            if ship.find_container(container_number) is not None:
                return name
        return None

    def transfer(self, source: str, target: str, container_number: str) -> TransferResult:
        """Move a container between two registered ships.

        Raises:
            ShipNotFoundError: Either ship name is not registered.
            CapacityExceededError / WeightExceededError / DuplicateContainerError:
                The target refused the container; the source is unchanged.
        """
        source_ship = self.get_ship(source)
        target_ship = self.get_ship(target)
        return source_ship.transfer_container(target_ship, container_number)

    # ── Queries ────────────────────────────────────────────────────────────

    def snapshot(self) -> FleetInfo:
        infos = [ship.snapshot() for ship in self._ships.values()]
        return FleetInfo(
            name=self._settings.fleet_name,
            ships=infos,
            container_count=sum(i.container_count for i in infos),
            total_weight=sum(i.current_weight for i in infos),
        )
