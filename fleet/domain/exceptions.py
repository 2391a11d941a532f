"""
domain/exceptions.py
──────────────────────────────────────────────────────────────────────────────
Custom exception hierarchy.

All exceptions are rooted at FleetError so callers can catch broadly
(except FleetError) or narrowly (except OverfillError).

Hard failures (raised):
  OverfillError          cargo exceeds container load capacity
  CapacityExceededError  ship already carries max_containers
  WeightExceededError    ship would exceed max_weight
  ConstructionError      unknown container variant / invalid fields

Soft failures: a container-number lookup miss on unload / replace / transfer
is reported through the return value, not raised.  NotFoundError exists for
callers that ask for a hard lookup (Ship.require_container, FleetService).
"""
from __future__ import annotations


class FleetError(Exception):
    """Base exception for all application errors."""


class ConfigurationError(FleetError):
    """Raised when required configuration is missing or invalid."""


class ConstructionError(FleetError):
    """Raised when a container or ship cannot be built from the given input."""


# ── Container-level ────────────────────────────────────────────────────────

class ContainerError(FleetError):
    """Base for failures raised by a single container."""

    def __init__(self, container_number: str, message: str) -> None:
        super().__init__(message)
        self.container_number = container_number


class OverfillError(ContainerError):
    """Raised when cargo weight exceeds the container's load capacity."""

    def __init__(self, container_number: str, cargo_weight: float, load_capacity: float) -> None:
        super().__init__(
            container_number,
            f"Cargo weight {cargo_weight} exceeds capacity {load_capacity} "
            f"of container {container_number}",
        )
        self.cargo_weight = cargo_weight
        self.load_capacity = load_capacity


class InvalidCargoError(ContainerError):
    """Raised when a negative or non-finite cargo weight is loaded."""

    def __init__(self, container_number: str, cargo_weight: float) -> None:
        super().__init__(
            container_number,
            f"Cargo weight must be a finite, non-negative number (got {cargo_weight}) "
            f"for container {container_number}",
        )
        self.cargo_weight = cargo_weight


# ── Ship-level ─────────────────────────────────────────────────────────────

class ShipError(FleetError):
    """Base for ship invariant violations raised by Ship.load_container()."""


class CapacityExceededError(ShipError):
    """Raised when the ship already carries its maximum number of containers."""

    def __init__(self, ship: str, limit: int) -> None:
        super().__init__(f"Maximum number of containers reached on ship {ship!r} (limit={limit})")
        self.ship = ship
        self.limit = limit


class WeightExceededError(ShipError):
    """Raised when adding a container would push the ship over max_weight."""

    def __init__(self, ship: str, limit: float, attempted: float) -> None:
        super().__init__(
            f"Exceeds maximum weight limit on ship {ship!r} "
            f"(limit={limit}, attempted={attempted})"
        )
        self.ship = ship
        self.limit = limit
        self.attempted = attempted


class DuplicateContainerError(ShipError):
    """Raised when a container (or its number, under uniqueness) is already aboard."""

    def __init__(self, ship: str, container_number: str) -> None:
        super().__init__(f"Container {container_number} is already aboard ship {ship!r}")
        self.ship = ship
        self.container_number = container_number


class DuplicateShipError(FleetError):
    """Raised when a ship name is already registered with the fleet."""


# ── Lookups ────────────────────────────────────────────────────────────────

class NotFoundError(FleetError):
    """Base for hard lookup misses."""


class ContainerNotFoundError(NotFoundError):
    """Raised when a container number is not aboard the ship."""

    def __init__(self, container_number: str, ship: str = "") -> None:
        where = f" on ship {ship!r}" if ship else ""
        super().__init__(f"Container {container_number} not found{where}")
        self.container_number = container_number
        self.ship = ship


class ShipNotFoundError(NotFoundError):
    """Raised when a ship name is not registered with the fleet."""
