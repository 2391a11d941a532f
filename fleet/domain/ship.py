"""
domain/ship.py
──────────────────────────────────────────────────────────────────────────────
Ship aggregate: owns an ordered list of containers and enforces the ship's
capacity and weight bounds.

The bounds are checked at load time only:
  • len(containers) < max_containers           else CapacityExceededError
  • total_weight + container.current_weight
      <= max_weight                            else WeightExceededError

Both checks use the container's current_weight at the moment of the call, so
cargo loaded into a container that is already aboard (load_cargo) is not
re-checked against max_weight.  replace_container() does not revalidate the
weight bound either unless revalidate_on_replace is set.

Lookups are first-match by container_number.  With unique_numbers on (the
default) a number can only be aboard once, so first-match is unambiguous.

A Ship only sees its own list: the same container object is refused twice
aboard one ship, but keeping it off two ships at once is the fleet's job
(FleetService.load_container checks every registered ship).

Not thread-safe: callers sharing a Ship across threads must serialise every
mutating call.
"""
from __future__ import annotations

import logging
import math

from fleet.domain.exceptions import (
    CapacityExceededError,
    ConstructionError,
    ContainerNotFoundError,
    DuplicateContainerError,
    FleetError,
    WeightExceededError,
)
from fleet.domain.models import BaseContainer, ContainerInfo, ShipInfo, TransferResult

logger = logging.getLogger(__name__)


class Ship:
    """A container ship.

    Args:
        max_speed:             Informational only.
        max_containers:        Maximum number of containers aboard.
        max_weight:            Maximum summed current_weight of containers aboard.
        name:                  Label used in logs, errors and snapshots.
        unique_numbers:        Reject a container whose number is already aboard.
        revalidate_on_replace: Apply the weight bound in replace_container().
    """

    def __init__(
        self,
        max_speed: float,
        max_containers: int,
        max_weight: float,
        *,
        name: str = "",
        unique_numbers: bool = True,
        revalidate_on_replace: bool = False,
    ) -> None:
        if max_containers < 0:
            raise ConstructionError(f"max_containers must be >= 0 (got {max_containers})")
        if math.isnan(max_weight) or max_weight < 0:
            raise ConstructionError(f"max_weight must be a number >= 0 (got {max_weight})")
        self.name = name
        self.max_speed = max_speed
        self.max_containers = max_containers
        self.max_weight = max_weight
        self._unique_numbers = unique_numbers
        self._revalidate_on_replace = revalidate_on_replace
        self._containers: list[BaseContainer] = []

    def __repr__(self) -> str:
        return (
            f"Ship(name={self.name!r}, containers={len(self._containers)}/"
            f"{self.max_containers}, weight={self.total_weight}/{self.max_weight})"
        )

    # ── Read-only state ────────────────────────────────────────────────────

    @property
    def containers(self) -> tuple[BaseContainer, ...]:
        """Containers aboard, in load order."""
        return tuple(self._containers)

    @property
    def container_count(self) -> int:
        return len(self._containers)

    @property
    def total_weight(self) -> float:
        return sum(c.current_weight for c in self._containers)

    @property
    def remaining_capacity(self) -> int:
        return max(self.max_containers - len(self._containers), 0)

    @property
    def remaining_weight(self) -> float:
        return self.max_weight - self.total_weight

    # ── Lookups ────────────────────────────────────────────────────────────

    def _index_of(self, container_number: str) -> int | None:
        for i, c in enumerate(self._containers):
            if c.container_number == container_number:
                return i
        return None

    def find_container(self, container_number: str) -> BaseContainer | None:
        """Return the first container aboard with this number, or None."""
        index = self._index_of(container_number)
        if index is None:
            logger.debug("find_container | ship=%s number=%s found=no", self.name, container_number)
            return None
        return self._containers[index]

    def require_container(self, container_number: str) -> BaseContainer:
        """Like find_container() but raises ContainerNotFoundError on a miss."""
        container = self.find_container(container_number)
        if container is None:
            raise ContainerNotFoundError(container_number, self.name)
        return container

    def container_info(self, container_number: str) -> ContainerInfo | None:
        container = self.find_container(container_number)
        return container.info() if container is not None else None

    def snapshot(self) -> ShipInfo:
        return ShipInfo(
            name=self.name,
            max_speed=self.max_speed,
            max_containers=self.max_containers,
            max_weight=self.max_weight,
            container_count=len(self._containers),
            current_weight=self.total_weight,
            containers=[c.info() for c in self._containers],
        )

    # ── Mutations ──────────────────────────────────────────────────────────

    def load_container(self, container: BaseContainer) -> None:
        """Put a container aboard.

        Raises:
            CapacityExceededError: The ship already carries max_containers.
            WeightExceededError: The container would push the ship over max_weight.
            DuplicateContainerError: Its number is already aboard (unique_numbers on),
                or this very container object is already aboard.
        """
        if len(self._containers) >= self.max_containers:
            raise CapacityExceededError(self.name, self.max_containers)

        attempted = self.total_weight + container.current_weight
        if attempted > self.max_weight:
            raise WeightExceededError(self.name, self.max_weight, attempted)

        if any(c is container for c in self._containers) or (
            self._unique_numbers and self._index_of(container.container_number) is not None
        ):
            raise DuplicateContainerError(self.name, container.container_number)

        self._containers.append(container)
        logger.info(
            "load_container | ship=%s number=%s count=%d weight=%s",
            self.name, container.container_number, len(self._containers), attempted,
        )

    def unload_container(self, container_number: str) -> BaseContainer | None:
        """Remove the first container with this number.

        Returns:
            The removed container, or None if it was not aboard.
        """
        index = self._index_of(container_number)
        if index is None:
            logger.info("unload_container | ship=%s number=%s not found", self.name, container_number)
            return None
        container = self._containers.pop(index)
        logger.info("unload_container | ship=%s number=%s", self.name, container_number)
        return container

    def replace_container(self, old_number: str, new_container: BaseContainer) -> bool:
        """Swap the first container numbered ``old_number`` for ``new_container``.

        The replacement keeps the old container's position.  The weight bound
        is only enforced when revalidate_on_replace is set.

        Returns:
            True if a container was replaced, False if old_number was not aboard.

        Raises:
            WeightExceededError: Replacement exceeds max_weight (revalidate_on_replace on).
            DuplicateContainerError: The new number belongs to another container aboard.
        """
        index = self._index_of(old_number)
        if index is None:
            logger.info("replace_container | ship=%s number=%s not found", self.name, old_number)
            return False

        if self._unique_numbers:
            clash = self._index_of(new_container.container_number)
            if clash is not None and clash != index:
                raise DuplicateContainerError(self.name, new_container.container_number)

        resulting = (
            self.total_weight
            - self._containers[index].current_weight
            + new_container.current_weight
        )
        if resulting > self.max_weight:
            if self._revalidate_on_replace:
                raise WeightExceededError(self.name, self.max_weight, resulting)
            logger.warning(
                "replace_container | ship=%s weight %s exceeds max_weight %s",
                self.name, resulting, self.max_weight,
            )

        self._containers[index] = new_container
        logger.info(
            "replace_container | ship=%s old=%s new=%s",
            self.name, old_number, new_container.container_number,
        )
        return True

    def load_cargo(self, container_number: str, cargo_weight: float) -> BaseContainer | None:
        """Load cargo into a container that is already aboard.

        Returns:
            The loaded container, or None if it was not aboard.

        Raises:
            OverfillError: cargo_weight exceeds the container's load_capacity.
        """
        container = self.find_container(container_number)
        if container is None:
            logger.info("load_cargo | ship=%s number=%s not found", self.name, container_number)
            return None
        container.load(cargo_weight)
        return container

    def transfer_container(self, target: Ship, container_number: str) -> TransferResult:
        """Move a container from this ship to ``target``.

        Either the target gains the container and this ship loses it, or
        neither changes: errors from target.load_container() propagate before
        anything is removed here.

        Returns:
            TransferResult with transferred=False if the container was not aboard.

        Raises:
            CapacityExceededError / WeightExceededError / DuplicateContainerError:
                Raised by the target ship.
            FleetError: target is this ship.
        """
        if target is self:
            raise FleetError(f"Cannot transfer container {container_number} to the same ship")

        result = TransferResult(
            container_number=container_number,
            source=self.name,
            target=target.name,
            transferred=False,
        )
        index = self._index_of(container_number)
        if index is None:
            logger.info("transfer_container | %s", result.message)
            return result

        container = self._containers[index]
        target.load_container(container)
        del self._containers[index]

        result.transferred = True
        logger.info(
            "transfer_container | source=%s target=%s %s",
            self.name, target.name, result.message,
        )
        return result
