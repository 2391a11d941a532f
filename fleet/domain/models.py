"""
domain/models.py
──────────────────────────────────────────────────────────────────────────────
Pure domain objects — Pydantic models with no imports from services or config.

Containers are a tagged union discriminated on ``kind``:

  LiquidContainer        pressure                    hazardous
  GasContainer           pressure                    hazardous
  RefrigeratedContainer  temperature, product_type   not hazardous

Every variant shares container_number / load_capacity / empty_weight
(immutable) and current_weight (mutable, starts at empty_weight).

Load order inside load():
  1. variant hazard check  → may call notify_hazard()
  2. capacity check        → OverfillError, weight unchanged
  3. commit                → current_weight = cargo + empty_weight

Hazardous variants keep residue after empty(): the weight is reset to
empty_weight and then scaled by RESIDUE_FRACTION, i.e. the residual is
0.05 × empty_weight, not a fraction of the cargo that was removed.
"""
from __future__ import annotations

import logging
import math
from datetime import datetime, timezone
from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    ValidationError,
    field_validator,
    model_validator,
)

from fleet.domain.exceptions import ConstructionError, InvalidCargoError, OverfillError
from fleet.domain.hazard import notify_hazard

logger = logging.getLogger(__name__)

HAZARD_FILL_RATIO = 0.5   # hazard fires above this fraction of load_capacity
RESIDUE_FRACTION  = 0.05  # hazardous containers keep this fraction after empty()


# ── Enums ──────────────────────────────────────────────────────────────────────

class ContainerKind(str, Enum):
    """Container variant tag."""
    LIQUID        = "liquid"
    GAS           = "gas"
    REFRIGERATED  = "refrigerated"


# ── Containers ─────────────────────────────────────────────────────────────────

class BaseContainer(BaseModel):
    """Fields and load/empty behaviour shared by every container variant."""

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    kind:             ContainerKind = Field(..., frozen=True,
                                    description="Variant tag; fixed by each subclass")
    container_number: str   = Field(..., min_length=1, frozen=True,
                                    description="Caller-supplied identifier")
    load_capacity:    float = Field(..., ge=0, frozen=True,
                                    description="Maximum cargo weight")
    empty_weight:     float = Field(..., ge=0, frozen=True,
                                    description="Tare weight of the container")
    current_weight:   float = Field(..., description="Tare plus cargo (or residue)")

    @model_validator(mode="before")
    @classmethod
    def default_current_weight(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get("current_weight") is None:
            data = {**data, "current_weight": data.get("empty_weight")}
        return data

    @field_validator("container_number")
    @classmethod
    def strip_number(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("container_number must not be blank")
        return v

    @property
    def is_hazardous(self) -> bool:
        return False

    @property
    def cargo_weight(self) -> float:
        """Weight above tare; 0 for an empty container (including residue)."""
        return max(self.current_weight - self.empty_weight, 0.0)

    def _check_hazard(self, cargo_weight: float) -> None:
        """Variant hook run before validation; no-op for non-hazardous cargo."""

    def load(self, cargo_weight: float) -> None:
        """Fill the container with ``cargo_weight`` of cargo.

        Raises:
            InvalidCargoError: If cargo_weight is negative or not finite.
            OverfillError: If cargo_weight exceeds load_capacity.
        """
        self._check_hazard(cargo_weight)
        if not math.isfinite(cargo_weight) or cargo_weight < 0:
            raise InvalidCargoError(self.container_number, cargo_weight)
        if cargo_weight > self.load_capacity:
            raise OverfillError(self.container_number, cargo_weight, self.load_capacity)
        self.current_weight = cargo_weight + self.empty_weight
        logger.debug(
            "load | number=%s cargo=%s weight=%s",
            self.container_number, cargo_weight, self.current_weight,
        )

    def empty(self) -> None:
        self.current_weight = self.empty_weight

    def info(self) -> ContainerInfo:
        return ContainerInfo(
            container_number=self.container_number,
            kind=self.kind,
            load_capacity=self.load_capacity,
            empty_weight=self.empty_weight,
            current_weight=self.current_weight,
            cargo_weight=self.cargo_weight,
        )


class _HazardousContainer(BaseContainer):
    """Pressurised container: notifies hazards and retains residue when emptied."""

    pressure: float

    @property
    def is_hazardous(self) -> bool:
        return True

    def empty(self) -> None:
        super().empty()
        self.current_weight *= RESIDUE_FRACTION


class LiquidContainer(_HazardousContainer):
    kind: Literal[ContainerKind.LIQUID] = Field(ContainerKind.LIQUID, frozen=True)

    def _check_hazard(self, cargo_weight: float) -> None:
        if self.pressure > 0 and cargo_weight > self.load_capacity * HAZARD_FILL_RATIO:
            notify_hazard(self.container_number)


class GasContainer(_HazardousContainer):
    kind: Literal[ContainerKind.GAS] = Field(ContainerKind.GAS, frozen=True)

    def _check_hazard(self, cargo_weight: float) -> None:
        # Pressure does not gate the check for gas.
        if cargo_weight > self.load_capacity * HAZARD_FILL_RATIO:
            notify_hazard(self.container_number)


class RefrigeratedContainer(BaseContainer):
    kind: Literal[ContainerKind.REFRIGERATED] = Field(ContainerKind.REFRIGERATED, frozen=True)

    temperature:  float
    product_type: str


Container = Annotated[
    Union[LiquidContainer, GasContainer, RefrigeratedContainer],
    Field(discriminator="kind"),
]

_VARIANTS: dict[ContainerKind, type[BaseContainer]] = {
    ContainerKind.LIQUID:       LiquidContainer,
    ContainerKind.GAS:          GasContainer,
    ContainerKind.REFRIGERATED: RefrigeratedContainer,
}

_CONTAINER_ADAPTER: TypeAdapter[BaseContainer] = TypeAdapter(Container)


def new_container(
    variant: str | ContainerKind,
    container_number: str,
    load_capacity: float,
    empty_weight: float,
    **fields: Any,
) -> BaseContainer:
    """Build a container of the named variant.

    Args:
        variant:          "liquid", "gas" or "refrigerated" (case-insensitive).
        container_number: Caller-supplied identifier.
        load_capacity:    Maximum cargo weight.
        empty_weight:     Tare weight.
        **fields:         Variant-specific fields (pressure / temperature,
                          product_type).

    Raises:
        ConstructionError: Unknown variant, or fields that fail validation.
    """
    if isinstance(variant, ContainerKind):
        kind = variant
    else:
        try:
            kind = ContainerKind(str(variant).strip().lower())
        except ValueError:
            raise ConstructionError(
                f"Invalid container type {variant!r}. "
                "Valid values: 'liquid', 'gas', 'refrigerated'."
            ) from None

    # A new container always starts empty; stored weights go through parse_container().
    reserved = sorted({"kind", "current_weight"} & fields.keys())
    if reserved:
        raise ConstructionError(
            f"Field(s) {', '.join(reserved)} cannot be set on a new container"
        )

    model = _VARIANTS[kind]
    try:
        return model(
            container_number=container_number,
            load_capacity=load_capacity,
            empty_weight=empty_weight,
            **fields,
        )
    except ValidationError as exc:
        raise ConstructionError(
            f"Invalid {kind.value} container {container_number!r}: "
            f"{exc.error_count()} validation error(s)"
        ) from exc


def parse_container(data: dict[str, Any]) -> BaseContainer:
    """Rebuild a container from a ``model_dump()`` dict, dispatching on ``kind``.

    Raises:
        ConstructionError: Missing/unknown kind or invalid fields.
    """
    try:
        return _CONTAINER_ADAPTER.validate_python(data)
    except ValidationError as exc:
        raise ConstructionError(
            f"Invalid container data: {exc.error_count()} validation error(s)"
        ) from exc


# ── Snapshots ──────────────────────────────────────────────────────────────────

class ContainerInfo(BaseModel):
    """Read-only view of one container."""

    container_number: str
    kind:             ContainerKind
    load_capacity:    float
    empty_weight:     float
    current_weight:   float
    cargo_weight:     float


class ShipInfo(BaseModel):
    """Read-only view of a ship and its cargo."""

    name:           str
    max_speed:      float
    max_containers: int
    max_weight:     float
    container_count: int
    current_weight: float
    containers:     list[ContainerInfo] = Field(default_factory=list)

    def to_dict(self) -> dict:
        """Serialise to a plain dict (JSON-safe)."""
        return self.model_dump(mode="json")


class FleetInfo(BaseModel):
    """Read-only view of every ship registered with a FleetService."""

    name:            str
    ships:           list[ShipInfo]
    container_count: int
    total_weight:    float
    generated_at:    datetime = Field(
                         default_factory=lambda: datetime.now(timezone.utc)
                     )

    def to_dict(self) -> dict:
        """Serialise to a plain dict (JSON-safe)."""
        return self.model_dump(mode="json")


class TransferResult(BaseModel):
    """Outcome of a ship-to-ship transfer.

    ``transferred`` is False only when the container was not found aboard the
    source ship; capacity and weight failures on the target are raised.
    """

    container_number: str
    source:           str
    target:           str
    transferred:      bool

    @property
    def message(self) -> str:
        if self.transferred:
            return f"Container {self.container_number} transferred to the target ship."
        return f"Container {self.container_number} not found on this ship."
