"""
tests/conftest.py
──────────────────────────────────────────────────────────────────────────────
Shared pytest fixtures.

The domain has no external I/O, so there are no mock adapters: fixtures
build real containers, ships and a FleetService from explicit Settings
(never from the process environment).

Fixture hierarchy:
  settings       → Settings with small, test-friendly ship defaults
  liquid / gas / reefer → one fresh container of each variant
  ship           → roomy Ship (10 containers, 10 000 weight)
  single_slot_ship → Ship that holds exactly one container
  fleet          → FleetService wired with settings
"""
from __future__ import annotations

import pytest

from fleet.config.settings import Settings
from fleet.domain.models import GasContainer, LiquidContainer, RefrigeratedContainer
from fleet.domain.ship import Ship
from fleet.services.fleet import FleetService


# ── Settings fixture ───────────────────────────────────────────────────────

@pytest.fixture(scope="session")
def settings() -> Settings:
    """Return a Settings instance with sane test defaults."""
    return Settings(
        default_max_speed=20.0,
        default_max_containers=3,
        default_max_weight=1000.0,
        unique_container_numbers=True,
        replace_revalidates=False,
        fleet_name="test-fleet",
    )


# ── Containers ─────────────────────────────────────────────────────────────

@pytest.fixture
def liquid() -> LiquidContainer:
    return LiquidContainer(
        container_number="LIQ-1", load_capacity=200.0, empty_weight=100.0, pressure=2.0
    )


@pytest.fixture
def gas() -> GasContainer:
    return GasContainer(
        container_number="GAS-1", load_capacity=100.0, empty_weight=60.0, pressure=0.0
    )


@pytest.fixture
def reefer() -> RefrigeratedContainer:
    return RefrigeratedContainer(
        container_number="REF-1",
        load_capacity=300.0,
        empty_weight=150.0,
        temperature=-18.0,
        product_type="fish",
    )


# ── Ships ──────────────────────────────────────────────────────────────────

@pytest.fixture
def ship() -> Ship:
    return Ship(max_speed=25.5, max_containers=10, max_weight=10_000.0, name="source")


@pytest.fixture
def single_slot_ship() -> Ship:
    return Ship(max_speed=18.0, max_containers=1, max_weight=1000.0, name="single")


# ── Service ────────────────────────────────────────────────────────────────

@pytest.fixture
def fleet(settings) -> FleetService:
    return FleetService(settings)
