"""
tests/unit/test_models.py
──────────────────────────────────────────────────────────────────────────────
Unit tests for domain model validation (Pydantic) and container construction.

Tests cover:
  • ContainerKind enum values
  • Field validation and immutability
  • new_container() variant selection and ConstructionError
  • parse_container() discriminated-union dispatch
  • Snapshot serialisation
"""
from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from fleet.domain.exceptions import ConstructionError
from fleet.domain.models import (
    BaseContainer,
    ContainerInfo,
    ContainerKind,
    GasContainer,
    LiquidContainer,
    RefrigeratedContainer,
    ShipInfo,
    new_container,
    parse_container,
)


class TestContainerKind:
    def test_values(self):
        assert ContainerKind.LIQUID.value == "liquid"
        assert ContainerKind.GAS.value == "gas"
        assert ContainerKind.REFRIGERATED.value == "refrigerated"

    def test_from_string(self):
        assert ContainerKind("gas") == ContainerKind.GAS


class TestContainerFields:
    def test_kind_tag_per_variant(self, liquid, gas, reefer):
        assert liquid.kind == ContainerKind.LIQUID
        assert gas.kind == ContainerKind.GAS
        assert reefer.kind == ContainerKind.REFRIGERATED

    def test_number_is_stripped(self):
        c = GasContainer(container_number="  G-7 ", load_capacity=1, empty_weight=1, pressure=1)
        assert c.container_number == "G-7"

    def test_blank_number_rejected(self):
        with pytest.raises(ValidationError):
            GasContainer(container_number="   ", load_capacity=1, empty_weight=1, pressure=1)

    def test_negative_capacity_rejected(self):
        with pytest.raises(ValidationError):
            GasContainer(container_number="G", load_capacity=-1, empty_weight=1, pressure=1)

    def test_missing_variant_field_rejected(self):
        with pytest.raises(ValidationError):
            RefrigeratedContainer(
                container_number="R", load_capacity=1, empty_weight=1, temperature=4.0
            )  # type: ignore[call-arg]

    def test_unknown_field_rejected(self):
        with pytest.raises(ValidationError):
            GasContainer(
                container_number="G", load_capacity=1, empty_weight=1, pressure=1, temperature=3
            )  # type: ignore[call-arg]

    def test_capacity_is_immutable(self, liquid):
        with pytest.raises(ValidationError):
            liquid.load_capacity = 999.0

    def test_empty_weight_is_immutable(self, liquid):
        with pytest.raises(ValidationError):
            liquid.empty_weight = 1.0

    def test_explicit_current_weight_kept(self):
        c = LiquidContainer(
            container_number="L", load_capacity=10, empty_weight=5, current_weight=12, pressure=0
        )
        assert c.current_weight == 12


class TestNewContainer:
    @pytest.mark.parametrize("variant", ["liquid", "LIQUID", "Liquid", " liquid "])
    def test_variant_name_case_insensitive(self, variant):
        c = new_container(variant, "L-1", 100, 20, pressure=1.5)
        assert isinstance(c, LiquidContainer)
        assert c.pressure == 1.5

    def test_gas(self):
        c = new_container("Gas", "G-1", 100, 20, pressure=0)
        assert isinstance(c, GasContainer)

    def test_refrigerated(self):
        c = new_container("refrigerated", "R-1", 100, 20, temperature=-5, product_type="ice cream")
        assert isinstance(c, RefrigeratedContainer)
        assert c.product_type == "ice cream"
        assert c.current_weight == 20

    def test_accepts_enum(self):
        c = new_container(ContainerKind.GAS, "G-2", 10, 1, pressure=3)
        assert c.kind == ContainerKind.GAS

    def test_unknown_variant_raises(self):
        with pytest.raises(ConstructionError, match="Invalid container type"):
            new_container("bulk", "B-1", 100, 20)

    def test_missing_fields_raise_construction_error(self):
        with pytest.raises(ConstructionError) as exc_info:
            new_container("liquid", "L-2", 100, 20)
        assert isinstance(exc_info.value.__cause__, ValidationError)

    def test_bad_field_type_raises_construction_error(self):
        with pytest.raises(ConstructionError):
            new_container("gas", "G-3", 100, 20, pressure="high")

    def test_new_container_starts_empty_even_if_weight_given(self):
        with pytest.raises(ConstructionError, match="current_weight"):
            new_container("gas", "G-4", 10, 5, pressure=1, current_weight=1e9)

    def test_kind_cannot_be_overridden(self):
        with pytest.raises(ConstructionError, match="kind"):
            new_container("gas", "G-5", 10, 5, pressure=1, kind="liquid")

    def test_parse_container_still_accepts_stored_weight(self):
        c = parse_container(
            {"kind": "gas", "container_number": "G-6", "load_capacity": 10,
             "empty_weight": 5, "current_weight": 12, "pressure": 1}
        )
        assert c.current_weight == 12


class TestParseContainer:
    def test_round_trip_keeps_variant_and_weight(self, liquid):
        liquid.load(50.0)
        rebuilt = parse_container(liquid.model_dump())
        assert isinstance(rebuilt, LiquidContainer)
        assert rebuilt.current_weight == liquid.current_weight

    def test_missing_kind_raises(self):
        with pytest.raises(ConstructionError):
            parse_container({"container_number": "X", "load_capacity": 1, "empty_weight": 1})


class TestSnapshots:
    def test_base_container_info_uses_declared_kind(self):
        c = BaseContainer(
            kind=ContainerKind.GAS, container_number="B-1", load_capacity=10, empty_weight=2
        )
        assert c.info().kind == ContainerKind.GAS

    def test_base_container_requires_kind(self):
        with pytest.raises(ValidationError):
            BaseContainer(container_number="B-2", load_capacity=10, empty_weight=2)

    def test_container_info(self, reefer):
        reefer.load(120.0)
        info = reefer.info()
        assert isinstance(info, ContainerInfo)
        assert info.container_number == "REF-1"
        assert info.kind == ContainerKind.REFRIGERATED
        assert info.load_capacity == 300.0
        assert info.current_weight == 270.0
        assert info.cargo_weight == 120.0

    def test_ship_info_to_dict_is_json_serialisable(self, gas):
        info = ShipInfo(
            name="s",
            max_speed=10.0,
            max_containers=2,
            max_weight=500.0,
            container_count=1,
            current_weight=gas.current_weight,
            containers=[gas.info()],
        )
        d = info.to_dict()
        assert d["containers"][0]["kind"] == "gas"
        assert "GAS-1" in json.dumps(d)
