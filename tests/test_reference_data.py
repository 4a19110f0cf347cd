from __future__ import annotations

import pytest

from liquid_cooling.errors import ConfigurationError
from liquid_cooling.reference_data import (
    CDU_MODELS,
    COOLANTS,
    CoolantKind,
    W_CLASSES,
    WClass,
    find_device,
    find_rack_archetype,
    resolve_coolant,
    resolve_temperature_class,
)


def test_every_coolant_kind_has_properties():
    for kind in CoolantKind:
        props = COOLANTS[kind]
        assert props.density > 0
        assert props.specific_heat > 0
        assert props.viscosity > 0


def test_tables_are_read_only():
    with pytest.raises(TypeError):
        W_CLASSES["W50"] = W_CLASSES["W45"]
    with pytest.raises(TypeError):
        COOLANTS[CoolantKind.WATER] = COOLANTS[CoolantKind.EG30]


def test_every_w_class_enum_in_table():
    for key in WClass:
        assert resolve_temperature_class(key).lower_bound_c == 2.0


def test_resolve_coolant_case_insensitive():
    assert resolve_coolant(" Water ") is CoolantKind.WATER
    assert resolve_coolant("EG30") is CoolantKind.EG30


def test_configuration_error_names_key_and_table():
    with pytest.raises(ConfigurationError) as excinfo:
        resolve_temperature_class("W99")
    err = excinfo.value
    assert err.key == "W99"
    assert err.table == "temperature class"
    assert "W32" in str(err)
    assert isinstance(err, ValueError)


def test_hardware_lookups():
    assert find_device("amd_mi300x").tdp_w == 750.0
    assert find_rack_archetype("nvl72").rack_kw == 132.0
    with pytest.raises(ConfigurationError):
        find_device("tpu_v5")
    with pytest.raises(ConfigurationError):
        find_rack_archetype("unknown")


def test_cdu_catalog_sorted_largest_first():
    capacities = [m.capacity_kw for m in CDU_MODELS]
    assert capacities == sorted(capacities, reverse=True)
