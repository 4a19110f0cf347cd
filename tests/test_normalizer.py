from __future__ import annotations

import dataclasses

import pytest

from liquid_cooling.errors import ConfigurationError
from liquid_cooling.normalizer import FALLBACKS, normalize, number_or
from liquid_cooling.reference_data import COOLANTS, CoolantKind, Redundancy, TemperatureClass, W_CLASSES


@pytest.mark.parametrize("value", ["abc", "", None, "inf", "-inf", "nan", float("nan"), object()])
def test_number_or_falls_back_on_garbage(value):
    assert number_or(value, 7.5) == 7.5


@pytest.mark.parametrize("value,expected", [("12", 12.0), (" 3.5 ", 3.5), ("1e3", 1000.0), (4, 4.0)])
def test_number_or_parses(value, expected):
    assert number_or(value, 0.0) == expected


def test_empty_input_uses_every_fallback():
    inp = normalize({})
    for field, fallback in FALLBACKS.items():
        assert getattr(inp, field) == pytest.approx(fallback)
    assert inp.coolant_kind is CoolantKind.WATER
    assert inp.coolant == COOLANTS[CoolantKind.WATER]
    assert inp.temperature_class == W_CLASSES["W32"]
    assert inp.redundancy is Redundancy.N


def test_malformed_fields_get_fallbacks():
    inp = normalize({"delta_t_c": "ten", "pipe_id_mm": "", "pump_efficiency": "n/a"})
    assert inp.delta_t_c == 10.0
    assert inp.pipe_id_mm == 38.0
    assert inp.pump_efficiency == 0.7


@pytest.mark.parametrize("raw,expected", [("1.5", 1.0), ("-0.2", 0.0), ("0.4", 0.4)])
def test_capture_fraction_clamped(raw, expected):
    assert normalize({"capture_fraction": raw}).capture_fraction == expected


@pytest.mark.parametrize("raw,expected", [("0.99", 0.95), ("0.01", 0.05), ("-3", 0.05), ("0.8", 0.8)])
def test_pump_efficiency_clamped(raw, expected):
    assert normalize({"pump_efficiency": raw}).pump_efficiency == expected


def test_floors():
    inp = normalize({
        "it_load_kw": "-50",
        "delta_t_c": "0",
        "pipe_id_mm": "0",
        "chiller_cop": "0",
        "baseline_air_cop": "-1",
        "cdu_capacity_kw": "0",
        "rack_kw": "0.2",
        "loop_length_m": "-10",
        "roughness_mm": "-1",
        "k_minor": "-5",
        "baseline_fan_kw": "-1",
        "cold_plate_approach_c": "-2",
    })
    assert inp.it_load_kw == 0.0
    assert inp.delta_t_c == 0.001
    assert inp.pipe_id_mm == 0.1
    assert inp.chiller_cop == 0.1
    assert inp.baseline_air_cop == 0.1
    assert inp.cdu_capacity_kw == 1.0
    assert inp.rack_kw == 1.0
    assert inp.loop_length_m == 0.0
    assert inp.roughness_mm == 0.0
    assert inp.k_minor == 0.0
    assert inp.baseline_fan_kw == 0.0
    assert inp.cold_plate_approach_c == 0.0


def test_supply_temperature_not_clamped():
    assert normalize({"supply_temp_c": "-5"}).supply_temp_c == -5.0


def test_engine_input_is_immutable():
    inp = normalize({})
    with pytest.raises(dataclasses.FrozenInstanceError):
        inp.it_load_kw = 5.0


def test_unknown_coolant_raises_by_default():
    with pytest.raises(ConfigurationError) as excinfo:
        normalize({"coolant": "brine"})
    assert excinfo.value.key == "brine"
    assert "brine" in str(excinfo.value)


def test_unknown_coolant_lenient_uses_water():
    inp = normalize({"coolant": "brine"}, strict=False)
    assert inp.coolant_kind is CoolantKind.WATER
    assert inp.coolant.density == 997.0


def test_unknown_class_raises_even_when_lenient():
    with pytest.raises(ConfigurationError):
        normalize({"w_class": "W99"}, strict=False)


def test_unknown_redundancy():
    with pytest.raises(ConfigurationError):
        normalize({"redundancy": "2N"})
    assert normalize({"redundancy": "2N"}, strict=False).redundancy is Redundancy.N
    assert normalize({"redundancy": "n+1"}).redundancy is Redundancy.N_PLUS_1


def test_enum_keys_accepted():
    inp = normalize({"coolant": CoolantKind.PG30, "redundancy": Redundancy.N_PLUS_1})
    assert inp.coolant.name == "Propylene Glycol 30%"
    assert inp.redundancy is Redundancy.N_PLUS_1


def test_custom_class_table():
    table = {"W32": TemperatureClass("W32", 27.0)}
    inp = normalize({"w_class": "W32"}, classes=table)
    assert inp.temperature_class.upper_bound_c == 27.0
    assert inp.temperature_classes is table


def test_invalid_property_model():
    with pytest.raises(ValueError):
        normalize({}, property_model="tables")


def test_engine_input_class_table_defaults_to_w_classes():
    inp = normalize({})
    values = {f.name: getattr(inp, f.name) for f in dataclasses.fields(inp) if f.name != "temperature_classes"}
    rebuilt = type(inp)(**values)
    assert rebuilt.temperature_classes is W_CLASSES
    assert rebuilt == inp
