from __future__ import annotations

import json

import pytest

from liquid_cooling.main import DefaultParameters, ExampleParameters, main, parse_overrides
from liquid_cooling.normalizer import FALLBACKS


def test_parameter_sets_cover_every_numeric_field():
    raw = DefaultParameters.as_raw()
    assert set(FALLBACKS) <= set(raw)
    assert {"coolant", "w_class", "redundancy"} <= set(raw)


def test_example_overrides_supply_and_class():
    raw = ExampleParameters.as_raw()
    assert raw["supply_temp_c"] == "30"
    assert raw["w_class"] == "W40"
    assert raw["it_load_kw"] == DefaultParameters.IT_LOAD_KW


def test_parse_overrides():
    assert parse_overrides(["it_load_kw=6000", " redundancy = N+1 "]) == {
        "it_load_kw": "6000",
        "redundancy": "N+1",
    }
    with pytest.raises(ValueError):
        parse_overrides(["it_load_kw"])


def test_json_output(capsys):
    assert main(["--example", "--json", "--set", "it_load_kw=6000", "--set", "redundancy=N+1"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["capacity"]["units_needed"] == 4
    assert data["capacity"]["units_with_redundancy"] == 5
    assert data["advisory"]["severity"] == "ok"
    assert data["advisory"]["free_cooling_likely"] is True


def test_text_output(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "LIQUID COOLING CALCULATOR" in out
    assert "=== HYDRAULICS ===" in out


def test_unknown_coolant_fails(capsys):
    assert main(["--set", "coolant=brine"]) == 2
    assert main(["--lenient", "--set", "coolant=brine"]) == 0


def test_bad_override_fails():
    assert main(["--set", "oops"]) == 2
