from __future__ import annotations

import json
import math
import sys

import numpy as np

from liquid_cooling.engine import evaluate_raw
from liquid_cooling.report import PLACEHOLDER, format_results, format_value, to_jsonable


def test_format_value_precision():
    assert format_value(2.5) == "2.50"
    assert format_value(899412.7, 0) == "899413"
    assert format_value(0.02345, 3) == "0.023"


def test_format_value_placeholder_for_undefined():
    assert format_value(math.nan) == PLACEHOLDER
    assert format_value(math.inf, 3) == PLACEHOLDER
    assert format_value(None) == PLACEHOLDER


def test_to_jsonable_handles_nan_enums_and_numpy():
    res = evaluate_raw({"it_load_kw": "0"})
    data = to_jsonable(res)
    assert data["pue"] is None
    assert data["savings_pct"] is None
    assert data["advisory"]["severity"] == "ok"
    assert isinstance(data["capacity"]["units_needed"], int)
    json.dumps(data)

    assert to_jsonable({"x": np.float64(1.5), "n": np.int64(3)}) == {"x": 1.5, "n": 3}
    assert to_jsonable(np.float64("nan")) is None


def test_to_jsonable_without_numpy(monkeypatch):
    monkeypatch.setitem(sys.modules, "numpy", None)
    assert to_jsonable({"x": math.nan, "n": 3}) == {"x": None, "n": 3}
    json.dumps(to_jsonable(evaluate_raw({"it_load_kw": "0"})))


def test_text_report_sections(reference_raw):
    text = format_results(evaluate_raw(reference_raw))
    for title in ("THERMAL", "HYDRAULICS", "ENERGY", "ADVISORS & SIZING"):
        assert f"=== {title} ===" in text
    assert "[OK] Supply 25.0°C is inside W32" in text
    assert "[HINT]" not in text
    assert "CDUs required" in text


def test_text_report_hint_and_placeholder(reference_raw):
    raw = dict(reference_raw, it_load_kw="0", w_class="W45")
    text = format_results(evaluate_raw(raw))
    assert "[HINT]" in text
    pue_line = next(line for line in text.splitlines() if line.startswith("PUE"))
    assert PLACEHOLDER in pue_line
