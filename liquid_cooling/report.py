"""
Report Module - JSON Conversion and Text Summary

Display helpers for EngineOutput. Precision is fixed per field; any
non-finite value (undefined PUE, savings %) renders as "—" in text and
null in JSON.

Author: HVAC Team
Date: 2025-11-24
"""

import math
from dataclasses import asdict, is_dataclass
from enum import Enum

from .advisory import FREE_COOLING_NOTE

PLACEHOLDER = "—"

# (label, attribute, unit, precision)
SECTIONS = (
    ("THERMAL", (
        ("Heat removed", "captured_heat_kw", "kW", 2),
        ("Return temperature", "return_temp_c", "°C", 2),
        ("Total approach", "total_approach_c", "°C", 2),
        ("Mass flow", "mass_flow_kg_s", "kg/s", 2),
        ("Flow", "vol_flow_l_min", "L/min", 2),
        ("Flow", "vol_flow_gpm", "gpm", 2),
    )),
    ("HYDRAULICS", (
        ("Velocity", "velocity_m_s", "m/s", 2),
        ("Reynolds", "reynolds", "-", 0),
        ("Friction factor f", "friction_factor", "-", 4),
        ("ΔP total", "pressure_drop_kpa", "kPa", 2),
        ("Head", "head_m", "m", 2),
        ("Pump power", "pump_kw", "kW", 2),
    )),
    ("ENERGY", (
        ("Chiller power (liquid)", "chiller_kw", "kW", 2),
        ("Cooling tons", "cooling_tons", "TR", 2),
        ("PUE (est)", "pue", "-", 3),
        ("Baseline chiller (air)", "baseline_chiller_kw", "kW", 2),
        ("Baseline total", "baseline_total_kw", "kW", 2),
        ("Liquid total", "liquid_total_kw", "kW", 2),
        ("Savings", "savings_kw", "kW", 2),
        ("Savings", "savings_pct", "%", 2),
    )),
)


def to_jsonable(obj):
    """
    Recursively convert results (dataclasses, enums, numpy scalars) into
    JSON-serializable types. NaN and infinities become None.
    """
    try:
        import numpy as _np
    except Exception:
        _np = None

    if _np is not None and isinstance(obj, _np.generic):
        obj = obj.item()

    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, float):
        return obj if math.isfinite(obj) else None
    if obj is None or isinstance(obj, (str, int, bool)):
        return obj

    if isinstance(obj, (list, tuple, set)):
        return [to_jsonable(x) for x in obj]
    if isinstance(obj, dict):
        return {to_jsonable(k): to_jsonable(v) for k, v in obj.items()}
    if is_dataclass(obj):
        return to_jsonable(asdict(obj))

    return str(obj)


def format_value(value, precision=2):
    """Fixed-precision text, or the placeholder for undefined values."""
    try:
        v = float(value)
    except (TypeError, ValueError):
        return PLACEHOLDER
    if not math.isfinite(v):
        return PLACEHOLDER
    return f"{v:.{precision}f}"


def format_results(res):
    """
    Sectioned text summary of an EngineOutput.

    Returns:
        str
    """
    lines = []
    for title, rows in SECTIONS:
        lines.append(f"=== {title} ===")
        for label, attr, unit, precision in rows:
            lines.append(f"{label:<24} : {format_value(getattr(res, attr), precision)} {unit}")
        lines.append("")

    adv = res.advisory
    lines.append("=== ADVISORS & SIZING ===")
    lines.append(f"[{adv.severity.value.upper()}] {adv.message}")
    if adv.free_cooling_likely:
        lines.append(f"[HINT] {FREE_COOLING_NOTE}")
    cap = res.capacity
    lines.append(f"{'Racks per CDU (approx)':<24} : {format_value(cap.racks_per_unit, 0)}")
    lines.append(f"{'CDUs required':<24} : {format_value(cap.units_needed, 0)}")
    lines.append(f"{'With redundancy':<24} : {format_value(cap.units_with_redundancy, 0)}")
    return "\n".join(lines)


def print_results(res):
    print(format_results(res))
