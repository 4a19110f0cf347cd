"""
Input Normalizer Module

Turns raw form values (text, numbers, None, garbage) into a fully
populated, immutable EngineInput:

    1. Parse each field as float; unparsable or non-finite -> FALLBACKS[field]
    2. Apply the field's clamp from CLAMPS
    3. Resolve lookup keys (coolant, W-class, redundancy) into closed types

Numeric input never raises. Unknown lookup keys raise ConfigurationError
unless strict=False (then coolant -> water, redundancy -> N). Unknown
W-classes always raise.

Author: HVAC Team
Date: 2025-11-24
"""

import logging
import math
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from .reference_data import (
    COOLANTS,
    CoolantKind,
    CoolantProperties,
    Redundancy,
    TemperatureClass,
    W_CLASSES,
    resolve_coolant,
    resolve_redundancy,
    resolve_temperature_class,
)

logger = logging.getLogger(__name__)

PROPERTY_MODELS = ("preset", "coolprop")

# Per-field fallback when the raw value is missing, unparsable or non-finite
FALLBACKS = {
    "it_load_kw": 0.0,
    "capture_fraction": 1.0,
    "supply_temp_c": 25.0,
    "delta_t_c": 10.0,
    "cold_plate_approach_c": 5.0,
    "cdu_approach_c": 5.0,
    "pipe_id_mm": 38.0,
    "loop_length_m": 0.0,
    "roughness_mm": 0.0015,
    "k_minor": 0.0,
    "pump_efficiency": 0.7,
    "chiller_cop": 6.0,
    "cdu_capacity_kw": 1500.0,
    "rack_kw": 60.0,
    "baseline_air_cop": 4.0,
    "baseline_fan_kw": 0.0,
}

# (low, high); None = unbounded
CLAMPS = {
    "it_load_kw": (0.0, None),
    "capture_fraction": (0.0, 1.0),
    "supply_temp_c": (None, None),
    "delta_t_c": (0.001, None),  # avoids division by zero in the flow stage
    "cold_plate_approach_c": (0.0, None),
    "cdu_approach_c": (0.0, None),
    "pipe_id_mm": (0.1, None),
    "loop_length_m": (0.0, None),
    "roughness_mm": (0.0, None),
    "k_minor": (0.0, None),
    "pump_efficiency": (0.05, 0.95),
    "chiller_cop": (0.1, None),
    "cdu_capacity_kw": (1.0, None),
    "rack_kw": (1.0, None),
    "baseline_air_cop": (0.1, None),
    "baseline_fan_kw": (0.0, None),
}

DEFAULT_LOOKUPS = {
    "coolant": CoolantKind.WATER.value,
    "w_class": "W32",
    "redundancy": Redundancy.N.value,
}


@dataclass(frozen=True)
class EngineInput:
    """
    One immutable snapshot of calculator inputs.

    Units:
        Loads/capacities in kW, temperatures in °C, pipe ID and roughness
        in mm, loop length in m. Ratios (capture, efficiency, COP) are
        dimensionless.
    """

    it_load_kw: float
    capture_fraction: float
    supply_temp_c: float
    delta_t_c: float
    coolant_kind: CoolantKind
    coolant: CoolantProperties
    w_class: str
    temperature_class: TemperatureClass
    cold_plate_approach_c: float
    cdu_approach_c: float
    pipe_id_mm: float
    loop_length_m: float
    roughness_mm: float
    k_minor: float
    pump_efficiency: float
    chiller_cop: float
    cdu_capacity_kw: float
    rack_kw: float
    redundancy: Redundancy
    baseline_air_cop: float
    baseline_fan_kw: float
    temperature_classes: Mapping[str, TemperatureClass] = field(default_factory=lambda: W_CLASSES)


def number_or(value, fallback):
    """Parse value as a finite float, else return fallback."""
    try:
        v = float(value)
    except (TypeError, ValueError):
        return fallback
    return v if math.isfinite(v) else fallback


def finite_or_nan(value):
    """Non-finite results (overflow to inf, inf - inf) become NaN, the undefined marker."""
    return value if math.isfinite(value) else math.nan


def clamp(value, low=None, high=None):
    if low is not None and value < low:
        return low
    if high is not None and value > high:
        return high
    return value


def normalize_field(name, value):
    """Parse and clamp one numeric field."""
    fallback = FALLBACKS[name]
    parsed = number_or(value, fallback)
    if parsed is fallback and value is not None:
        logger.debug("%s: %r is not a finite number, using fallback %s", name, value, fallback)
    low, high = CLAMPS[name]
    return clamp(parsed, low, high)


def normalize(
    raw: Mapping[str, Any],
    classes: Optional[Mapping[str, TemperatureClass]] = None,
    strict: bool = True,
    property_model: str = "preset",
) -> EngineInput:
    """
    Build an EngineInput from raw field values.

    Args:
        raw: Mapping of field name -> raw value; missing fields use fallbacks
        classes: W-class table (default: ASHRAE W_CLASSES)
        strict: Raise on unknown coolant/redundancy keys instead of defaulting
        property_model: 'preset' (25°C table) or 'coolprop' (mean loop temperature)

    Returns:
        EngineInput

    Raises:
        ConfigurationError: Unknown lookup key
        ValueError: Unknown property_model
    """
    if property_model not in PROPERTY_MODELS:
        raise ValueError(f"Invalid property_model: {property_model}, must be one of {PROPERTY_MODELS}")

    table = W_CLASSES if classes is None else classes
    numbers = {name: normalize_field(name, raw.get(name)) for name in FALLBACKS}

    def lookup(name):
        value = raw.get(name)
        return DEFAULT_LOOKUPS[name] if value is None else value

    coolant_kind = resolve_coolant(lookup("coolant"), strict=strict)
    w_class_key = lookup("w_class")
    temperature_class = resolve_temperature_class(w_class_key, table)
    redundancy = resolve_redundancy(lookup("redundancy"), strict=strict)

    if property_model == "coolprop":
        from .coolant_properties import evaluate_coolant

        t_mean = numbers["supply_temp_c"] + numbers["delta_t_c"] / 2.0
        coolant = evaluate_coolant(coolant_kind, t_mean)
    else:
        coolant = COOLANTS[coolant_kind]

    return EngineInput(
        coolant_kind=coolant_kind,
        coolant=coolant,
        w_class=str(getattr(w_class_key, "value", w_class_key)).strip(),
        temperature_class=temperature_class,
        redundancy=redundancy,
        temperature_classes=table,
        **numbers,
    )
