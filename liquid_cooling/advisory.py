"""
Advisory Module - W-Class Supply Temperature Check

Validates the supply setpoint against the selected ASHRAE W-class
(2°C ≤ T_supply ≤ upper bound) and flags classes that usually allow
chiller-free operation.

The free-cooling flag is a heuristic: it only says the class is one of
the three warmest in the table. It is not derived from climate data.

Author: HVAC Team
Date: 2025-11-24
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional

from .reference_data import TemperatureClass, W_CLASSES, W_CLASS_LOWER_BOUND_C

logger = logging.getLogger(__name__)

FREE_COOLING_CLASS_COUNT = 3
FREE_COOLING_NOTE = (
    "Selected class suggests high likelihood of chiller-free or reduced-chiller "
    "operation in many climates. Validate against local weather and "
    "heat-rejection topology."
)


class Severity(str, Enum):
    OK = "ok"
    WARN = "warn"
    BAD = "bad"


@dataclass(frozen=True)
class Advisory:
    within_range: bool
    message: str
    severity: Severity
    free_cooling_likely: bool
    class_label: str


def is_free_cooling_class(temperature_class, classes=None):
    """True if the class ranks among the three warmest upper bounds of the table."""
    table = W_CLASSES if classes is None else classes
    bounds = sorted({c.upper_bound_c for c in table.values()}, reverse=True)
    if not bounds:
        return False
    return temperature_class.upper_bound_c >= bounds[:FREE_COOLING_CLASS_COUNT][-1]


def advise(
    supply_temp_c: float,
    temperature_class: TemperatureClass,
    classes: Optional[Mapping[str, TemperatureClass]] = None,
    return_temp_c: Optional[float] = None,
) -> Advisory:
    """
    Check a supply temperature against a W-class.

    Args:
        supply_temp_c: Supply (entering water) temperature (°C)
        temperature_class: Selected W-class
        classes: Class table used to rank free-cooling classes
        return_temp_c: Return temperature (°C), quoted in the in-range message

    Returns:
        Advisory with severity ok (inside), bad (below 2°C) or warn (above upper bound)
    """
    label = temperature_class.label
    lower = W_CLASS_LOWER_BOUND_C
    upper = temperature_class.upper_bound_c
    within = lower <= supply_temp_c <= upper

    if within:
        severity = Severity.OK
        message = f"Supply {supply_temp_c:.1f}°C is inside {label}."
        if return_temp_c is not None:
            message += f" Return {return_temp_c:.1f}°C."
    else:
        if supply_temp_c < lower:
            severity = Severity.BAD
            violated = f"below the {lower:g}°C lower bound"
        else:
            severity = Severity.WARN
            violated = f"above the {upper:g}°C upper bound"
        message = (
            f"Supply {supply_temp_c:.1f}°C is outside {label} ({violated}). "
            f"Allowed range is {lower:g}–{upper:g}°C. Adjust setpoint or class."
        )

    logger.debug("Advisory: %s", message)
    return Advisory(
        within_range=within,
        message=message,
        severity=severity,
        free_cooling_likely=is_free_cooling_class(temperature_class, classes),
        class_label=label,
    )
