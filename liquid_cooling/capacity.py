"""
Capacity Module - CDU Count and Rack Sizing

Sizing rules:
    racks_per_unit = floor(C_unit / (P_rack × clamp(capture, 0.01, 1)))
    units_needed   = ceil(P_IT × clamp(capture, 0, 1) / C_unit)
    N+1 adds one standby unit

A ratio that overflows (capacity near the float limit) has no whole
count; the plan reports None for it.

Also holds the hardware preset helpers that feed rack and fleet power
into the calculator.

Author: HVAC Team
Date: 2025-11-24
"""

import logging
import math
from dataclasses import dataclass
from typing import Optional

from .normalizer import number_or
from .reference_data import CDU_MODELS, Redundancy

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CapacityPlan:
    units_needed: Optional[int]
    units_with_redundancy: Optional[int]
    racks_per_unit: Optional[int]


def whole_count(ratio, rounding):
    """rounding(ratio) as int, or None when the ratio is not finite."""
    if not math.isfinite(ratio):
        return None
    return int(rounding(ratio))


def plan_capacity(it_load_kw, capture_fraction, unit_capacity_kw, rack_kw, redundancy=Redundancy.N):
    """
    Number of distribution units for a fleet.

    Args:
        it_load_kw: Fleet IT load (kW)
        capture_fraction: Liquid capture fraction (-)
        unit_capacity_kw: Capacity per unit (kW), floored to 1
        rack_kw: IT power per rack (kW), floored to 1
        redundancy: Redundancy.N or Redundancy.N_PLUS_1

    Returns:
        CapacityPlan
    """
    capacity = max(1.0, unit_capacity_kw)
    rack = max(1.0, rack_kw)
    it = max(0.0, it_load_kw)

    racks_per_unit = whole_count(capacity / (rack * min(1.0, max(0.01, capture_fraction))), math.floor)
    units_needed = whole_count(it * min(1.0, max(0.0, capture_fraction)) / capacity, math.ceil)
    units_with_redundancy = units_needed
    if units_needed is not None and redundancy == Redundancy.N_PLUS_1:
        units_with_redundancy = units_needed + 1

    logger.debug("Capacity: %s units (%s with %s), %s racks/unit",
                 units_needed, units_with_redundancy, getattr(redundancy, "value", redundancy), racks_per_unit)
    return CapacityPlan(
        units_needed=units_needed,
        units_with_redundancy=units_with_redundancy,
        racks_per_unit=racks_per_unit,
    )


def estimate_rack_kw(device, devices_per_rack=8, it_overhead=1.15):
    """
    Rack IT power from accelerator TDP.

    P_rack = TDP × n_devices × overhead / 1000, with overhead ≥ 1.0
    covering CPUs, NICs, PSUs and VRMs.

    Args:
        device: Device record
        devices_per_rack: Accelerators per rack (≥ 1)
        it_overhead: IT overhead factor (≥ 1.0)

    Returns:
        Rack IT power (kW)
    """
    tdp_w = number_or(device.tdp_w, 700.0)
    n = max(1.0, number_or(devices_per_rack, 8.0))
    overhead = max(1.0, number_or(it_overhead, 1.15))
    return tdp_w * n * overhead / 1000.0


def estimate_fleet_it_kw(rack_kw, rack_count):
    """Fleet IT power (kW) = rack power × number of racks."""
    return number_or(rack_kw, 0.0) * max(0.0, number_or(rack_count, 0.0))


def smallest_cdu_model(load_kw, facility_water: Optional[bool] = None):
    """
    Smallest catalog CDU whose capacity covers load_kw.

    Args:
        load_kw: Heat load per unit (kW)
        facility_water: Restrict to liquid-to-liquid (True) or liquid-to-air (False)

    Returns:
        CDUModel, or None if no model is large enough
    """
    candidates = [
        m for m in CDU_MODELS
        if m.capacity_kw >= load_kw and (facility_water is None or m.facility_water == facility_water)
    ]
    if not candidates:
        return None
    return min(candidates, key=lambda m: m.capacity_kw)
