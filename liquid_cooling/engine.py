"""
Calculation Engine - Full Evaluation Chain

System Flow:
    Raw inputs → Normalizer → Thermal (flow) → Hydraulics (ΔP, pump)
    → Energy (chiller, PUE, baseline) → Capacity (CDU count)
    → Advisory (W-class check)

Every call is a fresh, pure function of one EngineInput snapshot: no
caching, no shared state, identical input gives identical output.

Author: HVAC Team
Date: 2025-11-24
"""

import logging
from dataclasses import dataclass, asdict
from typing import Any, Mapping, Optional

from .advisory import Advisory, advise
from .capacity import CapacityPlan, plan_capacity
from .energy import solve_energy
from .hydraulics import solve_hydraulics
from .normalizer import EngineInput, normalize
from .reference_data import TemperatureClass
from .thermal import solve_thermal

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EngineOutput:
    """Every derived quantity of one evaluation. Undefined ratios are NaN."""

    # Effective (clamped) inputs
    capture_fraction: float
    pump_efficiency: float
    supply_temp_c: float

    # Thermal
    captured_heat_kw: float
    return_temp_c: float
    total_approach_c: float
    mass_flow_kg_s: float
    vol_flow_m3_s: float
    vol_flow_l_min: float
    vol_flow_gpm: float

    # Hydraulics
    velocity_m_s: float
    reynolds: float
    flow_regime: str
    friction_factor: float
    pressure_drop_pa: float
    pressure_drop_kpa: float
    head_m: float
    pump_kw: float

    # Energy & comparison
    chiller_kw: float
    cooling_tons: float
    pue: float
    baseline_chiller_kw: float
    baseline_total_kw: float
    liquid_total_kw: float
    savings_kw: float
    savings_pct: float

    advisory: Advisory
    capacity: CapacityPlan

    def as_dict(self):
        return asdict(self)


def evaluate(inputs: EngineInput) -> EngineOutput:
    """
    Evaluate all stages for one input snapshot.

    Args:
        inputs: Normalized EngineInput

    Returns:
        EngineOutput
    """
    thermal = solve_thermal(
        inputs.it_load_kw,
        inputs.capture_fraction,
        inputs.coolant,
        inputs.delta_t_c,
        supply_temp_c=inputs.supply_temp_c,
    )
    hydraulic = solve_hydraulics(
        thermal.vol_flow_m3_s,
        inputs.coolant,
        inputs.pipe_id_mm,
        inputs.loop_length_m,
        inputs.roughness_mm,
        inputs.k_minor,
        inputs.pump_efficiency,
    )
    energy = solve_energy(
        inputs.it_load_kw,
        thermal.captured_heat_kw,
        hydraulic.pump_kw,
        inputs.chiller_cop,
        inputs.baseline_air_cop,
        inputs.baseline_fan_kw,
    )
    capacity = plan_capacity(
        inputs.it_load_kw,
        inputs.capture_fraction,
        inputs.cdu_capacity_kw,
        inputs.rack_kw,
        inputs.redundancy,
    )
    advisory = advise(
        inputs.supply_temp_c,
        inputs.temperature_class,
        classes=inputs.temperature_classes,
        return_temp_c=thermal.return_temp_c,
    )

    return EngineOutput(
        capture_fraction=inputs.capture_fraction,
        pump_efficiency=min(0.95, max(0.05, inputs.pump_efficiency)),
        supply_temp_c=inputs.supply_temp_c,
        captured_heat_kw=thermal.captured_heat_kw,
        return_temp_c=thermal.return_temp_c,
        total_approach_c=max(0.0, inputs.cold_plate_approach_c) + max(0.0, inputs.cdu_approach_c),
        mass_flow_kg_s=thermal.mass_flow_kg_s,
        vol_flow_m3_s=thermal.vol_flow_m3_s,
        vol_flow_l_min=thermal.vol_flow_l_min,
        vol_flow_gpm=thermal.vol_flow_gpm,
        velocity_m_s=hydraulic.velocity_m_s,
        reynolds=hydraulic.reynolds,
        flow_regime=hydraulic.flow_regime,
        friction_factor=hydraulic.friction_factor,
        pressure_drop_pa=hydraulic.pressure_drop_pa,
        pressure_drop_kpa=hydraulic.pressure_drop_kpa,
        head_m=hydraulic.head_m,
        pump_kw=hydraulic.pump_kw,
        chiller_kw=energy.chiller_kw,
        cooling_tons=energy.cooling_tons,
        pue=energy.pue,
        baseline_chiller_kw=energy.baseline_chiller_kw,
        baseline_total_kw=energy.baseline_total_kw,
        liquid_total_kw=energy.liquid_total_kw,
        savings_kw=energy.savings_kw,
        savings_pct=energy.savings_pct,
        advisory=advisory,
        capacity=capacity,
    )


def evaluate_raw(
    raw: Mapping[str, Any],
    classes: Optional[Mapping[str, TemperatureClass]] = None,
    strict: bool = True,
    property_model: str = "preset",
) -> EngineOutput:
    """Normalize raw field values and evaluate. See normalizer.normalize for arguments."""
    return evaluate(normalize(raw, classes=classes, strict=strict, property_model=property_model))
