"""
Energy Module - Chiller Power, PUE and Air-Cooled Baseline

COP-based model, no refrigeration cycle:
    P_chiller = Q_captured / COP
    TR = Q_captured / 3.517
    PUE = (P_IT + P_chiller + P_pump) / P_IT

Baseline (air-cooled) facility for comparison:
    P_baseline = P_IT + P_IT / COP_air + P_fans

Ratios with a zero denominator are NaN, never 0. So is any result that
overflows or inherits NaN from the pump stage.

Author: HVAC Team
Date: 2025-11-24
"""

import logging
import math
from dataclasses import dataclass

from .normalizer import finite_or_nan

logger = logging.getLogger(__name__)

KW_PER_TON = 3.517  # kW per refrigeration ton


@dataclass(frozen=True)
class EnergyResult:
    chiller_kw: float
    cooling_tons: float
    pue: float
    baseline_chiller_kw: float
    baseline_total_kw: float
    liquid_total_kw: float
    savings_kw: float
    savings_pct: float


def solve_energy(it_load_kw, captured_heat_kw, pump_kw, chiller_cop, baseline_air_cop, baseline_fan_kw):
    """
    Facility power for the liquid loop and the air-cooled baseline.

    Args:
        it_load_kw: IT load (kW)
        captured_heat_kw: Heat carried by the liquid loop (kW)
        pump_kw: Loop pump electrical power (kW)
        chiller_cop: Liquid-loop chiller COP (floored to 0.1)
        baseline_air_cop: Air-cooled chiller COP (floored to 0.1)
        baseline_fan_kw: Air-cooled fan power (kW)

    Returns:
        EnergyResult
    """
    cop = max(0.1, chiller_cop)
    base_cop = max(0.1, baseline_air_cop)
    base_fan = max(0.0, baseline_fan_kw)

    p_chiller = captured_heat_kw / cop
    tons = captured_heat_kw / KW_PER_TON

    liquid_total = it_load_kw + p_chiller + pump_kw
    pue = liquid_total / it_load_kw if it_load_kw > 0 else math.nan

    baseline_chiller = it_load_kw / base_cop
    baseline_total = it_load_kw + baseline_chiller + base_fan
    savings = baseline_total - liquid_total
    savings_pct = savings / baseline_total * 100.0 if baseline_total > 0 else math.nan

    logger.debug("Energy: chiller=%.2f kW, PUE=%s, savings=%.2f kW", p_chiller, pue, savings)
    return EnergyResult(
        chiller_kw=finite_or_nan(p_chiller),
        cooling_tons=finite_or_nan(tons),
        pue=finite_or_nan(pue),
        baseline_chiller_kw=finite_or_nan(baseline_chiller),
        baseline_total_kw=finite_or_nan(baseline_total),
        liquid_total_kw=finite_or_nan(liquid_total),
        savings_kw=finite_or_nan(savings),
        savings_pct=finite_or_nan(savings_pct),
    )
