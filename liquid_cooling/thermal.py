"""
Thermal-Flow Module - Heat Load to Coolant Flow

Energy Balance:
    Q_captured = Q_IT × capture_fraction
    ṁ = Q_captured / (c_p × ΔT)
    V̇ = ṁ / ρ

c_p in kJ/(kg·K) is numerically kW·s/(kg·K), so kW / (kJ/kg·K × K) = kg/s.

Author: HVAC Team
Date: 2025-11-24
"""

import logging
from dataclasses import dataclass

from .normalizer import finite_or_nan

logger = logging.getLogger(__name__)

M3_S_TO_L_MIN = 60000.0
M3_S_TO_GPM = 15850.323
MIN_DELTA_T_C = 0.001


@dataclass(frozen=True)
class ThermalResult:
    captured_heat_kw: float
    delta_t_c: float
    return_temp_c: float
    mass_flow_kg_s: float
    vol_flow_m3_s: float
    vol_flow_l_min: float
    vol_flow_gpm: float


def solve_thermal(it_load_kw, capture_fraction, coolant, delta_t_c, supply_temp_c=0.0):
    """
    Size the coolant flow that carries the captured heat at the target ΔT.

    Args:
        it_load_kw: IT heat load (kW)
        capture_fraction: Fraction of IT heat absorbed by the liquid loop (0-1)
        coolant: CoolantProperties
        delta_t_c: Temperature rise across the loop (°C), floored to 0.001
        supply_temp_c: Supply temperature (°C), used for the return temperature

    Returns:
        ThermalResult
    """
    dT = max(MIN_DELTA_T_C, delta_t_c)
    q_captured = it_load_kw * capture_fraction

    m_dot = q_captured / (coolant.specific_heat * dT)  # kg/s
    Q = m_dot / coolant.density  # m³/s

    logger.debug("Thermal: Q=%.2f kW, m_dot=%.4f kg/s, V=%.6f m3/s", q_captured, m_dot, Q)
    return ThermalResult(
        captured_heat_kw=q_captured,
        delta_t_c=dT,
        return_temp_c=supply_temp_c + dT,
        mass_flow_kg_s=finite_or_nan(m_dot),
        vol_flow_m3_s=finite_or_nan(Q),
        vol_flow_l_min=finite_or_nan(Q * M3_S_TO_L_MIN),
        vol_flow_gpm=finite_or_nan(Q * M3_S_TO_GPM),
    )
