"""
Hydraulics Module - Loop Pressure Drop and Pump Power

Darcy-Weisbach pressure drop over one equivalent loop length plus
lumped minor losses, and the pump electrical power to overcome it.

Key Features:
- Flow regime branch: laminar f = 64/Re, turbulent Swamee-Jain
- Minor losses as a sum of K coefficients on the dynamic pressure
- Head and pump power from ΔP and volumetric flow

Author: HVAC Team
Date: 2025-11-24
"""

import logging
import math
from dataclasses import dataclass

from .normalizer import finite_or_nan

logger = logging.getLogger(__name__)

G = 9.80665  # m/s²
RE_LAMINAR_LIMIT = 2300.0
MIN_DIAMETER_M = 1e-4


def friction_factor(Re, roughness_m, diameter_m):
    """
    Darcy friction factor.

    Laminar (Re < 2300): f = 64 / max(1, Re)
    Turbulent: Swamee-Jain, f = 0.25 / [log10(ε/(3.7D) + 5.74/Re^0.9)]²

    The two branches do not meet at Re = 2300; no blending is applied.
    Where the Swamee-Jain log term is not negative (ε/D beyond any real
    pipe, or an unbounded Re in a smooth pipe) f is undefined and NaN is
    returned.

    Args:
        Re: Reynolds number (-)
        roughness_m: Absolute roughness ε (m)
        diameter_m: Internal diameter D (m)

    Returns:
        f: Darcy friction factor (-), or NaN
    """
    if Re < RE_LAMINAR_LIMIT:
        return 64.0 / max(1.0, Re)
    term = roughness_m / (3.7 * diameter_m) + 5.74 / Re**0.9
    if not term > 0:
        return math.nan
    log_term = math.log10(term)
    if log_term >= 0:
        return math.nan
    return 0.25 / (log_term * log_term)


def flow_regime(Re):
    if math.isnan(Re):
        return "undefined"
    return "laminar" if Re < RE_LAMINAR_LIMIT else "turbulent"


@dataclass(frozen=True)
class HydraulicResult:
    area_m2: float
    velocity_m_s: float
    reynolds: float
    flow_regime: str
    friction_factor: float
    dynamic_pressure_pa: float
    pressure_drop_pa: float
    pressure_drop_kpa: float
    head_m: float
    pump_kw: float


class PipeLoop:
    """
    Single equivalent pipe loop.

    Pressure Balance:
        ΔP = (f × L/D + ΣK) × ½ρv²
        H = ΔP / (ρ × g)
        P_pump = ΔP × Q / η

    Variables:
        D: Internal diameter (m)
        L: Equivalent loop length (m)
        ε: Absolute roughness (m)
        ΣK: Sum of minor loss coefficients (-)
    """

    def __init__(self, pipe_id_mm, loop_length_m, roughness_mm, k_minor):
        """
        Initialize pipe loop.

        Args:
            pipe_id_mm: Internal diameter (mm), floored to 0.1 mm
            loop_length_m: Equivalent length (m)
            roughness_mm: Absolute roughness (mm)
            k_minor: Sum of minor loss coefficients (-)
        """
        self.diameter_m = max(MIN_DIAMETER_M, pipe_id_mm / 1000.0)
        self.length_m = max(0.0, loop_length_m)
        self.roughness_m = max(0.0, roughness_mm / 1000.0)
        self.k_minor = max(0.0, k_minor)

    @property
    def area_m2(self):
        return math.pi * self.diameter_m * self.diameter_m / 4.0

    def calculate_velocity(self, Q):
        """Mean velocity (m/s) for volumetric flow Q (m³/s)."""
        return Q / self.area_m2

    def calculate_reynolds(self, velocity, coolant):
        return coolant.density * velocity * self.diameter_m / coolant.viscosity

    def calculate_pressure_drop(self, velocity, coolant):
        """
        Total loop pressure drop.

        Returns:
            (ΔP in Pa, friction factor, Reynolds number, dynamic pressure in Pa)
        """
        Re = self.calculate_reynolds(velocity, coolant)
        f = friction_factor(Re, self.roughness_m, self.diameter_m)
        q_dyn = 0.5 * coolant.density * velocity * velocity
        dP = (f * (self.length_m / self.diameter_m) + self.k_minor) * q_dyn
        return dP, f, Re, q_dyn

    def solve(self, Q, coolant, pump_efficiency):
        """
        Solve loop hydraulics for given flow.

        Args:
            Q: Volumetric flow (m³/s)
            coolant: CoolantProperties
            pump_efficiency: Pump efficiency (0.05-0.95, clamped)

        Returns:
            HydraulicResult
        """
        eta = min(0.95, max(0.05, pump_efficiency))
        v = self.calculate_velocity(Q)
        dP, f, Re, q_dyn = self.calculate_pressure_drop(v, coolant)
        H = dP / (coolant.density * G)
        P_pump_kW = dP * Q / eta / 1000.0

        logger.debug("Hydraulics: v=%.3f m/s, Re=%.0f (%s), f=%.4f, dP=%.1f Pa, pump=%.3f kW",
                     v, Re, flow_regime(Re), f, dP, P_pump_kW)
        return HydraulicResult(
            area_m2=finite_or_nan(self.area_m2),
            velocity_m_s=finite_or_nan(v),
            reynolds=finite_or_nan(Re),
            flow_regime=flow_regime(finite_or_nan(Re)),
            friction_factor=finite_or_nan(f),
            dynamic_pressure_pa=finite_or_nan(q_dyn),
            pressure_drop_pa=finite_or_nan(dP),
            pressure_drop_kpa=finite_or_nan(dP / 1000.0),
            head_m=finite_or_nan(H),
            pump_kw=finite_or_nan(P_pump_kW),
        )


def solve_hydraulics(vol_flow_m3_s, coolant, pipe_id_mm, loop_length_m, roughness_mm, k_minor,
                     pump_efficiency):
    loop = PipeLoop(pipe_id_mm, loop_length_m, roughness_mm, k_minor)
    return loop.solve(vol_flow_m3_s, coolant, pump_efficiency)
