"""
Coolant Property Module - Temperature-Dependent Properties

The presets in reference_data are ~25°C approximations. This module
evaluates the same coolants at an actual loop temperature.

Based on:
- CoolProp for water (HEOS) and incompressible glycol mixtures
- Mean loop temperature T_mean = T_supply + ΔT/2

Author: HVAC Team
Date: 2025-11-24
"""

import logging

from .reference_data import CoolantKind, CoolantProperties, COOLANTS

logger = logging.getLogger(__name__)

try:
    from CoolProp.CoolProp import PropsSI

    COOLPROP_AVAILABLE = True
except ImportError:
    COOLPROP_AVAILABLE = False
    logger.warning("CoolProp not available. Install with: pip install CoolProp")

ATMOSPHERIC_PRESSURE_PA = 101325.0

# CoolProp fluid strings; glycols as 30% mass fraction incompressible mixtures
COOLPROP_FLUIDS = {
    CoolantKind.WATER: "Water",
    CoolantKind.EG30: "INCOMP::MEG[0.3]",
    CoolantKind.PG30: "INCOMP::MPG[0.3]",
}


def evaluate_coolant(kind, temperature_c, pressure_pa=ATMOSPHERIC_PRESSURE_PA):
    """
    Evaluate coolant properties at a given temperature.

    Args:
        kind: CoolantKind
        temperature_c: Fluid temperature (°C)
        pressure_pa: Absolute pressure (Pa)

    Returns:
        CoolantProperties with c_p converted from J/(kg·K) to kJ/(kg·K)

    Raises:
        ImportError: If CoolProp is not available
        ValueError: If CoolProp cannot evaluate the state
    """
    if not COOLPROP_AVAILABLE:
        raise ImportError(
            "CoolProp is required for temperature-dependent coolant properties. "
            "Install with: pip install CoolProp"
        )

    fluid = COOLPROP_FLUIDS[kind]
    T_K = temperature_c + 273.15
    try:
        rho = PropsSI("D", "T", T_K, "P", pressure_pa, fluid)
        cp = PropsSI("C", "T", T_K, "P", pressure_pa, fluid)
        mu = PropsSI("V", "T", T_K, "P", pressure_pa, fluid)
    except Exception as e:
        raise ValueError(f"CoolProp could not evaluate {fluid} at {temperature_c:.1f}°C: {e}") from e

    props = CoolantProperties(
        name=f"{COOLANTS[kind].name} @ {temperature_c:.1f}°C",
        density=rho,
        specific_heat=cp / 1000.0,
        viscosity=mu,
    )
    logger.debug("Evaluated %s: rho=%.2f cp=%.4f mu=%.3e", props.name, rho, cp / 1000.0, mu)
    return props
