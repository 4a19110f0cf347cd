"""
Components:
- normalize: Raw form values -> immutable EngineInput
- solve_thermal: Heat load -> coolant mass/volumetric flow
- PipeLoop: Darcy-Weisbach loop pressure drop and pump power
- solve_energy: Chiller power, PUE, air-cooled baseline savings
- advise: ASHRAE W-class supply temperature check
- plan_capacity: CDU count with optional N+1 redundancy
- evaluate: Complete evaluation chain

Usage:
    from liquid_cooling import evaluate_raw

    res = evaluate_raw({"it_load_kw": "1000", "delta_t_c": "10", "pipe_id_mm": "38"})
    print(res.mass_flow_kg_s, res.pue, res.advisory.message)

Author: HVAC Team
Date: 2025-11-24
Version: 1.0
"""

from .advisory import Advisory, Severity, advise
from .capacity import CapacityPlan, estimate_fleet_it_kw, estimate_rack_kw, plan_capacity, smallest_cdu_model
from .engine import EngineOutput, evaluate, evaluate_raw
from .energy import EnergyResult, solve_energy
from .errors import ConfigurationError
from .hydraulics import HydraulicResult, PipeLoop, friction_factor, solve_hydraulics
from .normalizer import EngineInput, normalize
from .reference_data import (
    COOLANTS,
    W_CLASSES,
    CoolantKind,
    CoolantProperties,
    Redundancy,
    TemperatureClass,
    WClass,
)
from .thermal import ThermalResult, solve_thermal

__all__ = [
    'Advisory',
    'CapacityPlan',
    'ConfigurationError',
    'COOLANTS',
    'CoolantKind',
    'CoolantProperties',
    'EnergyResult',
    'EngineInput',
    'EngineOutput',
    'HydraulicResult',
    'PipeLoop',
    'Redundancy',
    'Severity',
    'TemperatureClass',
    'ThermalResult',
    'W_CLASSES',
    'WClass',
    'advise',
    'estimate_fleet_it_kw',
    'estimate_rack_kw',
    'evaluate',
    'evaluate_raw',
    'friction_factor',
    'normalize',
    'plan_capacity',
    'smallest_cdu_model',
    'solve_energy',
    'solve_hydraulics',
    'solve_thermal',
]

__version__ = '1.0.0'
__author__ = 'HVAC Team'
