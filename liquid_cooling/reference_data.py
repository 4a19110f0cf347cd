"""
Reference Data Module - Read-Only Lookup Tables

Static tables the calculator reads from but never modifies:
- Coolant property presets (~25°C engineering approximations)
- ASHRAE liquid-cooling W-classes (upper supply limit, 2°C lower limit)
- Redundancy options for distribution-unit (CDU) sizing
- Hardware presets: accelerator TDPs, rack archetypes, CDU models

String keys coming from forms or config files are resolved once, here,
into closed enums/records. The formula stages only ever see resolved values.

Author: HVAC Team
Date: 2025-11-24
"""

import logging
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional

from .errors import ConfigurationError

logger = logging.getLogger(__name__)

# Universal lower supply limit for every W-class (°C)
W_CLASS_LOWER_BOUND_C = 2.0


class CoolantKind(str, Enum):
    WATER = "water"
    EG30 = "eg30"
    PG30 = "pg30"


class WClass(str, Enum):
    W17 = "W17"
    W27 = "W27"
    W32 = "W32"
    W40 = "W40"
    W45 = "W45"
    WPLUS = "Wplus"


class Redundancy(str, Enum):
    N = "N"
    N_PLUS_1 = "N+1"


@dataclass(frozen=True)
class CoolantProperties:
    """
    Thermophysical properties of a coolant.

    Variables:
        name: Display name
        density: ρ (kg/m³)
        specific_heat: c_p (kJ/kg·K, numerically kW·s/kg·K)
        viscosity: μ, dynamic viscosity (Pa·s)
    """

    name: str
    density: float
    specific_heat: float
    viscosity: float


@dataclass(frozen=True)
class TemperatureClass:
    """Permissible supply range: [W_CLASS_LOWER_BOUND_C, upper_bound_c] in °C."""

    label: str
    upper_bound_c: float

    @property
    def lower_bound_c(self):
        return W_CLASS_LOWER_BOUND_C


@dataclass(frozen=True)
class Device:
    id: str
    name: str
    tdp_w: float
    note: str = ""


@dataclass(frozen=True)
class RackArchetype:
    id: str
    name: str
    rack_kw: float
    note: str = ""


@dataclass(frozen=True)
class CDUModel:
    id: str
    model: str
    type: str
    form: str
    capacity_kw: float
    target: str
    redundancy: str
    facility_water: bool


COOLANTS: Mapping[CoolantKind, CoolantProperties] = MappingProxyType({
    CoolantKind.WATER: CoolantProperties("Deionized Water", density=997.0, specific_heat=4.186, viscosity=0.00089),
    CoolantKind.EG30: CoolantProperties("Ethylene Glycol 30%", density=1045.0, specific_heat=3.80, viscosity=0.0020),
    CoolantKind.PG30: CoolantProperties("Propylene Glycol 30%", density=1038.0, specific_heat=3.70, viscosity=0.0030),
})

# Upper limit = class number; W+ is open-ended
W_CLASSES: Mapping[str, TemperatureClass] = MappingProxyType({
    WClass.W17.value: TemperatureClass("W17 (≤17°C)", 17.0),
    WClass.W27.value: TemperatureClass("W27 (≤27°C)", 27.0),
    WClass.W32.value: TemperatureClass("W32 (≤32°C)", 32.0),
    WClass.W40.value: TemperatureClass("W40 (≤40°C)", 40.0),
    WClass.W45.value: TemperatureClass("W45 (≤45°C)", 45.0),
    WClass.WPLUS.value: TemperatureClass("W+ (>45°C)", 999.0),
})

# Nominal TDPs; override with vendor BOMs
HW_DEVICES = (
    Device("nvidia_b200", "NVIDIA Blackwell B200 (SXM)", 1000.0, "Nominal TDP"),
    Device("nvidia_h200", "NVIDIA H200 (SXM)", 700.0, "Up to 700 W"),
    Device("nvidia_h100", "NVIDIA H100 (SXM5)", 700.0, "Up to 700 W"),
    Device("amd_mi300x", "AMD Instinct MI300X (OAM)", 750.0, "Nominal 750 W"),
    Device("intel_gaudi3", "Intel Gaudi 3 (OAM)", 900.0, "OAM air 900 W; liquid may be higher"),
)

RACK_ARCHETYPES = (
    RackArchetype("nvl72", "NVIDIA GB200 NVL72 rack", 132.0, "Reference rack power"),
    RackArchetype("dgx_h100", "NVIDIA DGX H100 rack", 60.0, "8x H100 compute servers"),
    RackArchetype("mi300x", "AMD MI300X rack", 60.0, "8x MI300X compute servers"),
    RackArchetype("gaudi3", "Intel Gaudi 3 rack", 55.0, "8x Gaudi 3 compute servers"),
    RackArchetype("std_30kw", "Generic 30 kW rack", 30.0, "Common enterprise density"),
    RackArchetype("high_100kw", "Generic 100 kW high-density rack", 100.0, "Ultra-high density reference"),
)

CDU_MODELS = (
    CDUModel("CHx2000", "CHx2000", "Liquid-to-Liquid", "Row-Based (Single Rack)", 2000.0,
             "Multi-Row (up to 74 racks)", "N+N Pumps", True),
    CDUModel("CHx1500", "CHx1500", "Liquid-to-Liquid", "Row-Based (Single Rack)", 1500.0,
             "Multi-Row (up to 63 racks)", "N+N Pumps", True),
    CDUModel("AHx240", "AHx240", "Liquid-to-Air", "Row-Based (Two Racks)", 240.0,
             "Multi-Rack (up to 4 NVL72)", "2N Pumps, N+1 Fans", False),
    CDUModel("CHx200", "CHx200", "Liquid-to-Liquid", "4U Rack-Mount", 200.0,
             "Single Rack (up to 200 servers)", "N+1 Pumps", True),
    CDUModel("AHx180", "AHx180", "Liquid-to-Air", "Row-Based (Slim Two Racks)", 180.0,
             "Multi-Rack (up to 2 NVL72)", "2N Pumps, N+1 Fans", False),
    CDUModel("CHx80", "CHx80", "Liquid-to-Liquid", "4U Rack-Mount", 80.0,
             "Single Rack (up to 100 servers)", "N+1 Pumps", True),
    CDUModel("AHx10", "AHx10", "Liquid-to-Air", "5U Rack-Mount", 10.0,
             "Single Rack / Lab", "N+1 Pumps", False),
    CDUModel("AHx2", "AHx2", "Liquid-to-Air", "Benchtop", 2.0,
             "Test / Validation (up to 4 servers)", "N/A", False),
)


def _key_text(key):
    if isinstance(key, Enum):
        return key.value
    return str(key).strip()


def resolve_coolant(key, strict=True):
    """
    Resolve a coolant identifier to a CoolantKind.

    Args:
        key: CoolantKind or identifier string ('water', 'eg30', 'pg30')
        strict: If False, unknown identifiers fall back to water

    Returns:
        CoolantKind

    Raises:
        ConfigurationError: If the identifier is unknown and strict is True
    """
    try:
        return CoolantKind(_key_text(key).lower())
    except ValueError:
        if strict:
            raise ConfigurationError("coolant", key, [k.value for k in CoolantKind]) from None
        logger.warning("Unknown coolant %r, falling back to water properties", key)
        return CoolantKind.WATER


def resolve_temperature_class(key, classes: Optional[Mapping[str, TemperatureClass]] = None):
    """
    Resolve a W-class identifier against a class table.

    There is no lenient mode: an unknown class would silently move the
    upper bound the advisory validates against.

    Raises:
        ConfigurationError: If the identifier is not in the table
    """
    table = W_CLASSES if classes is None else classes
    text = _key_text(key)
    if text in table:
        return table[text]
    raise ConfigurationError("temperature class", key, list(table))


def resolve_redundancy(key, strict=True):
    """Resolve 'N' / 'N+1'. Lenient mode treats anything unknown as N."""
    try:
        return Redundancy(_key_text(key).upper())
    except ValueError:
        if strict:
            raise ConfigurationError("redundancy mode", key, [r.value for r in Redundancy]) from None
        logger.warning("Unknown redundancy mode %r, using N", key)
        return Redundancy.N


def find_device(device_id):
    for device in HW_DEVICES:
        if device.id == device_id:
            return device
    raise ConfigurationError("device", device_id, [d.id for d in HW_DEVICES])


def find_rack_archetype(archetype_id):
    for archetype in RACK_ARCHETYPES:
        if archetype.id == archetype_id:
            return archetype
    raise ConfigurationError("rack archetype", archetype_id, [r.id for r in RACK_ARCHETYPES])
