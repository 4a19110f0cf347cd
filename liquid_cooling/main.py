"""
Main Program - Liquid Cooling Calculator

Usage:
    python -m liquid_cooling
    python -m liquid_cooling --example
    python -m liquid_cooling --set it_load_kw=6000 --set redundancy=N+1 --json

Inputs:
    - Starting parameter set (defaults, or the worked example)
    - Any number of field=value overrides, as raw text

Outputs:
    - Sectioned text report, or JSON (undefined values as null)

Author: HVAC Team
Date: 2025-11-24
"""

import argparse
import json
import logging
import sys

from .engine import evaluate_raw
from .errors import ConfigurationError
from .report import print_results, to_jsonable

logger = logging.getLogger(__name__)


class DefaultParameters:
    """
    Initial calculator parameters.

    Reference case: 1 MW direct liquid cooled hall, 38 mm loop,
    water at 25°C supply, compared against an air-cooled facility.
    """

    # ===== Thermal =====
    IT_LOAD_KW = "1000"
    CAPTURE_FRACTION = "1.0"
    SUPPLY_TEMP_C = "25"
    DELTA_T_C = "10"
    COOLANT = "water"
    W_CLASS = "W32"
    COLD_PLATE_APPROACH_C = "5"
    CDU_APPROACH_C = "5"

    # ===== Hydraulics =====
    PIPE_ID_MM = "38"
    LOOP_LENGTH_M = "200"
    ROUGHNESS_MM = "0.0015"
    K_MINOR = "20"
    PUMP_EFFICIENCY = "0.7"

    # ===== Energy =====
    CHILLER_COP = "6.0"

    # ===== Sizing & baseline =====
    CDU_CAPACITY_KW = "1500"
    RACK_KW = "60"
    REDUNDANCY = "N"
    BASELINE_FAN_KW = "120"
    BASELINE_AIR_COP = "4.0"

    @classmethod
    def as_raw(cls):
        """Raw field dict as the form would submit it."""
        return {name.lower(): getattr(cls, name) for name in dir(cls) if name.isupper()}


class ExampleParameters(DefaultParameters):
    """Worked example: warm-water supply in a W40 facility."""

    SUPPLY_TEMP_C = "30"
    W_CLASS = "W40"


def parse_overrides(pairs):
    """Parse ['field=value', ...] into a dict; values stay raw text."""
    overrides = {}
    for pair in pairs or ():
        field, sep, value = pair.partition("=")
        if not sep or not field.strip():
            raise ValueError(f"Invalid override '{pair}', expected field=value")
        overrides[field.strip()] = value.strip()
    return overrides


def build_parser():
    parser = argparse.ArgumentParser(
        prog="liquid_cooling",
        description="Liquid cooling sizing: flow, pressure drop, pump/chiller power, PUE and CDU count.",
    )
    parser.add_argument("--example", action="store_true", help="start from the worked example")
    parser.add_argument("--set", dest="overrides", action="append", metavar="FIELD=VALUE",
                        help="override one input field (repeatable)")
    parser.add_argument("--lenient", action="store_true",
                        help="default unknown coolant/redundancy keys instead of failing")
    parser.add_argument("--coolprop", action="store_true",
                        help="evaluate coolant properties with CoolProp at the mean loop temperature")
    parser.add_argument("--json", action="store_true", help="print JSON instead of the text report")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    params = ExampleParameters if args.example else DefaultParameters
    raw = params.as_raw()
    try:
        raw.update(parse_overrides(args.overrides))
        res = evaluate_raw(
            raw,
            strict=not args.lenient,
            property_model="coolprop" if args.coolprop else "preset",
        )
    except (ConfigurationError, ValueError, ImportError) as e:
        logger.error("%s", e)
        return 2

    if args.json:
        print(json.dumps(to_jsonable(res), indent=2, ensure_ascii=False))
    else:
        print("=" * 80)
        print("LIQUID COOLING CALCULATOR")
        print("=" * 80)
        print_results(res)
    return 0


if __name__ == "__main__":
    sys.exit(main())
