from __future__ import annotations

import math

import pytest

from liquid_cooling.energy import KW_PER_TON, solve_energy


def test_chiller_and_tons():
    res = solve_energy(1000.0, 1000.0, 10.0, 6.0, 4.0, 120.0)
    assert res.chiller_kw == pytest.approx(1000.0 / 6.0)
    assert res.cooling_tons == pytest.approx(1000.0 / KW_PER_TON)


def test_pue_and_comparison():
    res = solve_energy(1000.0, 1000.0, 10.0, 6.0, 4.0, 120.0)
    liquid = 1000.0 + 1000.0 / 6.0 + 10.0
    baseline = 1000.0 + 250.0 + 120.0
    assert res.pue == pytest.approx(liquid / 1000.0)
    assert res.baseline_chiller_kw == pytest.approx(250.0)
    assert res.baseline_total_kw == pytest.approx(baseline)
    assert res.liquid_total_kw == pytest.approx(liquid)
    assert res.savings_kw == pytest.approx(baseline - liquid)
    assert res.savings_pct == pytest.approx((baseline - liquid) / baseline * 100.0)


def test_zero_it_load_pue_undefined():
    res = solve_energy(0.0, 0.0, 0.0, 6.0, 4.0, 0.0)
    assert math.isnan(res.pue)
    assert math.isnan(res.savings_pct)


def test_zero_it_with_fans_has_defined_savings_pct():
    res = solve_energy(0.0, 0.0, 0.0, 6.0, 4.0, 50.0)
    assert math.isnan(res.pue)
    assert res.savings_pct == pytest.approx(100.0)


@pytest.mark.parametrize("it,captured,pump,cop", [
    (1.0, 0.0, 0.0, 6.0),
    (500.0, 250.0, 3.0, 0.1),
    (10000.0, 10000.0, 400.0, 20.0),
])
def test_pue_at_least_one(it, captured, pump, cop):
    assert solve_energy(it, captured, pump, cop, 4.0, 0.0).pue >= 1.0


def test_cop_floor():
    assert solve_energy(100.0, 100.0, 0.0, 0.0, 0.0, 0.0).chiller_kw == pytest.approx(1000.0)
