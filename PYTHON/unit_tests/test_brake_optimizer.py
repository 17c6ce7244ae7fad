from __future__ import annotations

import pathlib
import sys

import pytest

PYTHON_ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(PYTHON_ROOT) not in sys.path:
    sys.path.insert(0, str(PYTHON_ROOT))

from drivebywire.controllers.brake import (  # noqa: E402
    max_regen_capacity,
    optimize_braking,
    regen_ratio,
)
from drivebywire.policy import PolicyParameters, resolve_parameters  # noqa: E402


@pytest.fixture
def params() -> PolicyParameters:
    return resolve_parameters("balanced")


def test_capacity_limited_split(params: PolicyParameters) -> None:
    control = optimize_braking(2.0, 60.0, 50.0, params)
    max_regen = 100.0 * 45.0 / 95.0
    assert control.regen_ratio == pytest.approx(max_regen / 200.0)
    assert control.regenerative_force == pytest.approx(max_regen)
    assert control.mechanical_force == pytest.approx(200.0 - max_regen)
    assert control.energy_recovered == pytest.approx(max_regen * 60.0 * 0.0001)


def test_regen_share_capped_at_seventy_percent(params: PolicyParameters) -> None:
    control = optimize_braking(0.5, 60.0, 10.0, params)
    assert control.regen_ratio == pytest.approx(0.7)
    assert control.regenerative_force == pytest.approx(35.0)
    assert control.mechanical_force == pytest.approx(15.0)


@pytest.mark.parametrize("soc", [95.0, 97.0, 100.0])
def test_full_battery_uses_fixed_regen_fraction(soc: float, params: PolicyParameters) -> None:
    control = optimize_braking(1.0, 30.0, soc, params)
    assert control.regen_ratio == 0.1
    assert control.regenerative_force == pytest.approx(10.0)
    assert control.mechanical_force == pytest.approx(90.0)
    assert control.energy_recovered == pytest.approx(0.03)


def test_zero_pressure_produces_zero_split(params: PolicyParameters) -> None:
    control = optimize_braking(0.0, 60.0, 80.0, params)
    assert control.regen_ratio == 0.0
    assert control.mechanical_force == 0.0
    assert control.regenerative_force == 0.0
    assert control.energy_recovered == 0.0


def test_standstill_brakes_mechanically(params: PolicyParameters) -> None:
    control = optimize_braking(3.0, 0.0, 50.0, params)
    assert control.regenerative_force == 0.0
    assert control.mechanical_force == pytest.approx(300.0)


def test_split_sums_to_requested_force(params: PolicyParameters) -> None:
    for pressure in (0.0, 0.01, 0.7, 3.0, 25.0, 120.0):
        for speed in (0.0, 12.0, 49.9, 50.0, 140.0):
            for soc in (0.0, 42.0, 94.9, 95.0, 100.0):
                control = optimize_braking(pressure, speed, soc, params)
                assert control.total_force == pytest.approx(pressure * 100.0, abs=1e-9)
                assert control.mechanical_force >= 0.0
                assert control.regenerative_force >= 0.0
                if soc < 95.0:
                    assert 0.0 <= control.regen_ratio <= 0.7
                else:
                    assert control.regen_ratio == 0.1


def test_capacity_grows_with_speed_and_shrinks_with_soc() -> None:
    assert max_regen_capacity(25.0, 0.0) == pytest.approx(50.0)
    assert max_regen_capacity(50.0, 0.0) == pytest.approx(100.0)
    assert max_regen_capacity(150.0, 0.0) == pytest.approx(100.0)
    assert max_regen_capacity(80.0, 47.5) == pytest.approx(50.0)
    assert max_regen_capacity(80.0, 99.0) == 0.0


def test_ratio_guard_for_zero_force() -> None:
    assert regen_ratio(0.0, 80.0, 20.0) == 0.0
    assert regen_ratio(0.0, 80.0, 96.0) == 0.1
