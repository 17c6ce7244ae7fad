from __future__ import annotations

import pathlib
import sys

import pytest

PYTHON_ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(PYTHON_ROOT) not in sys.path:
    sys.path.insert(0, str(PYTHON_ROOT))

import numpy as np  # noqa: E402

from drivebywire.combiner import (  # noqa: E402
    LOWER_BOUNDS,
    UPPER_BOUNDS,
    combine,
    initial_guess,
    minimize_bounded,
    objective,
)
from drivebywire.controllers import optimize_braking, optimize_steering, optimize_throttle  # noqa: E402
from drivebywire.policy import PolicyParameters, resolve_parameters  # noqa: E402


def _controls():
    params = resolve_parameters("balanced")
    return (
        optimize_steering(10.0, 60.0, params),
        optimize_throttle(50.0, 60.0, 30, params),
        optimize_braking(0.0, 60.0, 80.0, params),
    )


def test_initial_guess_uses_net_energy_and_priors() -> None:
    x0 = initial_guess(*_controls())
    assert x0.tolist() == pytest.approx([50.01225, 0.9, 1.0])


@pytest.mark.parametrize(
    "mode, expected_objective",
    [("economy", 0.28), ("performance", 0.78), ("balanced", 0.56)],
)
def test_solution_sits_on_optimal_bounds(mode: str, expected_objective: float) -> None:
    solution = combine(*_controls(), resolve_parameters(mode))
    assert solution.energy_metric == 0.0
    assert solution.performance_metric == 1.0
    assert solution.safety_metric == pytest.approx(0.8)
    assert solution.objective == pytest.approx(expected_objective)


def test_economy_objective_below_performance() -> None:
    controls = _controls()
    economy = combine(*controls, resolve_parameters("economy"))
    performance = combine(*controls, resolve_parameters("performance"))
    assert economy.objective < performance.objective


def test_solution_respects_box_constraints() -> None:
    params = resolve_parameters("balanced")
    for x0 in ([-5.0, 0.1, 2.0], [500.0, 3.0, 0.0], [42.0, 0.75, 0.9]):
        x = minimize_bounded(np.array(x0), params)
        assert np.all(x >= LOWER_BOUNDS)
        assert np.all(x <= UPPER_BOUNDS)


def test_minimum_is_not_beaten_by_feasible_samples() -> None:
    params = resolve_parameters("performance")
    best = objective(minimize_bounded(np.array([30.0, 0.9, 1.0]), params), params)
    rng = np.random.default_rng(7)
    samples = rng.uniform(LOWER_BOUNDS, UPPER_BOUNDS, size=(500, 3))
    assert all(objective(x, params) >= best - 1e-12 for x in samples)


def test_zero_weight_keeps_projected_initial_guess() -> None:
    params = PolicyParameters(
        mode="custom",
        weight_energy=0.0,
        weight_performance=0.0,
        weight_safety=0.0,
        prediction_steps=10,
    )
    x = minimize_bounded(np.array([150.0, 0.9, 1.0]), params)
    assert x.tolist() == pytest.approx([100.0, 0.9, 1.0])


def test_minimizer_does_not_mutate_input() -> None:
    x0 = np.array([20.0, 0.9, 1.0])
    minimize_bounded(x0, resolve_parameters("economy"))
    assert x0.tolist() == pytest.approx([20.0, 0.9, 1.0])


def test_solution_as_array_round_trips_metrics() -> None:
    solution = combine(*_controls(), resolve_parameters("balanced"))
    assert solution.as_array().tolist() == pytest.approx([0.0, 1.0, 0.8])
