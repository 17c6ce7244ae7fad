"""Weighted-sum blending of energy, performance and safety metrics."""
from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .controllers.brake import BrakeControl
from .controllers.steering import SteeringControl
from .controllers.throttle import ThrottleControl
from .policy import PolicyParameters

LOWER_BOUNDS = np.array([0.0, 0.5, 0.8])
UPPER_BOUNDS = np.array([100.0, 1.0, 1.0])
PERFORMANCE_PRIOR = 0.9
SAFETY_PRIOR = 1.0


@dataclass(frozen=True)
class Solution:
    energy_metric: float
    performance_metric: float
    safety_metric: float
    objective: float

    def as_array(self) -> np.ndarray:
        return np.array([self.energy_metric, self.performance_metric, self.safety_metric])


def _weights(params: PolicyParameters) -> np.ndarray:
    return np.array([params.weight_energy, params.weight_performance, params.weight_safety])


def objective(x: np.ndarray, params: PolicyParameters) -> float:
    """``w_e * energy + w_p / performance + w_s * safety``."""

    w = _weights(params)
    return float(w[0] * x[0] + w[1] * (1.0 / x[1]) + w[2] * x[2])


def initial_guess(
    steering: SteeringControl,
    throttle: ThrottleControl,
    brake: BrakeControl,
) -> np.ndarray:
    net_energy = steering.energy_consumption + throttle.energy_consumption - brake.energy_recovered
    return np.array([net_energy, PERFORMANCE_PRIOR, SAFETY_PRIOR])


def minimize_bounded(x0: np.ndarray, params: PolicyParameters) -> np.ndarray:
    """Exact minimiser of :func:`objective` over the box constraints.

    The objective is separable and monotone in each variable: the energy and
    safety terms are increasing for a positive weight and ``1/x`` is
    decreasing on the positive performance interval. Each coordinate therefore
    sits on a bound, except where its weight is zero and any feasible value is
    optimal; those keep the projected initial guess.
    """

    w = _weights(params)
    x = np.clip(np.asarray(x0, dtype=float), LOWER_BOUNDS, UPPER_BOUNDS)
    x[0] = LOWER_BOUNDS[0] if w[0] > 0.0 else x[0]
    x[1] = UPPER_BOUNDS[1] if w[1] > 0.0 else x[1]
    x[2] = LOWER_BOUNDS[2] if w[2] > 0.0 else x[2]
    return x


def combine(
    steering: SteeringControl,
    throttle: ThrottleControl,
    brake: BrakeControl,
    params: PolicyParameters,
) -> Solution:
    x = minimize_bounded(initial_guess(steering, throttle, brake), params)
    return Solution(
        energy_metric=float(x[0]),
        performance_metric=float(x[1]),
        safety_metric=float(x[2]),
        objective=objective(x, params),
    )


__all__ = [
    "LOWER_BOUNDS",
    "Solution",
    "UPPER_BOUNDS",
    "combine",
    "initial_guess",
    "minimize_bounded",
    "objective",
]
