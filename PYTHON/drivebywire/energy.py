"""Baseline vs optimized energy accounting."""
from __future__ import annotations

from dataclasses import dataclass
import logging

from .controllers.brake import BrakeControl
from .controllers.steering import SteeringControl
from .controllers.throttle import ThrottleControl
from .errors import DegenerateBaseline
from .state import VehicleState

LOGGER = logging.getLogger(__name__)

# Baseline controller: fixed steering gain, throttle drawn 1:1, little regen.
BASELINE_STEERING_COEFF = 0.5
BASELINE_THROTTLE_COEFF = 2.0
BASELINE_BRAKE_COEFF = 0.05

DEGENERATE_BASELINE_TOL = 1e-9


@dataclass(frozen=True)
class EnergySavings:
    baseline: float
    optimized: float
    saved: float
    percentage: float
    degenerate_baseline: bool


def baseline_energy(state: VehicleState) -> float:
    """Energy a naive fixed-gain controller would draw for ``state``."""

    steering_energy = abs(state.steering_angle) * BASELINE_STEERING_COEFF
    throttle_energy = state.throttle_position * BASELINE_THROTTLE_COEFF
    brake_energy = -state.brake_pressure * state.speed * BASELINE_BRAKE_COEFF
    return max(0.0, steering_energy + throttle_energy + brake_energy)


def optimized_energy(
    steering: SteeringControl,
    throttle: ThrottleControl,
    brake: BrakeControl,
) -> float:
    energy = steering.energy_consumption + throttle.energy_consumption - brake.energy_recovered
    return max(0.0, energy)


def is_degenerate(baseline: float) -> bool:
    return abs(baseline) <= DEGENERATE_BASELINE_TOL


def percentage_saved(saved: float, baseline: float, *, strict: bool = False) -> float:
    """Savings as a percentage of ``baseline``.

    A zero or near-zero baseline yields 0.0, or raises
    :class:`DegenerateBaseline` when ``strict`` is set.
    """

    if is_degenerate(baseline):
        if strict:
            raise DegenerateBaseline(baseline)
        return 0.0
    return saved / baseline * 100.0


def account(
    state: VehicleState,
    steering: SteeringControl,
    throttle: ThrottleControl,
    brake: BrakeControl,
) -> EnergySavings:
    baseline = baseline_energy(state)
    optimized = optimized_energy(steering, throttle, brake)
    saved = baseline - optimized
    degenerate = is_degenerate(baseline)
    if degenerate:
        LOGGER.warning(
            "Degenerate baseline energy %.3g (v=%.2f throttle=%.2f brake=%.2f); reporting 0%% saved",
            baseline,
            state.speed,
            state.throttle_position,
            state.brake_pressure,
        )
    return EnergySavings(
        baseline=baseline,
        optimized=optimized,
        saved=saved,
        percentage=percentage_saved(saved, baseline),
        degenerate_baseline=degenerate,
    )


__all__ = [
    "DEGENERATE_BASELINE_TOL",
    "EnergySavings",
    "account",
    "baseline_energy",
    "is_degenerate",
    "optimized_energy",
    "percentage_saved",
]
