"""Per-tick energy optimization pipeline."""
from __future__ import annotations

from dataclasses import dataclass
import logging
import time

from .combiner import Solution, combine
from .controllers.brake import BrakeControl, optimize_braking
from .controllers.steering import SteeringControl, optimize_steering
from .controllers.throttle import ThrottleControl, optimize_throttle
from .energy import account
from .policy import PolicyParameters, resolve_parameters
from .state import VehicleState, validate_horizon

LOGGER = logging.getLogger(__name__)

BASE_SCORE = 70.0
STEERING_BONUS = 10.0
PREDICTIVE_THROTTLE_BONUS = 10.0
REGEN_BONUS_PER_UNIT = 100.0


@dataclass(frozen=True)
class OptimizationMetrics:
    energy_saved: float
    energy_saved_percentage: float
    response_time: float
    efficiency_score: float
    baseline_energy: float
    optimized_energy: float
    degenerate_baseline: bool = False


@dataclass(frozen=True)
class OptimizationResult:
    steering: SteeringControl
    throttle: ThrottleControl
    brake: BrakeControl
    solution: Solution
    metrics: OptimizationMetrics
    params: PolicyParameters
    prediction_horizon: int


def efficiency_score(steering: SteeringControl, brake: BrakeControl) -> float:
    """Overall 0-100 score: base credit plus steering and regeneration bonuses."""

    score = (
        BASE_SCORE
        + (1.0 - steering.control_gain) * STEERING_BONUS
        + PREDICTIVE_THROTTLE_BONUS
        + brake.energy_recovered * REGEN_BONUS_PER_UNIT
    )
    return min(100.0, max(0.0, score))


def optimize(state: VehicleState, prediction_horizon: int, mode: str) -> OptimizationResult:
    """Compute actuator commands and energy metrics for one control tick.

    Raises :class:`~drivebywire.errors.InvalidPolicy` for an unknown ``mode``
    and :class:`~drivebywire.errors.InvalidInput` for a non-positive horizon.
    """

    start = time.perf_counter()

    horizon = validate_horizon(prediction_horizon)
    params = resolve_parameters(mode)

    steering = optimize_steering(state.steering_angle, state.speed, params)
    throttle = optimize_throttle(state.throttle_position, state.speed, horizon, params)
    brake = optimize_braking(state.brake_pressure, state.speed, state.battery_soc, params)

    energy = account(state, steering, throttle, brake)
    solution = combine(steering, throttle, brake, params)
    score = efficiency_score(steering, brake)

    response_time = (time.perf_counter() - start) * 1000.0

    LOGGER.debug(
        "EnergyOpt | mode=%s v=%.2f soc=%.1f steer_i=%.2fA throttle=%.2f%% regen=%.1f mech=%.1f "
        "-> saved=%.4f (%.1f%%) score=%.1f t=%.3fms",
        params.mode,
        state.speed,
        state.battery_soc,
        steering.motor_current,
        throttle.position,
        brake.regenerative_force,
        brake.mechanical_force,
        energy.saved,
        energy.percentage,
        score,
        response_time,
    )

    return OptimizationResult(
        steering=steering,
        throttle=throttle,
        brake=brake,
        solution=solution,
        metrics=OptimizationMetrics(
            energy_saved=energy.saved,
            energy_saved_percentage=energy.percentage,
            response_time=response_time,
            efficiency_score=score,
            baseline_energy=energy.baseline,
            optimized_energy=energy.optimized,
            degenerate_baseline=energy.degenerate_baseline,
        ),
        params=params,
        prediction_horizon=horizon,
    )


__all__ = ["OptimizationMetrics", "OptimizationResult", "efficiency_score", "optimize"]
