"""Speed-adaptive steering actuator optimization."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..policy import PolicyParameters

MAX_SPEED = 200.0  # km/h at which the gain reaches its floor
MIN_GAIN = 0.3
CURRENT_PER_DEGREE = 0.5
ENERGY_PER_AMP_SQUARED = 0.001


@dataclass(frozen=True)
class SteeringControl:
    motor_current: float
    control_gain: float
    energy_consumption: float


def steering_gain(speed: float) -> float:
    """Gain applied to the steering motor; 1.0 at standstill, 0.3 from 200 km/h."""

    return max(MIN_GAIN, min(1.0, 1.0 - speed / MAX_SPEED))


def optimize_steering(
    angle: float,
    speed: float,
    params: Optional[PolicyParameters] = None,
) -> SteeringControl:
    """Scale the steering motor current down as speed rises.

    High-speed corrections need less actuator authority, so the current is
    reduced with speed. The gain floor keeps a minimum responsiveness.
    ``params`` is accepted for interface symmetry; the law is mode independent.
    """

    gain = steering_gain(speed)
    base_current = abs(angle) * CURRENT_PER_DEGREE
    current = base_current * gain
    return SteeringControl(
        motor_current=current,
        control_gain=gain,
        energy_consumption=current ** 2 * ENERGY_PER_AMP_SQUARED,
    )


__all__ = ["SteeringControl", "optimize_steering", "steering_gain"]
