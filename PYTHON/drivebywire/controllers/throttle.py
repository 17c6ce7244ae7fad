"""Receding-horizon throttle optimization."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..efficiency import motor_efficiency
from ..policy import PolicyParameters
from ..state import validate_horizon

PREDICTION_DT = 0.1
MAX_SPEED = 200.0
EFFICIENCY_THRESHOLD = 0.85
THROTTLE_REDUCTION = 0.95
ENERGY_PER_THROTTLE_SQUARED = 0.02


@dataclass(frozen=True)
class ThrottleControl:
    position: float
    predicted_profile: Tuple[float, ...]
    predicted_speeds: Tuple[float, ...]
    energy_consumption: float

    @property
    def horizon(self) -> int:
        return len(self.predicted_profile)


def _clamp_throttle(value: float) -> float:
    return max(0.0, min(100.0, value))


def predict_speed_profile(speed: float, throttle: float, horizon: int) -> List[float]:
    """Forecast ``horizon`` speeds under constant throttle at a 0.1 s step."""

    horizon = validate_horizon(horizon)
    acceleration = (throttle / 100.0) * 5.0 - 0.5
    speeds: List[float] = []
    current = speed
    for _ in range(horizon):
        current = current + acceleration * PREDICTION_DT
        current = max(0.0, min(MAX_SPEED, current))
        speeds.append(current)
    return speeds


def throttle_energy(profile: Tuple[float, ...]) -> float:
    """Energy estimate for a throttle trajectory: mean squared position times 0.02."""

    if not profile:
        return 0.0
    return sum(value * value for value in profile) / len(profile) * ENERGY_PER_THROTTLE_SQUARED


def optimize_throttle(
    throttle: float,
    speed: float,
    horizon: int,
    params: Optional[PolicyParameters] = None,
) -> ThrottleControl:
    """Hold throttle where the motor is efficient over the prediction horizon.

    Each forecast step is evaluated at the predicted speed and the current
    throttle. Steps that fall below the efficiency threshold get a 5 %
    throttle reduction. The first step becomes the command for this tick.
    """

    horizon = validate_horizon(horizon)
    throttle = _clamp_throttle(throttle)
    speeds = predict_speed_profile(speed, throttle, horizon)

    profile: List[float] = []
    for predicted_speed in speeds:
        if motor_efficiency(predicted_speed, throttle) < EFFICIENCY_THRESHOLD:
            profile.append(_clamp_throttle(throttle * THROTTLE_REDUCTION))
        else:
            profile.append(throttle)

    trajectory = tuple(profile)
    return ThrottleControl(
        position=trajectory[0],
        predicted_profile=trajectory,
        predicted_speeds=tuple(speeds),
        energy_consumption=throttle_energy(trajectory),
    )


__all__ = ["ThrottleControl", "optimize_throttle", "predict_speed_profile", "throttle_energy"]
