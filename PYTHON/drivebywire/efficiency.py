"""Fixed motor efficiency surface."""
from __future__ import annotations

from dataclasses import dataclass
import math

import numpy as np

PEAK_EFFICIENCY = 0.95
MIN_EFFICIENCY = 0.6
PEAK_SPEED = 70.0  # km/h
PEAK_THROTTLE = 50.0  # %
_SPREAD = 2.0


def motor_efficiency(speed: float, throttle: float) -> float:
    """Efficiency of the traction motor at (speed km/h, throttle %).

    A bivariate Gaussian centred on 70 km/h / 50 % in normalised units,
    clamped to [0.6, 0.95]. Evaluated in closed form.
    """

    speed_norm = speed / 100.0
    throttle_norm = throttle / 100.0
    distance = (speed_norm - PEAK_SPEED / 100.0) ** 2 + (throttle_norm - PEAK_THROTTLE / 100.0) ** 2
    efficiency = PEAK_EFFICIENCY * math.exp(-distance * _SPREAD)
    return max(MIN_EFFICIENCY, min(PEAK_EFFICIENCY, efficiency))


@dataclass(frozen=True)
class EfficiencyMap:
    """Tabulated efficiency surface, rows indexed by speed and columns by throttle."""

    speeds: np.ndarray
    throttles: np.ndarray
    efficiency: np.ndarray

    def __post_init__(self) -> None:  # type: ignore[override]
        if self.efficiency.shape != (self.speeds.size, self.throttles.size):
            raise ValueError("efficiency table shape must be (len(speeds), len(throttles))")

    def peak(self) -> tuple[float, float, float]:
        """Return the (speed, throttle, efficiency) grid point with the highest efficiency."""

        row, col = np.unravel_index(int(np.argmax(self.efficiency)), self.efficiency.shape)
        return float(self.speeds[row]), float(self.throttles[col]), float(self.efficiency[row, col])


def efficiency_map(
    speed_step: float = 10.0,
    throttle_step: float = 10.0,
    max_speed: float = 200.0,
    max_throttle: float = 100.0,
) -> EfficiencyMap:
    """Sample :func:`motor_efficiency` on a regular grid for reporting."""

    if speed_step <= 0.0 or throttle_step <= 0.0:
        raise ValueError("grid steps must be positive")
    speeds = np.arange(0.0, max_speed + 0.5 * speed_step, speed_step)
    throttles = np.arange(0.0, max_throttle + 0.5 * throttle_step, throttle_step)

    speed_grid, throttle_grid = np.meshgrid(speeds / 100.0, throttles / 100.0, indexing="ij")
    distance = (speed_grid - PEAK_SPEED / 100.0) ** 2 + (throttle_grid - PEAK_THROTTLE / 100.0) ** 2
    table = np.clip(PEAK_EFFICIENCY * np.exp(-distance * _SPREAD), MIN_EFFICIENCY, PEAK_EFFICIENCY)
    return EfficiencyMap(speeds=speeds, throttles=throttles, efficiency=table)


__all__ = [
    "EfficiencyMap",
    "MIN_EFFICIENCY",
    "PEAK_EFFICIENCY",
    "PEAK_SPEED",
    "PEAK_THROTTLE",
    "efficiency_map",
    "motor_efficiency",
]
