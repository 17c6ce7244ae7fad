"""Vehicle state snapshot consumed once per control tick."""
from __future__ import annotations

from dataclasses import dataclass
import math
import numbers

from .errors import InvalidInput


@dataclass(frozen=True)
class VehicleState:
    """Sensor snapshot for a single optimization call.

    Units follow the drive-by-wire bus: km/h, degrees, percent, bar and
    degrees Celsius.
    """

    speed: float
    steering_angle: float
    throttle_position: float
    brake_pressure: float
    battery_soc: float
    motor_temp: float

    def __post_init__(self) -> None:  # type: ignore[override]
        for name in (
            "speed",
            "steering_angle",
            "throttle_position",
            "brake_pressure",
            "battery_soc",
            "motor_temp",
        ):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, numbers.Real):
                raise InvalidInput(f"{name} must be a real number, got {value!r}")
            if not math.isfinite(value):
                raise InvalidInput(f"{name} must be finite")
            object.__setattr__(self, name, float(value))

        if self.speed < 0.0:
            raise InvalidInput("speed must be non-negative")
        if not 0.0 <= self.throttle_position <= 100.0:
            raise InvalidInput("throttle_position must be within [0, 100]")
        if self.brake_pressure < 0.0:
            raise InvalidInput("brake_pressure must be non-negative")
        if not 0.0 <= self.battery_soc <= 100.0:
            raise InvalidInput("battery_soc must be within [0, 100]")


def validate_horizon(horizon: object) -> int:
    """Return ``horizon`` as an int, rejecting non-positive or fractional values."""

    if isinstance(horizon, bool):
        raise InvalidInput("prediction horizon must be an integer")
    if isinstance(horizon, numbers.Real) and not isinstance(horizon, numbers.Integral):
        if not float(horizon).is_integer():
            raise InvalidInput(f"prediction horizon must be an integer, got {horizon!r}")
        horizon = int(horizon)
    if not isinstance(horizon, numbers.Integral):
        raise InvalidInput(f"prediction horizon must be an integer, got {horizon!r}")
    if horizon <= 0:
        raise InvalidInput("prediction horizon must be positive")
    return int(horizon)


__all__ = ["VehicleState", "validate_horizon"]
