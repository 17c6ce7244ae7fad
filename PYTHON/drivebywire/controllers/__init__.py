from .brake import BrakeControl, max_regen_capacity, optimize_braking, regen_ratio  # noqa: F401
from .steering import SteeringControl, optimize_steering, steering_gain  # noqa: F401
from .throttle import (  # noqa: F401
    ThrottleControl,
    optimize_throttle,
    predict_speed_profile,
    throttle_energy,
)

__all__ = [
    "BrakeControl",
    "max_regen_capacity",
    "optimize_braking",
    "regen_ratio",
    "SteeringControl",
    "optimize_steering",
    "steering_gain",
    "ThrottleControl",
    "optimize_throttle",
    "predict_speed_profile",
    "throttle_energy",
]
