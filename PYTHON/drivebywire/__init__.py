"""Energy-optimizing control core for a drive-by-wire electric vehicle."""

from .combiner import Solution, combine
from .controllers import (
    BrakeControl,
    SteeringControl,
    ThrottleControl,
    optimize_braking,
    optimize_steering,
    optimize_throttle,
)
from .efficiency import EfficiencyMap, efficiency_map, motor_efficiency
from .energy import EnergySavings, baseline_energy, optimized_energy, percentage_saved
from .errors import DegenerateBaseline, InvalidInput, InvalidPolicy, OptimizationError
from .optimizer import OptimizationMetrics, OptimizationResult, efficiency_score, optimize
from .policy import CONTROL_MODES, PolicyParameters, resolve_parameters
from .state import VehicleState

__all__ = [
    "BrakeControl",
    "CONTROL_MODES",
    "DegenerateBaseline",
    "EfficiencyMap",
    "EnergySavings",
    "InvalidInput",
    "InvalidPolicy",
    "OptimizationError",
    "OptimizationMetrics",
    "OptimizationResult",
    "PolicyParameters",
    "Solution",
    "SteeringControl",
    "ThrottleControl",
    "VehicleState",
    "baseline_energy",
    "combine",
    "efficiency_map",
    "efficiency_score",
    "motor_efficiency",
    "optimize",
    "optimize_braking",
    "optimize_steering",
    "optimize_throttle",
    "optimized_energy",
    "percentage_saved",
    "resolve_parameters",
]
