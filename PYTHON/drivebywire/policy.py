"""Control-mode policy table."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

from .errors import InvalidPolicy

# Engineering limits shared by every mode.
MAX_STEERING_RATE = 180.0  # deg/s
MAX_THROTTLE_RATE = 100.0  # %/s
MAX_BRAKE_RATE = 50.0  # bar/s


@dataclass(frozen=True)
class PolicyParameters:
    """Weights and tuning constants resolved from a control mode."""

    mode: str
    weight_energy: float
    weight_performance: float
    weight_safety: float
    prediction_steps: int
    max_steering_rate: float = MAX_STEERING_RATE
    max_throttle_rate: float = MAX_THROTTLE_RATE
    max_brake_rate: float = MAX_BRAKE_RATE

    def __post_init__(self) -> None:  # type: ignore[override]
        if min(self.weight_energy, self.weight_performance, self.weight_safety) < 0.0:
            raise ValueError("policy weights must be non-negative")
        if self.prediction_steps <= 0:
            raise ValueError("prediction_steps must be positive")
        if min(self.max_steering_rate, self.max_throttle_rate, self.max_brake_rate) <= 0.0:
            raise ValueError("actuator rate limits must be positive")


# mode -> (energy, performance, safety, prediction steps)
_POLICY_TABLE: Dict[str, Tuple[float, float, float, int]] = {
    "economy": (0.7, 0.2, 0.1, 50),
    "performance": (0.2, 0.7, 0.1, 20),
    "balanced": (0.4, 0.4, 0.2, 30),
}

CONTROL_MODES: Tuple[str, ...] = tuple(_POLICY_TABLE)


def resolve_parameters(mode: str) -> PolicyParameters:
    """Look up the policy for ``mode``; unknown modes raise :class:`InvalidPolicy`."""

    if not isinstance(mode, str):
        raise InvalidPolicy(mode, CONTROL_MODES)
    key = mode.strip().lower()
    try:
        energy, performance, safety, steps = _POLICY_TABLE[key]
    except KeyError:
        raise InvalidPolicy(mode, CONTROL_MODES) from None
    return PolicyParameters(
        mode=key,
        weight_energy=energy,
        weight_performance=performance,
        weight_safety=safety,
        prediction_steps=steps,
    )


__all__ = [
    "CONTROL_MODES",
    "MAX_BRAKE_RATE",
    "MAX_STEERING_RATE",
    "MAX_THROTTLE_RATE",
    "PolicyParameters",
    "resolve_parameters",
]
