"""Blending of mechanical and regenerative braking."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..policy import PolicyParameters

FULL_REGEN_SPEED = 50.0  # km/h
SOC_REGEN_CUTOFF = 95.0  # %
MAX_REGEN_POWER = 100.0  # kW
MAX_REGEN_RATIO = 0.7
FULL_BATTERY_REGEN_RATIO = 0.1
FORCE_PER_BAR = 100.0
RECOVERY_COEFFICIENT = 0.0001


@dataclass(frozen=True)
class BrakeControl:
    mechanical_force: float
    regenerative_force: float
    energy_recovered: float
    regen_ratio: float

    @property
    def total_force(self) -> float:
        return self.mechanical_force + self.regenerative_force


def max_regen_capacity(speed: float, soc: float) -> float:
    """Regenerative capacity bound; grows with speed up to 50 km/h, shrinks as the battery fills."""

    speed_factor = min(1.0, speed / FULL_REGEN_SPEED)
    soc_factor = max(0.0, (SOC_REGEN_CUTOFF - soc) / SOC_REGEN_CUTOFF)
    return MAX_REGEN_POWER * speed_factor * soc_factor


def regen_ratio(total_force: float, speed: float, soc: float) -> float:
    if soc >= SOC_REGEN_CUTOFF:
        return FULL_BATTERY_REGEN_RATIO
    if total_force <= 0.0:
        return 0.0
    # Capacity can only be negative for negative speed; never return a negative share.
    return max(0.0, min(MAX_REGEN_RATIO, max_regen_capacity(speed, soc) / total_force))


def optimize_braking(
    pressure: float,
    speed: float,
    soc: float,
    params: Optional[PolicyParameters] = None,
) -> BrakeControl:
    """Split the requested brake force between friction and regeneration."""

    total_force = pressure * FORCE_PER_BAR
    ratio = regen_ratio(total_force, speed, soc)
    regenerative = total_force * ratio
    mechanical = total_force * (1.0 - ratio)
    return BrakeControl(
        mechanical_force=mechanical,
        regenerative_force=regenerative,
        energy_recovered=regenerative * speed * RECOVERY_COEFFICIENT,
        regen_ratio=ratio,
    )


__all__ = ["BrakeControl", "max_regen_capacity", "optimize_braking", "regen_ratio"]
