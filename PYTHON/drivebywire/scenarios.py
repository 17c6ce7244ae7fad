"""Deterministic driving profiles used to exercise the optimizer."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Tuple

import numpy as np


@dataclass(frozen=True)
class DriveProfile:
    """Sampled driver and vehicle signals for one scenario."""

    name: str
    time: np.ndarray
    speed: np.ndarray
    throttle: np.ndarray
    brake: np.ndarray
    steering: np.ndarray

    def __post_init__(self) -> None:  # type: ignore[override]
        n = self.time.size
        for label in ("speed", "throttle", "brake", "steering"):
            if getattr(self, label).shape != (n,):
                raise ValueError(f"{label} must have the same length as time")

    def __len__(self) -> int:
        return int(self.time.size)

    @property
    def sample_time(self) -> float:
        if self.time.size < 2:
            return 0.0
        return float(self.time[1] - self.time[0])


Signals = Tuple[np.ndarray, np.ndarray, np.ndarray]


def _city(t: np.ndarray) -> Signals:
    # Stop-and-go: oscillating speed, busy throttle, frequent braking.
    speed = 30.0 + 20.0 * np.sin(0.5 * t) * (1.0 + 0.3 * np.cos(0.2 * t))
    throttle = 40.0 + 25.0 * np.sin(0.3 * t)
    brake = 5.0 + 10.0 * (np.sin(0.4 * t) > 0.5)
    return speed, throttle, brake


def _highway(t: np.ndarray) -> Signals:
    speed = 100.0 + 10.0 * np.sin(0.05 * t)
    throttle = 65.0 + 5.0 * np.sin(0.1 * t)
    brake = np.zeros_like(t)
    brake[999:1050] = 10.0
    return speed, throttle, brake


def _mixed(t: np.ndarray) -> Signals:
    city = t < 10.0
    highway = (t >= 10.0) & (t < 20.0)
    city_again = t >= 20.0

    speed = np.zeros_like(t)
    speed[city] = 35.0 + 15.0 * np.sin(0.4 * t[city])
    speed[highway] = 90.0 + 8.0 * np.sin(0.08 * t[highway])
    speed[city_again] = 40.0 + 12.0 * np.sin(0.3 * t[city_again])

    throttle = np.zeros_like(t)
    throttle[city] = 45.0 + 20.0 * np.sin(0.3 * t[city])
    throttle[highway] = 60.0 + 5.0 * np.sin(0.1 * t[highway])
    throttle[city_again] = 40.0 + 15.0 * np.sin(0.35 * t[city_again])

    brake = np.zeros_like(t)
    brake[np.diff(speed, prepend=0.0) < -0.5] = 15.0
    return speed, throttle, brake


PROFILES: Dict[str, Callable[[np.ndarray], Signals]] = {
    "city": _city,
    "highway": _highway,
    "mixed": _mixed,
}


def generate_profile(name: str, duration: float, sample_time: float) -> DriveProfile:
    """Sample scenario ``name`` from 0 to ``duration`` seconds inclusive."""

    try:
        builder = PROFILES[name]
    except KeyError:
        raise ValueError(f"unknown scenario {name!r} (expected one of: {', '.join(PROFILES)})") from None
    if duration <= 0.0:
        raise ValueError("duration must be positive")
    if sample_time <= 0.0:
        raise ValueError("sample_time must be positive")

    t = np.arange(0.0, duration + 0.5 * sample_time, sample_time)
    speed, throttle, brake = builder(t)
    steering = 10.0 * np.sin(0.3 * t)
    return DriveProfile(
        name=name,
        time=t,
        speed=np.maximum(speed, 0.0),
        throttle=np.clip(throttle, 0.0, 100.0),
        brake=np.maximum(brake, 0.0),
        steering=steering,
    )


__all__ = ["DriveProfile", "PROFILES", "generate_profile"]
