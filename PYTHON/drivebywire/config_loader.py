"""YAML configuration for the scenario runner."""
from __future__ import annotations

from dataclasses import dataclass, field, fields
import math
import numbers
from pathlib import Path
from typing import Optional, Sequence, Tuple, Union

from omegaconf import OmegaConf

from .policy import resolve_parameters
from .scenarios import PROFILES
from .state import validate_horizon

CONFIG_ROOT = Path(__file__).resolve().parent / "config"

_REAL_FIELDS = (
    "sample_time",
    "duration",
    "initial_soc",
    "soc_drain_per_s",
    "motor_temp",
    "response_time_budget_ms",
)


@dataclass(frozen=True)
class RunnerConfig:
    """Settings for evaluating the optimizer over synthetic drive profiles."""

    mode: str = "balanced"
    prediction_horizon: Optional[int] = 30
    sample_time: float = 0.1
    duration: float = 30.0
    scenarios: Tuple[str, ...] = field(default=("city", "highway", "mixed"))
    initial_soc: float = 80.0
    soc_drain_per_s: float = 0.01
    motor_temp: float = 45.0
    response_time_budget_ms: float = 50.0

    def __post_init__(self) -> None:  # type: ignore[override]
        for name in _REAL_FIELDS:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, numbers.Real):
                raise ValueError(f"{name} must be a real number, got {value!r}")
            if not math.isfinite(value):
                raise ValueError(f"{name} must be finite")
            object.__setattr__(self, name, float(value))
        if self.prediction_horizon is not None:
            # Fractional horizons are rejected, not truncated.
            object.__setattr__(self, "prediction_horizon", validate_horizon(self.prediction_horizon))
        if isinstance(self.scenarios, str) or not isinstance(self.scenarios, (list, tuple)):
            raise ValueError(f"scenarios must be a list of names, got {self.scenarios!r}")
        # Lists coming from YAML are normalised so the config stays hashable.
        object.__setattr__(self, "scenarios", tuple(str(name) for name in self.scenarios))
        resolve_parameters(self.mode)
        if self.sample_time <= 0.0:
            raise ValueError("sample_time must be positive")
        if self.duration <= 0.0:
            raise ValueError("duration must be positive")
        if not self.scenarios:
            raise ValueError("at least one scenario is required")
        unknown = [name for name in self.scenarios if name not in PROFILES]
        if unknown:
            raise ValueError(f"unknown scenarios: {unknown}")
        if not 0.0 <= self.initial_soc <= 100.0:
            raise ValueError("initial_soc must be within [0, 100]")
        if self.soc_drain_per_s < 0.0:
            raise ValueError("soc_drain_per_s cannot be negative")
        if self.response_time_budget_ms <= 0.0:
            raise ValueError("response_time_budget_ms must be positive")

    def horizon(self) -> int:
        if self.prediction_horizon is None:
            return resolve_parameters(self.mode).prediction_steps
        return self.prediction_horizon


def component_path(component: str, name: str = "default") -> Path:
    path = CONFIG_ROOT / component / f"{name}.yaml"
    if not path.exists():
        raise FileNotFoundError(path)
    return path


def load_runner_config(
    source: Union[str, Path, None] = None,
    overrides: Sequence[str] = (),
) -> RunnerConfig:
    """Load a :class:`RunnerConfig`.

    ``source`` is either a YAML path or the name of a bundled preset under
    ``config/runner``. ``overrides`` are OmegaConf dotlist entries such as
    ``"mode=economy"``.
    """

    if source is None:
        path = component_path("runner")
    else:
        path = Path(source)
        if not path.exists():
            path = component_path("runner", str(source))

    cfg = OmegaConf.merge(OmegaConf.load(path), OmegaConf.from_dotlist(list(overrides)))
    data = OmegaConf.to_object(cfg)
    unknown = set(data) - {f.name for f in fields(RunnerConfig)}
    if unknown:
        raise ValueError(f"unknown runner config keys: {sorted(unknown)}")
    return RunnerConfig(**data)


__all__ = ["CONFIG_ROOT", "RunnerConfig", "component_path", "load_runner_config"]
