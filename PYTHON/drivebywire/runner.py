"""Evaluate the energy optimizer over synthetic drive profiles."""
from __future__ import annotations

import argparse
from dataclasses import dataclass
import logging
from typing import Dict, List, Optional

import numpy as np

from .config_loader import RunnerConfig, load_runner_config
from .energy import percentage_saved
from .errors import OptimizationError
from .optimizer import OptimizationResult, optimize
from .scenarios import DriveProfile, generate_profile
from .state import VehicleState

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScenarioSummary:
    name: str
    ticks: int
    baseline_energy: float
    optimized_energy: float
    energy_saved: float
    energy_saved_percentage: float
    mean_efficiency_score: float
    mean_response_time: float
    max_response_time: float
    over_budget_ticks: int
    skipped_ticks: int


@dataclass(frozen=True)
class ScenarioResult:
    profile: DriveProfile
    soc: np.ndarray
    baseline: np.ndarray
    optimized: np.ndarray
    saved: np.ndarray
    score: np.ndarray
    response_time: np.ndarray
    throttle_command: np.ndarray
    regen_force: np.ndarray
    summary: ScenarioSummary


def soc_trace(profile: DriveProfile, config: RunnerConfig) -> np.ndarray:
    return np.clip(config.initial_soc - config.soc_drain_per_s * profile.time, 0.0, 100.0)


def run_profile(profile: DriveProfile, config: RunnerConfig) -> ScenarioResult:
    """Call :func:`optimize` once per sample of ``profile``.

    A tick whose inputs are rejected keeps the last accepted commands and
    energies, so the per-tick arrays stay aligned with the profile. Its
    response time is NaN since no call completed. Rejected ticks before the
    first accepted one are NaN throughout. Summary statistics only count
    ticks that hold a value.
    """

    horizon = config.horizon()
    soc = soc_trace(profile, config)
    n = len(profile)

    baseline = np.full(n, np.nan)
    optimized = np.full(n, np.nan)
    saved = np.full(n, np.nan)
    score = np.full(n, np.nan)
    response_time = np.full(n, np.nan)
    throttle_command = np.full(n, np.nan)
    regen_force = np.full(n, np.nan)

    last: Optional[OptimizationResult] = None
    skipped = 0
    for i in range(n):
        try:
            state = VehicleState(
                speed=profile.speed[i],
                steering_angle=profile.steering[i],
                throttle_position=profile.throttle[i],
                brake_pressure=profile.brake[i],
                battery_soc=soc[i],
                motor_temp=config.motor_temp,
            )
            last = optimize(state, horizon, config.mode)
        except OptimizationError as exc:
            skipped += 1
            LOGGER.warning("%s | tick %d skipped: %s", profile.name, i, exc)
            if last is None:
                continue
        else:
            response_time[i] = last.metrics.response_time
        metrics = last.metrics
        baseline[i] = metrics.baseline_energy
        optimized[i] = metrics.optimized_energy
        saved[i] = metrics.energy_saved
        score[i] = metrics.efficiency_score
        throttle_command[i] = last.throttle.position
        regen_force[i] = last.brake.regenerative_force

    filled = ~np.isnan(score)
    timed = response_time[~np.isnan(response_time)]
    dt = config.sample_time
    total_baseline = float(np.sum(baseline[filled]) * dt)
    total_optimized = float(np.sum(optimized[filled]) * dt)
    total_saved = total_baseline - total_optimized
    summary = ScenarioSummary(
        name=profile.name,
        ticks=n,
        baseline_energy=total_baseline,
        optimized_energy=total_optimized,
        energy_saved=total_saved,
        energy_saved_percentage=percentage_saved(total_saved, total_baseline),
        mean_efficiency_score=float(np.mean(score[filled])) if filled.any() else 0.0,
        mean_response_time=float(np.mean(timed)) if timed.size else 0.0,
        max_response_time=float(np.max(timed)) if timed.size else 0.0,
        over_budget_ticks=int(np.count_nonzero(timed > config.response_time_budget_ms)),
        skipped_ticks=skipped,
    )
    LOGGER.info(
        "%s | ticks=%d saved=%.2f (%.1f%%) score=%.1f t_max=%.3fms skipped=%d",
        summary.name,
        summary.ticks,
        summary.energy_saved,
        summary.energy_saved_percentage,
        summary.mean_efficiency_score,
        summary.max_response_time,
        summary.skipped_ticks,
    )
    return ScenarioResult(
        profile=profile,
        soc=soc,
        baseline=baseline,
        optimized=optimized,
        saved=saved,
        score=score,
        response_time=response_time,
        throttle_command=throttle_command,
        regen_force=regen_force,
        summary=summary,
    )


def run_scenario(name: str, config: RunnerConfig) -> ScenarioResult:
    profile = generate_profile(name, config.duration, config.sample_time)
    return run_profile(profile, config)


def run_all(config: RunnerConfig) -> Dict[str, ScenarioResult]:
    return {name: run_scenario(name, config) for name in config.scenarios}


def format_summary(summary: ScenarioSummary) -> str:
    return (
        f"{summary.name:>10} | saved {summary.energy_saved:10.2f} ({summary.energy_saved_percentage:6.1f}%) | "
        f"score {summary.mean_efficiency_score:5.1f} | "
        f"t_mean {summary.mean_response_time:7.3f} ms | t_max {summary.max_response_time:7.3f} ms | "
        f"over budget {summary.over_budget_ticks} | skipped {summary.skipped_ticks}"
    )


def main(argv: List[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--config", default=None, help="Runner YAML path or bundled preset name")
    parser.add_argument("--mode", default=None, help="Control mode: economy, performance or balanced")
    parser.add_argument("--horizon", type=int, default=None, help="Prediction horizon in steps")
    parser.add_argument(
        "--scenario", action="append", default=None, help="Scenario to run (repeatable)"
    )
    parser.add_argument(
        "--set", dest="overrides", action="append", default=[], metavar="KEY=VALUE",
        help="Dotlist override applied on top of the YAML config",
    )
    parser.add_argument("--log-level", default="INFO", help="Logging level")

    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO))

    overrides: List[str] = list(args.overrides)
    if args.mode is not None:
        overrides.append(f"mode={args.mode}")
    if args.horizon is not None:
        overrides.append(f"prediction_horizon={args.horizon}")
    if args.scenario:
        overrides.append(f"scenarios=[{','.join(args.scenario)}]")

    try:
        config = load_runner_config(args.config, overrides)
    except (OSError, ValueError) as exc:
        parser.error(str(exc))

    header = f"mode={config.mode} horizon={config.horizon()} dt={config.sample_time}s duration={config.duration}s"
    print(header)
    print("-" * len(header))
    for result in run_all(config).values():
        print(format_summary(result.summary))
    return 0


__all__ = [
    "ScenarioResult",
    "ScenarioSummary",
    "format_summary",
    "main",
    "run_all",
    "run_profile",
    "run_scenario",
    "soc_trace",
]


if __name__ == "__main__":
    raise SystemExit(main())
