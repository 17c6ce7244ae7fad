"""Shape and signal checks for the synthetic drive profiles."""

from __future__ import annotations

import sys
from pathlib import Path

import numpy as np
import pytest

REPO_ROOT = Path(__file__).resolve().parents[1]
PYTHON_ROOT = REPO_ROOT / "PYTHON"
if str(PYTHON_ROOT) not in sys.path:
    sys.path.insert(0, str(PYTHON_ROOT))

from drivebywire.scenarios import PROFILES, generate_profile  # noqa: E402


@pytest.mark.parametrize("name", sorted(PROFILES))
def test_profiles_are_sampled_inclusively(name: str) -> None:
    profile = generate_profile(name, duration=10.0, sample_time=0.1)
    assert len(profile) == 101
    assert profile.time[0] == 0.0
    assert profile.time[-1] == pytest.approx(10.0)
    assert profile.sample_time == pytest.approx(0.1)


@pytest.mark.parametrize("name", sorted(PROFILES))
def test_profiles_respect_signal_ranges(name: str) -> None:
    profile = generate_profile(name, duration=60.0, sample_time=0.1)
    assert np.all(profile.speed >= 0.0)
    assert np.all((profile.throttle >= 0.0) & (profile.throttle <= 100.0))
    assert np.all(profile.brake >= 0.0)
    assert np.max(np.abs(profile.steering)) <= 10.0


def test_profiles_are_deterministic() -> None:
    a = generate_profile("city", 20.0, 0.1)
    b = generate_profile("city", 20.0, 0.1)
    np.testing.assert_array_equal(a.speed, b.speed)
    np.testing.assert_array_equal(a.brake, b.brake)


def test_city_brake_pulses() -> None:
    profile = generate_profile("city", 30.0, 0.1)
    assert set(np.unique(profile.brake)) == {5.0, 15.0}


def test_highway_brake_window() -> None:
    profile = generate_profile("highway", 120.0, 0.1)
    braking = np.flatnonzero(profile.brake)
    assert braking[0] == 999
    assert braking[-1] == 1049
    assert np.all(profile.brake[braking] == 10.0)
    assert np.all((profile.speed >= 90.0) & (profile.speed <= 110.0))


def test_short_highway_run_has_no_braking() -> None:
    assert not np.any(generate_profile("highway", 30.0, 0.1).brake)


def test_mixed_switches_regimes() -> None:
    profile = generate_profile("mixed", 30.0, 0.1)
    highway = (profile.time >= 10.0) & (profile.time < 20.0)
    assert np.all(profile.speed[highway] >= 82.0)
    assert np.all(profile.speed[~highway] <= 52.0)
    # The drop back to city speed at t=20 s triggers braking.
    assert profile.brake[np.argmax(profile.time >= 20.0)] == 15.0


def test_unknown_scenario_and_bad_sampling() -> None:
    with pytest.raises(ValueError):
        generate_profile("desert", 10.0, 0.1)
    with pytest.raises(ValueError):
        generate_profile("city", 0.0, 0.1)
    with pytest.raises(ValueError):
        generate_profile("city", 10.0, -0.1)
