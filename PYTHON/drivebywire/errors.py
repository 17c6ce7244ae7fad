"""Error types raised by the energy optimization core."""
from __future__ import annotations


class OptimizationError(ValueError):
    """Base class for recoverable per-tick optimization failures."""


class InvalidPolicy(OptimizationError):
    """Raised when a control mode has no entry in the policy table."""

    def __init__(self, mode: object, known: tuple[str, ...] = ()) -> None:
        self.mode = mode
        self.known = known
        message = f"unknown control mode {mode!r}"
        if known:
            message += f" (expected one of: {', '.join(known)})"
        super().__init__(message)


class InvalidInput(OptimizationError):
    """Raised for out-of-range vehicle state fields or horizons."""


class DegenerateBaseline(OptimizationError):
    """Raised when the baseline energy is too small to normalise savings."""

    def __init__(self, baseline: float) -> None:
        self.baseline = baseline
        super().__init__(f"baseline energy {baseline!r} is degenerate; percentage savings undefined")


__all__ = ["OptimizationError", "InvalidPolicy", "InvalidInput", "DegenerateBaseline"]
