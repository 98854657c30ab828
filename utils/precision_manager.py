"""
Central tolerance switch for the series functions.
REPL (or tests) may call set_tolerance(value) to tighten or loosen the
default; the series code should only *read* it through get_tolerance().
"""
import math
from typing import List

_PRESETS: List[float] = [1e-1, 1e-3, 1e-6, 1e-8, 1e-10, 1e-12]
_CURRENT = 1e-10                                  # default, fine enough for 6 decimals

ROUND_DECIMALS = 6


def get_tolerance() -> float:
    """Return the active default tolerance."""
    return _CURRENT


def set_tolerance(value: float) -> None:
    """Set the default tolerance if value is one of the approved presets."""
    global _CURRENT
    if value not in _PRESETS:
        raise ValueError(f"tolerance {value} not allowed; choose one of {_PRESETS}")
    _CURRENT = value


def presets() -> List[float]:
    return _PRESETS.copy()


def get_round_decimals() -> int:
    return ROUND_DECIMALS


def check_tolerance(value) -> float:
    """
    Validate a per-call tolerance; None falls back to get_tolerance().

    Zero, negative, infinite or NaN tolerances would stall or skip the
    convergence loop, so they are refused.
    """
    if value is None:
        return _CURRENT
    tol = float(value)
    if not math.isfinite(tol) or tol <= 0:
        raise ValueError(f"tolerance must be a positive finite number, got {value!r}")
    return tol
