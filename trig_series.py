"""
Sine and cosine by MacLaurin series.

    sin(x) = Σ (-1)^n * x^(2n+1) / (2n+1)!
    cos(x) = Σ (-1)^n * x^(2n)   / (2n)!

Both series share one loop; `SeriesKind` picks the exponent offset.
Every result is rounded to `get_round_decimals()` places.
"""
import math
import sys
from enum import IntEnum
from typing import List, Optional

from utils.precision_manager import check_tolerance, get_round_decimals
from utils.trace_helpers import add_traceback

PERIOD = 2 * math.pi
INVALID_ARGUMENT_MSG = "This function does not accept invalid arguments."


class SeriesKind(IntEnum):
    """Exponent / factorial offset of the series term."""
    COSINE = 0
    SINE = 1


# -------------------------------------------------------------- #
# Helpers
# -------------------------------------------------------------- #
def _factorial(n: int) -> int:
    # exact, Python ints do not overflow
    return math.prod(range(1, n + 1))


def _round_to_decimal(x: float, decimals: int) -> float:
    """Round half away from zero on the scaled value."""
    multiplier = 10.0 ** decimals
    return math.copysign(math.floor(abs(x) * multiplier + 0.5), x) / multiplier


def _reduce_angle(value: float) -> float:
    """Strip whole periods so the angle lies in (-2π, 2π)."""
    if value >= PERIOD or value <= -PERIOD:
        value = math.fmod(value, PERIOD)
    return value


def _series(x, tol, kind: SeriesKind, trace: Optional[List[dict]] = None) -> float:
    tol = check_tolerance(tol)  # before the angle check, a bad tol always raises
    value = float(x)

    if not math.isfinite(value):
        print(INVALID_ARGUMENT_MSG, file=sys.stderr)
        if trace is not None:
            add_traceback(trace, 'invalid_argument', f'{kind.name.lower()}({value})')
        return math.nan

    reduced = _reduce_angle(value)
    if trace is not None and reduced != value:
        add_traceback(trace, 'reduce', f'{value} -> {reduced}')

    rez = 0.0
    prev_rez = 1.0
    step = 0
    while abs(prev_rez - rez) > tol:
        prev_rez = rez
        order = 2 * step + kind
        rez += (-1) ** step * reduced ** order / _factorial(order)
        step += 1

    result = _round_to_decimal(rez, get_round_decimals())
    if trace is not None:
        add_traceback(trace, 'converged',
                      f'{kind.name.lower()}({reduced}) = {result} after {step} terms (tol={tol})')
    return result


# -------------------------------------------------------------- #
# Public API
# -------------------------------------------------------------- #
def sine(x, tol=None, *, trace: Optional[List[dict]] = None) -> float:
    """
    Return sin(x) for an angle in radians, approximated to `tol`.

    `tol` defaults to the configured tolerance. A non-finite `x` prints a
    warning to stderr and yields NaN.
    """
    return _series(x, tol, SeriesKind.SINE, trace)


def cosine(x, tol=None, *, trace: Optional[List[dict]] = None) -> float:
    """Return cos(x) for an angle in radians, approximated to `tol`."""
    return _series(x, tol, SeriesKind.COSINE, trace)


def sine_no_radian_arg(x, tol=None, *, trace: Optional[List[dict]] = None) -> float:
    """
    Sine of an angle in degrees.

    sine_no_radian_arg(1) == sine(π/180), not sine(1).
    """
    return sine(float(x) * math.pi / 180, tol, trace=trace)


def cosine_no_radian_arg(x, tol=None, *, trace: Optional[List[dict]] = None) -> float:
    """Cosine of an angle in degrees."""
    return cosine(float(x) * math.pi / 180, tol, trace=trace)
