"""Scalar math helpers: rounding, trigonometry, logarithms and random numbers."""

from __future__ import annotations

import math
import random

__all__ = [
    "fabs",
    "ceil",
    "floor",
    "trunc",
    "round_nearest",
    "atan",
    "atan2",
    "sqrt",
    "inv_sqrt",
    "sin",
    "cos",
    "tan",
    "sincos",
    "asin",
    "acos",
    "sinh",
    "cosh",
    "tanh",
    "exp",
    "log",
    "log2",
    "log10",
    "pow",
    "pow2",
    "fmax",
    "fmin",
    "fmod",
    "deg_to_rad",
    "rad_to_deg",
    "srand",
    "rand_float",
    "rand_int",
]

PI = math.pi
PI_2 = math.pi / 2.0

_rng = random.Random()


def fabs(x: float) -> float:
    """Absolute value."""
    return float(abs(x))


def ceil(x: float) -> float:
    """Round towards positive infinity."""
    return float(math.ceil(x))


def floor(x: float) -> float:
    """Round towards negative infinity."""
    return float(math.floor(x))


def trunc(x: float) -> float:
    """Round towards zero."""
    return float(math.trunc(x))


def round_nearest(x: float) -> float:
    """Round to the nearest integer, ties to even."""
    return float(round(x))


def atan(x: float) -> float:
    """Inverse tangent."""
    return math.atan(x)


def atan2(y: float, x: float) -> float:
    """Inverse tangent of y/x with the quadrant taken from the signs."""
    if x == 0.0 and y == 0.0:
        return 0.0
    if fabs(x) >= fabs(y):
        r = atan(y / x)
        if x < 0.0:
            r += PI if y >= 0.0 else -PI
    else:
        r = -atan(x / y)
        r += -PI_2 if y < 0.0 else PI_2
    return r


def sqrt(x: float) -> float:
    """Square root; raises ValueError for negative input."""
    return math.sqrt(x)


def inv_sqrt(x: float) -> float:
    """Reciprocal square root, 1/sqrt(x)."""
    return 1.0 / math.sqrt(x)


def sin(rad: float) -> float:
    """Sine of an angle in radians."""
    return math.sin(rad)


def cos(rad: float) -> float:
    """Cosine of an angle in radians."""
    return math.cos(rad)


def tan(x: float) -> float:
    """Tangent computed as sin/cos."""
    return math.sin(x) / math.cos(x)


def sincos(rad: float) -> tuple[float, float]:
    """Return (sin, cos) of an angle in radians."""
    return math.sin(rad), math.cos(rad)


def asin(x: float) -> float:
    """Inverse sine."""
    return math.asin(x)


def acos(x: float) -> float:
    """Inverse cosine."""
    return math.acos(x)


def sinh(x: float) -> float:
    """Hyperbolic sine."""
    return math.sinh(x)


def cosh(x: float) -> float:
    """Hyperbolic cosine."""
    return math.cosh(x)


def tanh(x: float) -> float:
    """Hyperbolic tangent."""
    return math.tanh(x)


def exp(x: float) -> float:
    """e raised to x."""
    return math.exp(x)


def log(x: float) -> float:
    """Natural logarithm."""
    return math.log(x)


def log2(x: float) -> float:
    """Base 2 logarithm."""
    return math.log2(x)


def log10(x: float) -> float:
    """Base 10 logarithm."""
    return math.log10(x)


def pow(x: float, y: float) -> float:  # noqa: A001 - mirrors the math naming
    """x raised to the power y."""
    return math.pow(x, y)


def pow2(x: float) -> float:
    """2 raised to the power x."""
    return math.pow(2.0, x)


def fmax(x: float, y: float) -> float:
    """Larger of two values."""
    return float(max(x, y))


def fmin(x: float, y: float) -> float:
    """Smaller of two values."""
    return float(min(x, y))


def fmod(x: float, y: float) -> float:
    """Remainder of x/y with the quotient truncated towards zero."""
    return x - y * math.trunc(x / y)


def deg_to_rad(x: float) -> float:
    """Convert degrees to radians."""
    return x * PI / 180.0


def rad_to_deg(x: float) -> float:
    """Convert radians to degrees."""
    return x * 180.0 / PI


def srand(seed: int) -> None:
    """Seed the shared random generator."""
    _rng.seed(seed)


def rand_float(lo: float, hi: float) -> float:
    """Random value in [lo, hi)."""
    return lo + _rng.random() * (hi - lo)


def rand_int(lo: float, hi: float) -> int:
    """Random value in [lo, hi) truncated to an integer."""
    return int(rand_float(lo, hi))