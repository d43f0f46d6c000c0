"""Small integer and floating-point helpers."""

from __future__ import annotations

import math
import sys
from typing import Tuple

__all__ = [
    "floor_sqrt",
    "ceil_sqrt",
    "ceil_div",
    "is_two_power",
    "gcd",
    "lcm",
    "log2",
    "rint",
    "is_close",
    "ru128",
]

_TWO_POW_64 = float(2**64)
_TWO_POW_128 = _TWO_POW_64 * _TWO_POW_64


def floor_sqrt(n: float) -> int:
    """floor(sqrt(n)), computed in double precision."""
    return int(math.floor(math.sqrt(float(n))))


def ceil_sqrt(n: float) -> int:
    """ceil(sqrt(n)), computed in double precision."""
    return int(math.ceil(math.sqrt(float(n))))


def ceil_div(a: int, b: int) -> int:
    """ceil(a / b) for non-negative integers."""
    return (a + b - 1) // b


def is_two_power(v: int) -> bool:
    return bool(v) and not (v & (v - 1))


def gcd(a: int, b: int) -> int:
    """Greatest common divisor."""
    return math.gcd(a, b)


def lcm(a: int, b: int) -> int:
    """Least common multiple."""
    return a * b // gcd(a, b)


def log2(x: int) -> int:
    """floor(log2(x)) for a positive integer."""
    if x < 1:
        raise ValueError("log2 requires a positive integer")
    return x.bit_length() - 1


def rint(f: float) -> int:
    """Round to the nearest integer, ties to even."""
    return int(round(f))


def is_close(u: float, v: float) -> bool:
    """True if u and v differ by less than one epsilon relative to their scale."""
    scale = max(abs(u), abs(v), 1.0)
    return abs(u - v) < sys.float_info.epsilon * scale


def ru128(f: float) -> Tuple[int, int]:
    """Split round(|f|) into 64-bit (low, high) words.

    Raises OverflowError if |f| does not fit in 128 bits.
    """
    if math.isnan(f):
        raise ValueError("cannot convert NaN")
    f = abs(f)
    if f >= _TWO_POW_128:
        raise OverflowError("value does not fit in 128 bits")
    if f >= _TWO_POW_64:
        return int(math.fmod(f, _TWO_POW_64)), int(f / _TWO_POW_64)
    return rint(f), 0