"""Scalar helpers used across the synthesis code: level conversions, waveforms, approximations."""

from __future__ import annotations

import math
import random
import struct

PI = math.pi
TWO_PI = 2.0 * math.pi
SQRT2 = math.sqrt(2.0)
ONE_OVER_SQRT2 = 1.0 / math.sqrt(2.0)
LN10 = math.log(10.0)
LN2 = math.log(2.0)
SEMITONE_FACTOR = 2.0 ** (1.0 / 12.0)
TINY = 1.1754943508222875e-38  # smallest normal single-precision float
EPS = 2.220446049250313e-16  # double-precision machine epsilon

_DB_TO_AMP = LN10 / 20.0


def db_to_amp(db: float) -> float:
    """Convert a level in decibels to a linear amplitude factor."""
    return math.exp(db * _DB_TO_AMP)


def amp_to_db(amp: float) -> float:
    """Convert a linear amplitude factor to decibels."""
    return math.log(amp) / _DB_TO_AMP


def double_exponent(value: float) -> int:
    """Return the unbiased IEEE 754 exponent field of a double."""
    (bits,) = struct.unpack("<Q", struct.pack("<d", value))
    return ((bits & 0x7FFFFFFFFFFFFFFF) >> 52) - 1023


def below_or_above(x: float, low: float, high: float) -> float:
    """Return -1.0 below ``low``, 1.0 above ``high`` and 0.0 in between."""
    if x < low:
        return -1.0
    if x > high:
        return 1.0
    return 0.0


def clip(x, low, high):
    """Restrict ``x`` to the range ``low``...``high``."""
    if x > high:
        return high
    if x < low:
        return low
    return x


def evaluate_quartic(x: float, a0: float, a1: float, a2: float, a3: float, a4: float) -> float:
    """Evaluate a4*x^4 + a3*x^3 + a2*x^2 + a1*x + a0."""
    x2 = x * x
    return x * (a3 * x2 + a1) + x2 * (a4 * x2 + a2) + a0


def fold_over(x: float, low: float, high: float) -> float:
    """Reflect ``x`` back into range at whichever bound it crosses."""
    if x > high:
        return high - (x - high)
    if x < low:
        return low - (x - low)
    return x


def integer_power(x: float, exponent: int) -> float:
    """Multiply ``x`` by itself ``exponent`` times; non-positive exponents give 1.0."""
    accu = 1.0
    for _ in range(exponent):
        accu *= x
    return accu


def random_between(low: float = 0.0, high: float = 1.0) -> float:
    """Return a pseudo-random number between ``low`` and ``high``."""
    return low + (high - low) * random.random()


def saw_wave(x: float) -> float:
    """A 2*pi periodic sawtooth wave."""
    tmp = math.fmod(x, TWO_PI)
    if tmp < PI:
        return tmp / PI
    return tmp / PI - 2.0


def sin_cos(x: float) -> tuple[float, float]:
    """Return ``(sin(x), cos(x))``."""
    return math.sin(x), math.cos(x)


def sin_cos_approx(x: float) -> tuple[float, float]:
    """Return a parabolic approximation of ``(sin(x), cos(x))``."""
    c = 0.70710678118654752440
    while x > TWO_PI:
        x -= TWO_PI
    while x < 0.0:
        x += TWO_PI

    if x < PI / 2:
        tmp2 = (2 / PI) * x - 0.5
        tmp3 = (2 - 4 * c) * tmp2 * tmp2 + c
        return tmp3 + tmp2, tmp3 - tmp2
    if x < PI:
        tmp2 = 0.5 - (2 / PI) * (x - PI / 2)
        tmp3 = (2 - 4 * c) * tmp2 * tmp2 + c
        return tmp2 + tmp3, tmp2 - tmp3
    if x < 1.5 * PI:
        tmp2 = (2 / PI) * (x - PI) - 0.5
        tmp3 = (4 * c - 2) * tmp2 * tmp2 - c
        return tmp3 - tmp2, tmp3 + tmp2
    tmp2 = (2 / PI) * (x - 1.5 * PI) - 0.5
    tmp3 = (2 - 4 * c) * tmp2 * tmp2 + c
    return tmp2 - tmp3, tmp2 + tmp3


def sqr_wave(x: float) -> float:
    """A 2*pi periodic square wave."""
    tmp = math.fmod(x, TWO_PI)
    if tmp < PI:
        return 1.0
    return -1.0


def tanh_approx(x: float) -> float:
    """Rational approximation of the hyperbolic tangent."""
    a = abs(2 * x)
    b = 24 + a * (12 + a * (6 + a))
    return 2 * (x * b) / (a * b + 48)


def tri_wave(x: float) -> float:
    """A 2*pi periodic triangle wave."""
    tmp = math.fmod(x, TWO_PI)
    if tmp < 0.5 * PI:
        return tmp / (0.5 * PI)
    if tmp < 1.5 * PI:
        return 1.0 - (tmp - 0.5 * PI) / (0.5 * PI)
    return -1.0 + (tmp - 1.5 * PI) / (0.5 * PI)