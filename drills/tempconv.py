"""Celsius, Fahrenheit and Kelvin temperatures and conversions between them."""

from __future__ import annotations

import math
from decimal import Decimal

__all__ = [
    "Celsius",
    "Fahrenheit",
    "Kelvin",
    "format_g",
    "c_to_f",
    "f_to_c",
    "c_to_k",
    "k_to_c",
    "k_to_f",
    "f_to_k",
    "ABSOLUTE_ZERO_C",
    "ABSOLUTE_ZERO_K",
    "ABSOLUTE_ZERO_F",
    "FREEZING_C",
    "FREEZING_K",
    "FREEZING_F",
    "BOILING_C",
    "BOILING_K",
    "BOILING_F",
]

# Exponent at or above which the compact notation switches to scientific form.
_EXPONENT_LIMIT = 6


def format_g(value: float) -> str:
    """Format a number in the shortest '%g' style.

    The shortest digit string that reads back as the same float is used.
    Scientific notation, with at least two exponent digits, is chosen when
    the decimal exponent is below -4 or at least 6.
    """
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "-Inf" if value < 0 else "Inf"
    sign = "-" if math.copysign(1.0, value) < 0 else ""
    if value == 0:
        return sign + "0"

    _, digit_tuple, exponent = Decimal(repr(abs(value))).as_tuple()
    point = len(digit_tuple) + exponent
    digits = "".join(str(d) for d in digit_tuple).lstrip("0")
    # Leading zeros never appear for a non-zero Decimal parsed from repr,
    # but the point must follow any that were dropped.
    point -= len(digit_tuple) - len("".join(str(d) for d in digit_tuple).lstrip("0")) 
    digits = digits.rstrip("0")

    exp = point - 1
    if exp < -4 or exp >= _EXPONENT_LIMIT:
        mantissa = digits[0] + ("." + digits[1:] if len(digits) > 1 else "")
        exp_sign = "-" if exp < 0 else "+"
        return f"{sign}{mantissa}e{exp_sign}{abs(exp):02d}"
    if point <= 0:
        return f"{sign}0.{'0' * -point}{digits}"
    if point >= len(digits):
        return sign + digits + "0" * (point - len(digits))
    return f"{sign}{digits[:point]}.{digits[point:]}"


class Celsius(float):
    """A temperature in degrees Celsius."""

    __slots__ = ()

    def __str__(self) -> str:
        return f"{format_g(self)}°C"


class Fahrenheit(float):
    """A temperature in degrees Fahrenheit."""

    __slots__ = ()

    def __str__(self) -> str:
        return f"{format_g(self)}°F"


class Kelvin(float):
    """A temperature in Kelvin."""

    __slots__ = ()

    def __str__(self) -> str:
        return f"{format_g(self)}°K"


ABSOLUTE_ZERO_C = Celsius(-273.15)
ABSOLUTE_ZERO_K = Kelvin(0)
ABSOLUTE_ZERO_F = Fahrenheit(-459.67)

FREEZING_C = Celsius(0)
FREEZING_K = Kelvin(273.15)
FREEZING_F = Fahrenheit(32)

BOILING_C = Celsius(100)
BOILING_K = Kelvin(373.15)
BOILING_F = Fahrenheit(212)


def c_to_f(c: float) -> Fahrenheit:
    """Convert a Celsius temperature to Fahrenheit."""
    return Fahrenheit(c * 9 / 5 + 32)


def f_to_c(f: float) -> Celsius:
    """Convert a Fahrenheit temperature to Celsius."""
    return Celsius((f - 32) * 5 / 9)


def c_to_k(c: float) -> Kelvin:
    """Convert a Celsius temperature to Kelvin."""
    return Kelvin(c + 273.15)


def k_to_c(k: float) -> Celsius:
    """Convert a Kelvin temperature to Celsius."""
    return Celsius(k - 273.15)


def k_to_f(k: float) -> Fahrenheit:
    """Convert a Kelvin temperature to Fahrenheit."""
    return Fahrenheit((k - 273.15) * 9 / 5 + 32)


def f_to_k(f: float) -> Kelvin:
    """Convert a Fahrenheit temperature to Kelvin."""
    return Kelvin((f - 32) * 5 / 9 + 273.15)