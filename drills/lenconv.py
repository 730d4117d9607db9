"""Lengths in meters and feet and conversions between them."""

from __future__ import annotations

__all__ = ["Meter", "Foot", "ft_to_met", "met_to_ft"]

_FEET_PER_METER = 3.281


class Meter(float):
    """A length in meters."""

    __slots__ = ()

    def __str__(self) -> str:
        return f"{float(self):.2f} M"


class Foot(float):
    """A length in feet."""

    __slots__ = ()

    def __str__(self) -> str:
        return f"{float(self):.2f} ft."


def ft_to_met(ft: float) -> Meter:
    """Convert feet to meters."""
    return Meter(ft / _FEET_PER_METER)


def met_to_ft(m: float) -> Foot:
    """Convert meters to feet."""
    return Foot(m * _FEET_PER_METER)