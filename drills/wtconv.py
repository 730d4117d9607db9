"""Weights in kilograms and pounds and conversions between them."""

from __future__ import annotations

__all__ = ["Kg", "Lb", "kg_to_lb", "lb_to_kg"]

_POUNDS_PER_KG = 2.205


class Kg(float):
    """A weight in kilograms."""

    __slots__ = ()

    def __str__(self) -> str:
        return f"{float(self):.2f} Kg"


class Lb(float):
    """A weight in pounds."""

    __slots__ = ()

    def __str__(self) -> str:
        return f"{float(self):.2f} lb."


def kg_to_lb(kg: float) -> Lb:
    """Convert kilograms to pounds."""
    return Lb(kg * _POUNDS_PER_KG)


def lb_to_kg(lb: float) -> Kg:
    """Convert pounds to kilograms."""
    return Kg(lb / _POUNDS_PER_KG)