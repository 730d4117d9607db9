"""Convert each number given on the command line between several unit pairs."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .cf import _parse_float
from .lenconv import Foot, Meter, ft_to_met, met_to_ft
from .tempconv import Celsius, Fahrenheit, c_to_f, f_to_c
from .timeconv import NanoSec, PicoSec, ns_to_ps, ps_to_ns
from .wtconv import Kg, Lb, kg_to_lb, lb_to_kg

__all__ = ["rule", "convert_block", "main"]

_RULE_WIDTH = 64
_WEIGHT_WIDTH = 24


def rule() -> str:
    """Return the separator line printed around each block."""
    return "-" * _RULE_WIDTH


def convert_block(value: float) -> str:
    """Return four newline-terminated lines: temperature, length, weight, time."""
    fahrenheit, celsius = Fahrenheit(value), Celsius(value)
    feet, meters = Foot(value), Meter(value)
    kilograms, pounds = Kg(value), Lb(value)
    picos, nanos = PicoSec(value), NanoSec(value)
    lines = [
        f"{fahrenheit} = {f_to_c(fahrenheit)}, {celsius} = {c_to_f(celsius)}",
        f"{feet} = {ft_to_met(feet)}, {meters} = {met_to_ft(meters)}",
        f"{kilograms} = {kg_to_lb(kilograms)}, "
        f"{pounds} = {str(lb_to_kg(pounds))[:_WEIGHT_WIDTH]}",
        f"{picos} = {ps_to_ns(picos)}, {nanos} = {ns_to_ps(nanos)}",
    ]
    return "".join(f"{line}\n" for line in lines)


def main(argv: Sequence[str] | None = None) -> int:
    """Print a ruled block of conversions per argument; stop at a bad number."""
    args = sys.argv[1:] if argv is None else list(argv)
    for arg in args:
        try:
            value = _parse_float(arg)
        except ValueError as exc:
            print(f"cf: {exc}", file=sys.stderr)
            return 1
        print(rule())
        sys.stdout.write(convert_block(value))
    if args:
        print(rule())
    return 0


if __name__ == "__main__":
    sys.exit(main())