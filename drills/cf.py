"""Convert numbers given on the command line to Celsius and Fahrenheit."""

from __future__ import annotations

import json
import math
import re
import sys
from collections.abc import Sequence

from .tempconv import Celsius, Fahrenheit, c_to_f, f_to_c

__all__ = ["convert_line", "main"]

_DECIMAL = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")
_HEXADECIMAL = re.compile(
    r"[+-]?0[xX]([0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)[pP][+-]?[0-9]+"
)


def _parse_float(text: str) -> float:
    """Parse a number strictly, raising ValueError with a descriptive message."""

    def failure(reason: str) -> ValueError:
        quoted = json.dumps(text, ensure_ascii=False)
        return ValueError(f"strconv.ParseFloat: parsing {quoted}: {reason}")

    signed = text[:1] in ("+", "-")
    body = text[1:] if signed else text
    lowered = body.lower()
    if lowered in ("inf", "infinity"):
        return float(text)
    if lowered == "nan":
        if signed:
            raise failure("invalid syntax")
        return math.nan

    try:
        if _HEXADECIMAL.fullmatch(text):
            value = float.fromhex(text)
        elif _DECIMAL.fullmatch(text):
            value = float(text)
        else:
            raise failure("invalid syntax")
    except OverflowError:
        raise failure("value out of range") from None
    if math.isinf(value):
        raise failure("value out of range")
    return value


def convert_line(value: float) -> str:
    """Describe value read both as Fahrenheit and as Celsius, converted."""
    fahrenheit = Fahrenheit(value)
    celsius = Celsius(value)
    return f"{fahrenheit} = {f_to_c(fahrenheit)}, {celsius} = {c_to_f(celsius)}"


def main(argv: Sequence[str] | None = None) -> int:
    """Print one conversion line per argument; stop at the first bad number."""
    args = sys.argv[1:] if argv is None else list(argv)
    for arg in args:
        try:
            value = _parse_float(arg)
        except ValueError as exc:
            print(f"cf: {exc}", file=sys.stderr)
            return 1
        print(convert_line(value))
    return 0


if __name__ == "__main__":
    sys.exit(main())