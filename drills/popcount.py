"""Population count (number of set bits) of 64-bit unsigned integers."""

from __future__ import annotations

__all__ = ["pop_count", "pop_count_old", "pop_count_new"]

_MAX_UINT64 = (1 << 64) - 1


def _build_table() -> tuple[int, ...]:
    table = [0] * 256
    for i in range(1, 256):
        table[i] = table[i // 2] + (i & 1)
    return tuple(table)


# _TABLE[i] is the population count of i.
_TABLE = _build_table()


def _check(x: int) -> int:
    if not 0 <= x <= _MAX_UINT64:
        raise ValueError(f"value out of 64-bit unsigned range: {x}")
    return x


def pop_count(x: int) -> int:
    """Table-driven count in which the upper six lookups group as (x >> k) * 8.

    Only the two lowest bytes are looked up as bytes; for the rest the value
    is shifted by k bits and multiplied by eight before taking the low byte.
    For x below 4 this equals the true bit count.
    """
    x = _check(x)
    total = _TABLE[x & 0xFF] + _TABLE[(x >> 8) & 0xFF]
    total += sum(_TABLE[((x >> k) * 8) & 0xFF] for k in range(2, 8))
    return total


def pop_count_old(x: int) -> int:
    """Return the number of set bits of x by looking up each of its eight bytes."""
    x = _check(x)
    return sum(_TABLE[byte] for byte in x.to_bytes(8, "little"))


def pop_count_new(x: int) -> int:
    """Return the number of set bits of x, shifting one byte at a time."""
    x = _check(x)
    return sum(_TABLE[(x >> shift) & 0xFF] for shift in range(0, 64, 8))