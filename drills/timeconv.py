"""Time spans from picoseconds to seconds and conversions between them."""

from __future__ import annotations

__all__ = [
    "PicoSec",
    "NanoSec",
    "MicroSec",
    "MilliSec",
    "Sec",
    "ms_to_sec",
    "ms_to_ns",
    "ms_to_micro_sec",
    "ns_to_sec",
    "ns_to_ms",
    "ns_to_micro_sec",
    "ns_to_ps",
    "ps_to_ns",
    "ps_to_micro_sec",
    "ps_to_ms",
    "ps_to_sec",
    "sec_to_ns",
    "sec_to_micro_sec",
    "sec_to_milli_sec",
]


class PicoSec(float):
    """A span in picoseconds."""

    __slots__ = ()

    def __str__(self) -> str:
        return f"{float(self):.2f} ps"


class NanoSec(float):
    """A span in nanoseconds."""

    __slots__ = ()

    def __str__(self) -> str:
        return f"{float(self):.2f} ns"


class MicroSec(float):
    """A span in microseconds."""

    __slots__ = ()

    def __str__(self) -> str:
        return f"{float(self):.2f} μs"


class MilliSec(float):
    """A span in milliseconds."""

    __slots__ = ()

    def __str__(self) -> str:
        return f"{float(self):.6f} ms"


class Sec(float):
    """A span in seconds."""

    __slots__ = ()

    def __str__(self) -> str:
        return f"{float(self):.2f} s"


def ms_to_sec(ms: float) -> Sec:
    """Convert milliseconds to seconds."""
    return Sec(ms / 1000)


def ms_to_ns(ms: float) -> NanoSec:
    """Convert milliseconds to nanoseconds."""
    return NanoSec(ms * 1e6)


def ms_to_micro_sec(ms: float) -> MicroSec:
    """Convert milliseconds to microseconds."""
    return MicroSec(ms * 1000)


def ns_to_sec(ns: float) -> Sec:
    """Convert nanoseconds to seconds."""
    return Sec(ns / 1e9)


def ns_to_ms(ns: float) -> MilliSec:
    """Convert nanoseconds to milliseconds."""
    return MilliSec(ns / 1e6)


def ns_to_micro_sec(ns: float) -> MicroSec:
    """Convert nanoseconds to microseconds."""
    return MicroSec(ns / 1000)


def ns_to_ps(ns: float) -> PicoSec:
    """Convert nanoseconds to picoseconds."""
    return PicoSec(ns * 1000)


def ps_to_ns(ps: float) -> NanoSec:
    """Convert picoseconds to nanoseconds."""
    return NanoSec(ps / 1000)


def ps_to_micro_sec(ps: float) -> MicroSec:
    """Convert picoseconds to microseconds."""
    return MicroSec(ps / 1e6)


def ps_to_ms(ps: float) -> MilliSec:
    """Convert picoseconds to milliseconds."""
    return MilliSec(ps / 1e9)


def ps_to_sec(ps: float) -> Sec:
    """Convert picoseconds to seconds."""
    return Sec(ps / 1e12)


def sec_to_ns(s: float) -> NanoSec:
    """Convert seconds to nanoseconds."""
    return NanoSec(s * 1e9)


def sec_to_micro_sec(s: float) -> MicroSec:
    """Convert seconds to microseconds."""
    return MicroSec(s * 1e6)


def sec_to_milli_sec(s: float) -> MilliSec:
    """Convert seconds to milliseconds."""
    return MilliSec(s * 1000)