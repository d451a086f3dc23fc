"""Conversions between time values and fixed-width integer forms.

Time values are 64-bit; ``long`` is taken as 64 bits and ``int`` as 32.
"""

from __future__ import annotations

__all__ = [
    "time32_to_time",
    "time_to_time32",
    "time64_to_time",
    "time_to_time64",
    "time_to_long",
    "long_to_time",
    "time_to_int",
    "int_to_time",
]

_TIME_BITS = 64
_LONG_BITS = 64
_INT_BITS = 32


def _wrap(value: int, bits: int) -> int:
    """Truncate *value* to a two's-complement signed integer of *bits*."""
    span = 1 << bits
    value &= span - 1
    return value - span if value >= span >> 1 else value


def time32_to_time(t32: int) -> int:
    """Widen a 32-bit time to a time value."""
    return _wrap(_wrap(t32, 32), _TIME_BITS)


def time_to_time32(t: int) -> int:
    """Chop a time value down to 32 bits."""
    return _wrap(_wrap(t, _TIME_BITS), 32)


def time64_to_time(t64: int) -> int:
    """Convert a 64-bit time to a time value."""
    return _wrap(_wrap(t64, 64), _TIME_BITS)


def time_to_time64(t: int) -> int:
    """Convert a time value to 64 bits."""
    return _wrap(_wrap(t, _TIME_BITS), 64)


def time_to_long(t: int) -> int:
    """Convert a time value to a ``long``."""
    if _LONG_BITS == 64:
        return time_to_time64(t)
    return _wrap(t, _LONG_BITS)


def long_to_time(tlong: int) -> int:
    """Convert a ``long`` to a time value."""
    if _LONG_BITS == 32:
        return time32_to_time(tlong)
    return _wrap(_wrap(tlong, _LONG_BITS), _TIME_BITS)


def time_to_int(t: int) -> int:
    """Convert a time value to an ``int``."""
    if _INT_BITS == 64:
        return time_to_time64(t)
    return _wrap(_wrap(t, _TIME_BITS), _INT_BITS)


def int_to_time(tint: int) -> int:
    """Convert an ``int`` to a time value."""
    if _INT_BITS == 32:
        return time32_to_time(tint)
    return _wrap(_wrap(tint, _INT_BITS), _TIME_BITS)