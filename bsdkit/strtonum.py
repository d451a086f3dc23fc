"""Range-checked integer parsing."""

from __future__ import annotations

import enum
import string
from dataclasses import dataclass

__all__ = [
    "INTMAX_MIN",
    "INTMAX_MAX",
    "UINTMAX_MAX",
    "Status",
    "ParseResult",
    "StrtonumError",
    "strtoi",
    "strtou",
    "strtonum",
]

INTMAX_MIN = -(2**63)
INTMAX_MAX = 2**63 - 1
UINTMAX_MAX = 2**64 - 1

_SPACE = " \t\n\v\f\r"
_DIGITS = {c: i for i, c in enumerate(string.digits + string.ascii_lowercase)}
_DIGITS.update({c.upper(): i for c, i in list(_DIGITS.items()) if c.isalpha()})


class Status(enum.Enum):
    """Outcome of a parse."""

    OK = "ok"
    OUT_OF_RANGE = "out of range"
    NO_DIGITS = "no digits"
    TRAILING = "trailing characters"
    INVALID_BASE = "invalid base"


@dataclass(frozen=True)
class ParseResult:
    """Value parsed, how the parse went, and the index where it stopped."""

    value: int
    status: Status
    end: int

    @property
    def ok(self) -> bool:
        return self.status is Status.OK


class StrtonumError(ValueError):
    """Raised by :func:`strtonum`; ``reason`` is the short error string."""

    def __init__(self, reason: str, text: str) -> None:
        super().__init__(f"{text!r}: {reason}")
        self.reason = reason
        self.text = text


def _digit(ch: str) -> int | None:
    return _DIGITS.get(ch)


def _scan(text: str, base: int) -> tuple[int, bool, int] | None:
    """Read an optionally signed number; None when the base is invalid.

    Returns the magnitude, whether it was negative, and the end index,
    which is 0 when no digits were found.
    """
    if base != 0 and not 2 <= base <= 36:
        return None
    n = len(text)
    i = 0
    while i < n and text[i] in _SPACE:
        i += 1
    negative = False
    if i < n and text[i] in "+-":
        negative = text[i] == "-"
        i += 1
    has_hex_prefix = (
        i + 2 < n
        and text[i] == "0"
        and text[i + 1] in ("x", "X")
        and (_digit(text[i + 2]) or 0) < 16
        and _digit(text[i + 2]) is not None
    )
    if base in (0, 16) and has_hex_prefix:
        i += 2
        base = 16
    elif base == 0:
        base = 8 if i < n and text[i] == "0" else 10
    start = i
    value = 0
    while i < n:
        d = _digit(text[i])
        if d is None or d >= base:
            break
        value = value * base + d
        i += 1
    if i == start:
        return 0, negative, 0
    return value, negative, i


def _finish(
    text: str, value: int, end: int, status: Status, lo: int, hi: int
) -> ParseResult:
    if status is Status.OK:
        if end == 0:
            status = Status.NO_DIGITS
        elif end < len(text):
            status = Status.TRAILING
    if value < lo:
        if status is Status.OK:
            status = Status.OUT_OF_RANGE
        return ParseResult(lo, status, end)
    if value > hi:
        if status is Status.OK:
            status = Status.OUT_OF_RANGE
        return ParseResult(hi, status, end)
    return ParseResult(value, status, end)


def strtoi(
    text: str, base: int = 10, lo: int = INTMAX_MIN, hi: int = INTMAX_MAX
) -> ParseResult:
    """Parse a signed integer and clamp it to ``[lo, hi]``.

    The value is first limited to the signed 64-bit range.  The status
    reports the first problem found: a bad base, overflow, no digits,
    characters after the number, or a value outside ``[lo, hi]``.
    """
    scanned = _scan(text, base)
    if scanned is None:
        return _finish(text, 0, 0, Status.INVALID_BASE, lo, hi)
    magnitude, negative, end = scanned
    value = -magnitude if negative else magnitude
    status = Status.OK
    if value > INTMAX_MAX:
        value, status = INTMAX_MAX, Status.OUT_OF_RANGE
    elif value < INTMAX_MIN:
        value, status = INTMAX_MIN, Status.OUT_OF_RANGE
    return _finish(text, value, end, status, lo, hi)


def strtou(
    text: str, base: int = 10, lo: int = 0, hi: int = UINTMAX_MAX
) -> ParseResult:
    """Parse an unsigned integer and clamp it to ``[lo, hi]``.

    A leading minus sign negates the value modulo 2**64, as unsigned
    conversion does; magnitudes above 2**64 - 1 overflow.
    """
    scanned = _scan(text, base)
    if scanned is None:
        return _finish(text, 0, 0, Status.INVALID_BASE, lo, hi)
    magnitude, negative, end = scanned
    status = Status.OK
    if magnitude > UINTMAX_MAX:
        value, status = UINTMAX_MAX, Status.OUT_OF_RANGE
    elif negative:
        value = (-magnitude) % (UINTMAX_MAX + 1)
    else:
        value = magnitude
    return _finish(text, value, end, status, lo, hi)


def strtonum(text: str, minval: int, maxval: int) -> int:
    """Parse a decimal integer that must lie within ``[minval, maxval]``.

    Raises :class:`StrtonumError` with reason ``"too large"``,
    ``"too small"`` or ``"invalid"``.
    """
    result = strtoi(text, 10, minval, maxval)
    if result.status is Status.OK:
        return result.value
    if result.status is Status.OUT_OF_RANGE:
        reason = "too large" if result.value == maxval else "too small"
    else:
        reason = "invalid"
    raise StrtonumError(reason, text)