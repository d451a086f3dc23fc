"""Format numbers as short human-readable strings with unit prefixes."""

from __future__ import annotations

import enum
import locale

__all__ = [
    "HN_GETSCALE",
    "HN_AUTOSCALE",
    "HumanizeFlags",
    "humanize_number",
]

HN_GETSCALE = 0x10
HN_AUTOSCALE = 0x20

_MAXSCALE = 6


class HumanizeFlags(enum.IntFlag):
    """Formatting flags for :func:`humanize_number`."""

    NONE = 0
    DECIMAL = 0x01
    NOSPACE = 0x02
    B = 0x04
    DIVISOR_1000 = 0x08
    IEC_PREFIXES = 0x10


_SI = ("", "k", "M", "G", "T", "P", "E")
_BINARY = ("", "K", "M", "G", "T", "P", "E")
_IEC = ("", "Ki", "Mi", "Gi", "Ti", "Pi", "Ei")


def humanize_number(
    length: int, quotient: int, suffix: str, scale: int, flags: int = 0
) -> str | int:
    """Format *quotient* to fit a buffer of *length* characters.

    *length* counts a terminating NUL, so the text returned holds at most
    ``length - 1`` characters.  With :data:`HN_GETSCALE` in *scale* the
    number of divisions needed is returned instead of text.  Raises
    :class:`ValueError` for invalid arguments or a buffer too small.
    """
    flags = int(flags)
    if scale < 0:
        raise ValueError("scale must not be negative")
    if scale > _MAXSCALE and scale & ~(HN_AUTOSCALE | HN_GETSCALE):
        raise ValueError("invalid scale")
    if flags & HumanizeFlags.DIVISOR_1000 and flags & HumanizeFlags.IEC_PREFIXES:
        raise ValueError("DIVISOR_1000 and IEC_PREFIXES are exclusive")

    if flags & HumanizeFlags.IEC_PREFIXES:
        baselen = 2
        divisor, deccut = 1024, 973
        prefixes = list(_IEC)
    else:
        baselen = 1
        if flags & HumanizeFlags.DIVISOR_1000:
            divisor, deccut = 1000, 950
            prefixes = list(_SI)
        else:
            divisor, deccut = 1024, 973
            prefixes = list(_BINARY)
    if flags & HumanizeFlags.B:
        prefixes[0] = "B"

    if quotient < 0:
        sign = -1
        quotient = -quotient
        baselen += 2
    else:
        sign = 1
        baselen += 1
    if flags & HumanizeFlags.NOSPACE:
        sep = ""
    else:
        sep = " "
        baselen += 1
    baselen += len(suffix)

    if length < baselen + 1:
        raise ValueError("buffer too small")

    remainder = 0
    i = 0
    if scale & (HN_AUTOSCALE | HN_GETSCALE):
        limit = 10 ** max(length - baselen, 0)
        while i < _MAXSCALE and (
            quotient >= limit
            or (
                quotient == limit - 1
                and (remainder >= deccut or remainder >= divisor // 2)
            )
        ):
            remainder = quotient % divisor
            quotient //= divisor
            i += 1
        if scale & HN_GETSCALE:
            return i
    else:
        while i < scale and i < _MAXSCALE:
            remainder = quotient % divisor
            quotient //= divisor
            i += 1

    if (
        ((quotient == 9 and remainder < deccut) or quotient < 9)
        and i > 0
        and flags & HumanizeFlags.DECIMAL
    ):
        rounded = (remainder * 10 + divisor // 2) // divisor
        s1 = quotient + rounded // 10
        s2 = rounded % 10
        point = locale.localeconv()["decimal_point"]
        text = f"{sign * s1}{point}{s2}{sep}{prefixes[i]}{suffix}"
    else:
        value = sign * (quotient + (remainder + divisor // 2) // divisor)
        text = f"{value}{sep}{prefixes[i]}{suffix}"
    return text[: length - 1]