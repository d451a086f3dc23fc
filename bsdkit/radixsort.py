"""Most-significant-digit radix sort of byte strings."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

__all__ = ["radixsort", "sradixsort"]

_THRESHOLD = 20

ByteString = bytes | bytearray | memoryview


def _translation(table: Sequence[int] | bytes | None, endch: int) -> tuple[bytes, int]:
    """Return the translation table and the translated end character."""
    if not 0 <= endch <= 255:
        raise ValueError("endch must be a byte value")
    if table is None:
        tr = bytearray(256)
        for c in range(256):
            if c < endch:
                tr[c] = c + 1
            elif c == endch:
                tr[c] = 0
            else:
                tr[c] = c
        return bytes(tr), 0
    tr = bytes(table)
    if len(tr) != 256:
        raise ValueError("translation table must have 256 entries")
    term = tr[endch]
    if term not in (0, 255):
        raise ValueError("end character must translate to 0 or 255")
    return tr, term


def _key(s: ByteString, tr: bytes, term: int) -> bytes:
    translated = bytes(s).translate(tr)
    cut = translated.find(bytes([term]))
    if cut >= 0:
        translated = translated[:cut]
    return translated + bytes([term])


def _sort(strings: Iterable[ByteString], table, endch: int) -> list:
    tr, term = _translation(table, endch)
    keyed = [(_key(s, tr, term), s) for s in strings]
    out: list = []
    stack: list[tuple[list, int | None]] = [(keyed, 0)]
    while stack:
        group, depth = stack.pop()
        if depth is None:
            out.extend(item for _, item in group)
            continue
        if len(group) < _THRESHOLD:
            group.sort(key=lambda pair: pair[0][depth:])
            out.extend(item for _, item in group)
            continue
        bins: list[list] = [[] for _ in range(256)]
        for pair in group:
            bins[pair[0][depth]].append(pair)
        for value in range(255, -1, -1):
            bucket = bins[value]
            if not bucket:
                continue
            stack.append((bucket, None if value == term else depth + 1))
    return out


def radixsort(
    strings: Iterable[ByteString],
    table: Sequence[int] | bytes | None = None,
    endch: int = 0,
) -> list:
    """Return the byte strings sorted by their contents.

    Each string ends at its first *endch* byte or at its end.  With a
    *table*, bytes are compared through it and *endch* must translate to
    0 (end sorts first) or 255 (end sorts last); otherwise
    :class:`ValueError` is raised.
    """
    return _sort(strings, table, endch)


def sradixsort(
    strings: Iterable[ByteString],
    table: Sequence[int] | bytes | None = None,
    endch: int = 0,
) -> list:
    """Like :func:`radixsort`, guaranteeing equal strings keep their order."""
    if strings is None:
        raise TypeError("strings must be an iterable of byte strings")
    return _sort(strings, table, endch)