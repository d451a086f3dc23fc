"""Size-bounded string copying, concatenation and searching."""

from __future__ import annotations

__all__ = ["strlcpy", "strlcat", "strnstr"]

_NUL = "\0"


def _cstr(text: str) -> str:
    """Return *text* up to, but not including, its first NUL character."""
    head, _, _ = text.partition(_NUL)
    return head


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy *src* into a buffer of *size* characters.

    Returns the copied text (at most ``size - 1`` characters) and the full
    length of *src*; truncation happened when the length is ``>= size``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    src = _cstr(src)
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append *src* to *dst*, where *size* is the full size of the buffer.

    Returns the resulting text and the length it tried to create, that is
    ``min(size, len(dst)) + len(src)``; truncation happened when that length
    is ``>= size``.  When *dst* fills the whole buffer it is left unchanged.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    dst = _cstr(dst)
    src = _cstr(src)
    dlen = min(len(dst), size)
    if dlen == size:
        return dst, dlen + len(src)
    room = size - dlen - 1
    return dst[:dlen] + src[:room], dlen + len(src)


def strnstr(s: str, find: str, slen: int) -> int | None:
    """Find *find* within the first *slen* characters of *s*.

    Returns the index of the first occurrence that lies wholly inside that
    limit, or ``None``.  An empty *find* matches at index 0.  Both strings
    end at their first NUL character.
    """
    find = _cstr(find)
    if not find:
        return 0
    if slen <= 0:
        return None
    window = _cstr(s[:slen])
    index = window.find(find)
    return None if index < 0 else index