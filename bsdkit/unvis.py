"""Decode text encoded with the ``vis`` escaping conventions."""

from __future__ import annotations

import enum

__all__ = [
    "UnvisFlags",
    "UnvisResult",
    "Unvis",
    "strnunvisx",
    "strunvisx",
    "strunvis",
    "strnunvis",
]


class UnvisFlags(enum.IntFlag):
    """Decoding options; ``END`` flushes a pending sequence."""

    NONE = 0
    HTTP1808 = 0x0080
    MIMESTYLE = 0x0200
    HTTP1866 = 0x0400
    NOESCAPE = 0x0800
    END = 0x1000


class UnvisResult(enum.Enum):
    """What a single decoding step produced."""

    VALID = 1
    VALIDPUSH = 2
    NOCHAR = 3
    SYNBAD = -1


class _State(enum.Enum):
    GROUND = 0
    START = 1
    META = 2
    META1 = 3
    CTRL = 4
    OCTAL2 = 5
    OCTAL3 = 6
    HEX = 7
    HEX1 = 8
    HEX2 = 9
    MIME1 = 10
    MIME2 = 11
    EATCRNL = 12
    AMP = 13
    NUMBER = 14
    STRING = 15


# Entity names of RFC 1866, in the sorted order the matcher relies on.
_NV: tuple[tuple[str, int], ...] = (
    ("AElig", 198), ("Aacute", 193), ("Acirc", 194), ("Agrave", 192),
    ("Aring", 197), ("Atilde", 195), ("Auml", 196), ("Ccedil", 199),
    ("ETH", 208), ("Eacute", 201), ("Ecirc", 202), ("Egrave", 200),
    ("Euml", 203), ("Iacute", 205), ("Icirc", 206), ("Igrave", 204),
    ("Iuml", 207), ("Ntilde", 209), ("Oacute", 211), ("Ocirc", 212),
    ("Ograve", 210), ("Oslash", 216), ("Otilde", 213), ("Ouml", 214),
    ("THORN", 222), ("Uacute", 218), ("Ucirc", 219), ("Ugrave", 217),
    ("Uuml", 220), ("Yacute", 221), ("aacute", 225), ("acirc", 226),
    ("acute", 180), ("aelig", 230), ("agrave", 224), ("amp", 38),
    ("aring", 229), ("atilde", 227), ("auml", 228), ("brvbar", 166),
    ("ccedil", 231), ("cedil", 184), ("cent", 162), ("copy", 169),
    ("curren", 164), ("deg", 176), ("divide", 247), ("eacute", 233),
    ("ecirc", 234), ("egrave", 232), ("eth", 240), ("euml", 235),
    ("frac12", 189), ("frac14", 188), ("frac34", 190), ("gt", 62),
    ("iacute", 237), ("icirc", 238), ("iexcl", 161), ("igrave", 236),
    ("iquest", 191), ("iuml", 239), ("laquo", 171), ("lt", 60),
    ("macr", 175), ("micro", 181), ("middot", 183), ("nbsp", 160),
    ("not", 172), ("ntilde", 241), ("oacute", 243), ("ocirc", 244),
    ("ograve", 242), ("ordf", 170), ("ordm", 186), ("oslash", 248),
    ("otilde", 245), ("ouml", 246), ("para", 182), ("plusmn", 177),
    ("pound", 163), ("quot", 34), ("raquo", 187), ("reg", 174),
    ("sect", 167), ("shy", 173), ("sup1", 185), ("sup2", 178),
    ("sup3", 179), ("szlig", 223), ("thorn", 254), ("times", 215),
    ("uacute", 250), ("ucirc", 251), ("ugrave", 249), ("uml", 168),
    ("uuml", 252), ("yacute", 253), ("yen", 165), ("yuml", 255),
)

_OCTAL = frozenset(b"01234567")
_DIGIT = frozenset(b"0123456789")
_XDIGIT = frozenset(b"0123456789abcdefABCDEF")
_UPPER_XDIGIT = frozenset(b"0123456789ABCDEF")
_SIMPLE = {
    ord("n"): 0x0A,
    ord("r"): 0x0D,
    ord("b"): 0x08,
    ord("a"): 0x07,
    ord("v"): 0x0B,
    ord("t"): 0x09,
    ord("f"): 0x0C,
    ord("s"): 0x20,
    ord("E"): 0x1B,
}


def _name_char(entry: int, pos: int) -> int:
    name = _NV[entry][0]
    return ord(name[pos]) if pos < len(name) else 0


def _isgraph(c: int) -> bool:
    return 0x21 <= c <= 0x7E


class Unvis:
    """A stateful decoder fed one byte at a time."""

    def __init__(self) -> None:
        self._state = _State.GROUND
        self._index = 0
        self._cp = 0

    def _goto(self, state: _State, index: int = 0) -> None:
        self._state = state
        self._index = index

    def _emit(self, result: UnvisResult) -> tuple[UnvisResult, int | None]:
        return result, self._cp

    def _bad(self) -> tuple[UnvisResult, int | None]:
        self._goto(_State.GROUND)
        return UnvisResult.SYNBAD, None

    def end(self) -> tuple[UnvisResult, int | None]:
        """Signal end of input, flushing a pending numeric sequence."""
        st = self._state
        if st in (_State.OCTAL2, _State.OCTAL3, _State.HEX2):
            self._goto(_State.GROUND)
            return self._emit(UnvisResult.VALID)
        if st is _State.GROUND:
            return UnvisResult.NOCHAR, None
        return UnvisResult.SYNBAD, None

    def feed(
        self, c: int | str, flag: int = 0
    ) -> tuple[UnvisResult, int | None]:
        """Decode one byte.

        Returns the step's result and, for ``VALID`` and ``VALIDPUSH``, the
        decoded byte.  ``VALIDPUSH`` means *c* was not consumed and must be
        fed again.
        """
        if isinstance(c, str):
            if len(c) != 1:
                raise ValueError("expected a single character")
            c = ord(c)
        if not 0 <= c <= 0xFF:
            raise ValueError("byte value out of range")
        flag = int(flag)
        if flag & UnvisFlags.END:
            return self.end()

        st = self._state
        nochar = (UnvisResult.NOCHAR, None)

        if st is _State.GROUND:
            self._cp = 0
            if not flag & UnvisFlags.NOESCAPE and c == ord("\\"):
                self._goto(_State.START)
                return nochar
            if flag & UnvisFlags.HTTP1808 and c == ord("%"):
                self._goto(_State.HEX1)
                return nochar
            if flag & UnvisFlags.HTTP1866 and c == ord("&"):
                self._goto(_State.AMP)
                return nochar
            if flag & UnvisFlags.MIMESTYLE and c == ord("="):
                self._goto(_State.MIME1)
                return nochar
            self._cp = c
            return self._emit(UnvisResult.VALID)

        if st is _State.START:
            if c == ord("\\"):
                self._cp = c
                self._goto(_State.GROUND)
                return self._emit(UnvisResult.VALID)
            if c in _OCTAL:
                self._cp = c - ord("0")
                self._goto(_State.OCTAL2)
                return nochar
            if c == ord("M"):
                self._cp = 0x80
                self._goto(_State.META)
                return nochar
            if c == ord("^"):
                self._goto(_State.CTRL)
                return nochar
            if c in _SIMPLE:
                self._cp = _SIMPLE[c]
                self._goto(_State.GROUND)
                return self._emit(UnvisResult.VALID)
            if c == ord("x"):
                self._goto(_State.HEX)
                return nochar
            if c in (ord("\n"), ord("$")):
                self._goto(_State.GROUND)
                return nochar
            if _isgraph(c):
                self._cp = c
                self._goto(_State.GROUND)
                return self._emit(UnvisResult.VALID)
            return self._bad()

        if st is _State.META:
            if c == ord("-"):
                self._goto(_State.META1)
            elif c == ord("^"):
                self._goto(_State.CTRL)
            else:
                return self._bad()
            return nochar

        if st is _State.META1:
            self._goto(_State.GROUND)
            self._cp |= c
            return self._emit(UnvisResult.VALID)

        if st is _State.CTRL:
            self._cp |= 0x7F if c == ord("?") else c & 0x1F
            self._goto(_State.GROUND)
            return self._emit(UnvisResult.VALID)

        if st is _State.OCTAL2:
            if c in _OCTAL:
                self._cp = ((self._cp << 3) + c - ord("0")) & 0xFF
                self._goto(_State.OCTAL3)
                return nochar
            self._goto(_State.GROUND)
            return self._emit(UnvisResult.VALIDPUSH)

        if st is _State.OCTAL3:
            self._goto(_State.GROUND)
            if c in _OCTAL:
                self._cp = ((self._cp << 3) + c - ord("0")) & 0xFF
                return self._emit(UnvisResult.VALID)
            return self._emit(UnvisResult.VALIDPUSH)

        if st in (_State.HEX, _State.HEX1):
            if c in _XDIGIT:
                self._cp = int(chr(c), 16)
                self._goto(_State.HEX2)
                return nochar
            if st is _State.HEX:
                return self._bad()
            self._goto(_State.GROUND)
            return self._emit(UnvisResult.VALIDPUSH)

        if st is _State.HEX2:
            self._goto(_State.GROUND)
            if c in _XDIGIT:
                self._cp = (int(chr(c), 16) | (self._cp << 4)) & 0xFF
                return self._emit(UnvisResult.VALID)
            return self._emit(UnvisResult.VALIDPUSH)

        if st is _State.MIME1:
            if c in (ord("\n"), ord("\r")):
                self._goto(_State.EATCRNL)
                return nochar
            if c in _UPPER_XDIGIT:
                self._cp = int(chr(c), 16)
                self._goto(_State.MIME2)
                return nochar
            return self._bad()

        if st is _State.MIME2:
            if c in _UPPER_XDIGIT:
                self._goto(_State.GROUND)
                self._cp = (int(chr(c), 16) | (self._cp << 4)) & 0xFF
                return self._emit(UnvisResult.VALID)
            return self._bad()

        if st is _State.EATCRNL:
            if c in (ord("\r"), ord("\n")):
                return nochar
            if c == ord("="):
                self._goto(_State.MIME1)
                return nochar
            self._cp = c
            self._goto(_State.GROUND)
            return self._emit(UnvisResult.VALID)

        if st is _State.AMP:
            self._cp = 0
            if c == ord("#"):
                self._goto(_State.NUMBER)
                return nochar
            self._goto(_State.STRING)
            st = _State.STRING

        if st is _State.STRING:
            entry = self._cp
            pos = self._index
            last = 0 if pos == 0 else _name_char(entry, pos - 1)
            wanted = 0 if c == ord(";") else c
            while entry < len(_NV):
                if pos != 0 and _name_char(entry, pos - 1) != last:
                    return self._bad()
                if _name_char(entry, pos) == wanted:
                    break
                entry += 1
            else:
                return self._bad()
            if wanted != 0:
                self._cp = entry
                self._goto(_State.STRING, pos + 1)
                return nochar
            self._cp = _NV[entry][1]
            self._goto(_State.GROUND)
            return self._emit(UnvisResult.VALID)

        if st is _State.NUMBER:
            if c == ord(";"):
                return self._emit(UnvisResult.VALID)
            if c not in _DIGIT:
                return self._bad()
            self._cp = (self._cp + self._cp * 10 + c - ord("0")) & 0xFF
            return nochar

        return self._bad()


def _as_bytes(src: bytes | bytearray | str) -> bytes:
    if isinstance(src, str):
        return src.encode("utf-8")
    return bytes(src)


def strnunvisx(
    src: bytes | str, dlen: int | None, flag: int = 0
) -> bytes:
    """Decode *src* into at most ``dlen - 1`` bytes.

    *dlen* counts a terminating NUL, as a buffer size does; ``None`` means
    no limit.  Input ends at its first NUL.  Raises :class:`ValueError` on
    a malformed escape or when the result does not fit.
    """
    data = _as_bytes(src).partition(b"\0")[0]
    decoder = Unvis()
    out = bytearray()

    def room() -> None:
        if dlen is not None and len(out) >= dlen:
            raise ValueError("decoded text does not fit the destination")

    for c in data:
        while True:
            result, value = decoder.feed(c, flag)
            if result is UnvisResult.SYNBAD:
                raise ValueError(f"invalid escape sequence in {src!r}")
            if result in (UnvisResult.VALID, UnvisResult.VALIDPUSH):
                room()
                out.append(value)
            if result is not UnvisResult.VALIDPUSH:
                break
    result, value = decoder.end()
    if result is UnvisResult.VALID:
        room()
        out.append(value)
    room()
    return bytes(out)


def strunvisx(src: bytes | str, flag: int = 0) -> bytes:
    """Decode *src* with the given flags, without a size limit."""
    return strnunvisx(src, None, flag)


def strunvis(src: bytes | str) -> bytes:
    """Decode backslash escapes in *src*."""
    return strnunvisx(src, None, 0)


def strnunvis(src: bytes | str, dlen: int) -> bytes:
    """Decode backslash escapes in *src* into a buffer of *dlen* bytes."""
    return strnunvisx(src, dlen, 0)