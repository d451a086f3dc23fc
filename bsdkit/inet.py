"""Parse IPv4 network numbers in presentation form."""

from __future__ import annotations

import errno
import os
import socket

__all__ = ["inet_net_pton"]

_DIGITS = "0123456789"
_XDIGITS = "0123456789abcdefABCDEF"


def _error(code: int) -> OSError:
    return OSError(code, os.strerror(code))


def inet_net_pton(af: int, src: str, size: int = 4) -> tuple[int, bytes]:
    """Convert a network number to network byte order.

    Accepts hex strings, dotted decimal octets and a ``/CIDR`` suffix.
    Returns the number of bits, given or inferred from the network class,
    and the *size*-byte destination buffer.  Raises :class:`OSError` with
    ``EAFNOSUPPORT``, ``ENOENT`` (not a network) or ``EMSGSIZE``.
    """
    if af != socket.AF_INET:
        raise _error(errno.EAFNOSUPPORT)
    return _pton_ipv4(src, size)


def _pton_ipv4(src: str, size: int) -> tuple[int, bytes]:
    text = src.partition("\0")[0] + "\0"
    capacity = max(size, 0)
    buf = bytearray(capacity + 1)
    out = 0
    ch = text[0]
    pos = 1

    if ch == "0" and text[pos] in "xX" and text[pos + 1] in _XDIGITS:
        if size <= 0:
            raise _error(errno.EMSGSIZE)
        buf[0] = 0
        dirty = False
        pos += 1
        while True:
            ch = text[pos]
            pos += 1
            if ch == "\0" or ch not in _XDIGITS:
                break
            buf[out] |= int(ch, 16)
            if not dirty:
                dirty = True
                buf[out] = (buf[out] << 4) & 0xFF
            elif size > 0:
                size -= 1
                out += 1
                buf[out] = 0
                dirty = False
            else:
                raise _error(errno.EMSGSIZE)
        if dirty:
            size -= 1
    elif ch in _DIGITS and ch != "\0":
        while True:
            tmp = 0
            while True:
                tmp = tmp * 10 + int(ch)
                if tmp > 255:
                    raise _error(errno.ENOENT)
                ch = text[pos]
                pos += 1
                if ch == "\0" or ch not in _DIGITS:
                    break
            if size <= 0:
                raise _error(errno.EMSGSIZE)
            size -= 1
            buf[out] = tmp
            out += 1
            if ch in ("\0", "/"):
                break
            if ch != ".":
                raise _error(errno.ENOENT)
            ch = text[pos]
            pos += 1
            if ch == "\0" or ch not in _DIGITS:
                raise _error(errno.ENOENT)
    else:
        raise _error(errno.ENOENT)

    bits = -1
    if ch == "/" and text[pos] != "\0" and text[pos] in _DIGITS and out > 0:
        ch = text[pos]
        pos += 1
        bits = 0
        while True:
            bits = bits * 10 + int(ch)
            ch = text[pos]
            pos += 1
            if ch == "\0" or ch not in _DIGITS:
                break
        if ch != "\0":
            raise _error(errno.ENOENT)
        if bits > 32:
            raise _error(errno.EMSGSIZE)

    if ch != "\0":
        raise _error(errno.ENOENT)
    if out == 0:
        raise _error(errno.ENOENT)

    if bits == -1:
        first = buf[0]
        if first >= 240:
            bits = 32
        elif first >= 224:
            bits = 4
        elif first >= 192:
            bits = 24
        elif first >= 128:
            bits = 16
        else:
            bits = 8
        bits = max(bits, out * 8)

    while bits > out * 8:
        if size <= 0:
            raise _error(errno.EMSGSIZE)
        size -= 1
        buf[out] = 0
        out += 1
    return bits, bytes(buf[:capacity])