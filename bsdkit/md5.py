"""MD5 digests of data and files, as lowercase hex strings."""

from __future__ import annotations

import hashlib
import os

__all__ = ["MD5Context", "md5_data", "md5_file", "md5_file_chunk"]

_CHUNK = 64 * 1024


def _as_bytes(data: bytes | bytearray | memoryview | str) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


class MD5Context:
    """An incremental MD5 computation."""

    digest_size = 16
    block_size = 64

    def __init__(self, data: bytes | str = b"") -> None:
        self._hash = hashlib.md5(usedforsecurity=False)
        if data:
            self.update(data)

    def update(self, data: bytes | str) -> None:
        """Feed more data into the digest."""
        self._hash.update(_as_bytes(data))

    def digest(self) -> bytes:
        """Return the 16-byte digest of the data fed so far."""
        return self._hash.digest()

    def hexdigest(self) -> str:
        """Return the digest as 32 lowercase hex characters."""
        return self._hash.hexdigest()


def md5_data(data: bytes | str) -> str:
    """Return the hex MD5 digest of *data*."""
    return MD5Context(data).hexdigest()


def md5_file(filename: str | os.PathLike[str]) -> str:
    """Return the hex MD5 digest of a whole file."""
    return md5_file_chunk(filename, 0, 0)


def md5_file_chunk(
    filename: str | os.PathLike[str], offset: int, length: int
) -> str:
    """Return the hex MD5 digest of *length* bytes from *offset*.

    A *length* of zero, or one past the end of the file, hashes up to the
    end of the file.
    """
    if offset < 0 or length < 0:
        raise ValueError("offset and length must not be negative")
    context = MD5Context()
    with open(filename, "rb") as stream:
        stream.seek(offset)
        remaining = length if length > 0 else None
        while remaining is None or remaining > 0:
            want = _CHUNK if remaining is None else min(_CHUNK, remaining)
            block = stream.read(want)
            if not block:
                break
            context.update(block)
            if remaining is not None:
                remaining -= len(block)
    return context.hexdigest()