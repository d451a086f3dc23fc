"""Exclusive, locked PID files for daemons."""

from __future__ import annotations

import errno
import fcntl
import os
import re
import time

from bsdkit.progname import getprogname

__all__ = ["PidFile", "PidFileExistsError", "pidfile_open"]

_READ_MAX = 15
_READ_TRIES = 20
_READ_DELAY = 0.005
_PID_RE = re.compile(rb"[ \t\n\v\f\r]*[+-]?[0-9]+")


def _error(code: int, path: str | None = None) -> OSError:
    if path is None:
        return OSError(code, os.strerror(code))
    return OSError(code, os.strerror(code), path)


class PidFileExistsError(FileExistsError):
    """Another process holds the lock on the PID file.

    ``pid`` is the process id read from the file, or -1 when the file
    stayed empty.
    """

    def __init__(self, path: str, pid: int) -> None:
        super().__init__(errno.EEXIST, os.strerror(errno.EEXIST), path)
        self.pid = pid


def _flopen(path: str, flags: int, mode: int) -> int:
    """Open *path* and take an exclusive lock, truncating after locking."""
    truncate = flags & os.O_TRUNC
    flags &= ~os.O_TRUNC
    operation = fcntl.LOCK_EX
    if flags & os.O_NONBLOCK:
        operation |= fcntl.LOCK_NB
    while True:
        fd = os.open(path, flags, mode)
        try:
            fcntl.flock(fd, operation)
            try:
                on_disk = os.stat(path)
            except FileNotFoundError:
                on_disk = None
            held = os.fstat(fd)
            if on_disk is None or (on_disk.st_dev, on_disk.st_ino) != (
                held.st_dev,
                held.st_ino,
            ):
                os.close(fd)
                continue
            if truncate:
                os.ftruncate(fd, 0)
        except BaseException:
            os.close(fd)
            raise
        return fd


def _read_pid(path: str) -> int | None:
    """Read the PID stored in *path*; ``None`` when the file is empty."""
    fd = os.open(path, os.O_RDONLY)
    try:
        data = os.read(fd, _READ_MAX)
    finally:
        os.close(fd)
    if not data:
        return None
    if _PID_RE.fullmatch(data) is None:
        raise _error(errno.EINVAL, path)
    return int(data)


class PidFile:
    """An open, locked PID file, as returned by :func:`pidfile_open`."""

    def __init__(self, path: str, fd: int, dev: int, ino: int) -> None:
        self.path = path
        self._fd = fd
        self._dev = dev
        self._ino = ino

    def _verify(self) -> None:
        if self._fd == -1:
            raise _error(errno.EINVAL)
        st = os.fstat(self._fd)
        if (st.st_dev, st.st_ino) != (self._dev, self._ino):
            raise _error(errno.EINVAL)

    def write(self) -> None:
        """Store the current process id, replacing earlier contents.

        On a write failure the file is removed before the error is raised.
        """
        self._verify()
        pidstr = str(os.getpid()).encode("ascii")
        try:
            os.ftruncate(self._fd, 0)
            if os.pwrite(self._fd, pidstr, 0) != len(pidstr):
                raise _error(errno.EIO, self.path)
        except OSError:
            try:
                self._remove()
            except OSError:
                pass
            raise

    def close(self) -> None:
        """Close the file and release the lock, leaving the file in place."""
        self._verify()
        fd, self._fd = self._fd, -1
        os.close(fd)

    def _remove(self) -> None:
        self._verify()
        error: OSError | None = None
        try:
            os.unlink(self.path)
        except OSError as exc:
            error = exc
        fd, self._fd = self._fd, -1
        try:
            os.close(fd)
        except OSError as exc:
            if error is None:
                error = exc
        if error is not None:
            raise error

    def remove(self) -> None:
        """Delete the file and close it."""
        self._remove()

    def fileno(self) -> int:
        """Return the descriptor of the open file."""
        if self._fd == -1:
            raise _error(errno.EINVAL)
        return self._fd

    def __enter__(self) -> PidFile:
        return self

    def __exit__(self, *exc_info: object) -> None:
        if self._fd != -1:
            self.remove()

    def __repr__(self) -> str:
        return f"PidFile({self.path!r}, fd={self._fd})"


def pidfile_open(path: str | os.PathLike[str] | None = None,
                 mode: int = 0o600) -> PidFile:
    """Create and lock a PID file.

    *path* defaults to ``/var/run/<program name>.pid``.  Raises
    :class:`PidFileExistsError` when another holder has the lock.
    """
    if path is None:
        path = f"/var/run/{getprogname()}.pid"
    path = os.fspath(path)
    flags = os.O_WRONLY | os.O_CREAT | os.O_TRUNC | os.O_NONBLOCK
    try:
        fd = _flopen(path, flags, mode)
    except BlockingIOError:
        pid: int | None = None
        for attempt in range(_READ_TRIES):
            pid = _read_pid(path)
            if pid is not None or attempt == _READ_TRIES - 1:
                break
            time.sleep(_READ_DELAY)
        raise PidFileExistsError(path, -1 if pid is None else pid) from None

    try:
        st = os.fstat(fd)
    except OSError:
        try:
            os.unlink(path)
        finally:
            os.close(fd)
        raise
    return PidFile(path, fd, st.st_dev, st.st_ino)