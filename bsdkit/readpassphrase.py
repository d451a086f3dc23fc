"""Read a passphrase from the terminal with echo turned off."""

from __future__ import annotations

import enum
import errno
import os
import signal
import termios
import threading

__all__ = ["RPPFlags", "readpassphrase"]

_PATH_TTY = "/dev/tty"
_STDIN_FILENO = 0
_STDERR_FILENO = 2


class RPPFlags(enum.IntFlag):
    """Options for :func:`readpassphrase`."""

    ECHO_OFF = 0x00
    ECHO_ON = 0x01
    REQUIRE_TTY = 0x02
    FORCELOWER = 0x04
    FORCEUPPER = 0x08
    SEVENBIT = 0x10
    STDIN = 0x20


_CAUGHT = tuple(
    getattr(signal, name)
    for name in (
        "SIGALRM", "SIGHUP", "SIGINT", "SIGPIPE", "SIGQUIT",
        "SIGTERM", "SIGTSTP", "SIGTTIN", "SIGTTOU",
    )
    if hasattr(signal, name)
)
_STOP_SIGNALS = frozenset(
    getattr(signal, name)
    for name in ("SIGTSTP", "SIGTTIN", "SIGTTOU")
    if hasattr(signal, name)
)

_LFLAG = 3
_CC = 6


class _Interrupted(Exception):
    pass


class _SignalTrap:
    """Records signals; interrupts a pending read when one arrives."""

    def __init__(self) -> None:
        self.received: set[int] = set()
        self.reading = False

    def __call__(self, signum: int, frame: object) -> None:
        self.received.add(signum)
        if self.reading:
            raise _Interrupted


def _disable_status(fd: int, term: list) -> None:
    vstatus = getattr(termios, "VSTATUS", None)
    if vstatus is None:
        return
    try:
        vdisable = os.fpathconf(fd, "PC_VDISABLE")
    except (OSError, ValueError):
        return
    disabled = bytes([vdisable & 0xFF])
    if term[_CC][vstatus] != disabled:
        term[_CC][vstatus] = disabled


def _transform(ch: int, flags: int) -> int:
    if flags & RPPFlags.SEVENBIT:
        ch &= 0x7F
    if 0x41 <= ch <= 0x5A or 0x61 <= ch <= 0x7A:
        if flags & RPPFlags.FORCELOWER:
            ch = ord(chr(ch).lower())
        if flags & RPPFlags.FORCEUPPER:
            ch = ord(chr(ch).upper())
    return ch


def _read_once(prompt: str, bufsiz: int, flags: int) -> tuple[bytes | None, OSError | None, set[int]]:
    input_fd = output_fd = -1
    if not flags & RPPFlags.STDIN:
        try:
            input_fd = output_fd = os.open(_PATH_TTY, os.O_RDWR)
        except OSError:
            input_fd = -1
    if input_fd == -1:
        if flags & RPPFlags.REQUIRE_TTY:
            raise OSError(errno.ENOTTY, os.strerror(errno.ENOTTY))
        input_fd = _STDIN_FILENO
        output_fd = _STDERR_FILENO

    oterm = None
    echo_off = False
    changed = False
    if input_fd != _STDIN_FILENO:
        try:
            oterm = termios.tcgetattr(input_fd)
        except termios.error:
            oterm = None
    if oterm is not None:
        term = [list(item) if isinstance(item, list) else item for item in oterm]
        if not flags & RPPFlags.ECHO_ON:
            term[_LFLAG] &= ~(termios.ECHO | termios.ECHONL)
        _disable_status(input_fd, term)
        echo_off = not term[_LFLAG] & termios.ECHO
        changed = term != oterm
        try:
            termios.tcsetattr(input_fd, termios.TCSAFLUSH, term)
        except termios.error:
            pass

    trap = _SignalTrap()
    saved: dict[int, object] = {}
    if threading.current_thread() is threading.main_thread():
        for sig in _CAUGHT:
            saved[sig] = signal.signal(sig, trap)

    buf = bytearray()
    failure: OSError | None = None
    try:
        if not flags & RPPFlags.STDIN:
            os.write(output_fd, prompt.encode("utf-8", "surrogateescape"))
        trap.reading = True
        try:
            while True:
                try:
                    chunk = os.read(input_fd, 1)
                except OSError as exc:
                    failure = exc
                    break
                if not chunk or chunk in (b"\n", b"\r"):
                    break
                if len(buf) < bufsiz - 1:
                    buf.append(_transform(chunk[0], flags))
        except _Interrupted:
            failure = InterruptedError(errno.EINTR, os.strerror(errno.EINTR))
        finally:
            trap.reading = False
        if echo_off:
            os.write(output_fd, b"\n")
    finally:
        if changed and oterm is not None:
            try:
                termios.tcsetattr(input_fd, termios.TCSAFLUSH, oterm)
            except termios.error:
                pass
        for sig, handler in saved.items():
            signal.signal(sig, signal.SIG_DFL if handler is None else handler)
        if input_fd != _STDIN_FILENO:
            os.close(input_fd)

    return (None if failure else bytes(buf)), failure, trap.received


def readpassphrase(prompt: str, bufsiz: int = 1024,
                   flags: int = RPPFlags.ECHO_OFF) -> str:
    """Prompt for and read a line, returning at most ``bufsiz - 1`` bytes.

    Reads from ``/dev/tty`` when possible, otherwise (or with
    ``RPPFlags.STDIN``) from standard input.  Signals caught while reading
    are re-sent once the terminal has been restored.
    """
    flags = int(flags)
    if bufsiz <= 0:
        raise ValueError("bufsiz must be positive")
    while True:
        data, failure, received = _read_once(prompt, bufsiz, flags)
        restart = False
        for sig in sorted(received):
            os.kill(os.getpid(), sig)
            if sig in _STOP_SIGNALS:
                restart = True
        if restart:
            continue
        if failure is not None:
            raise failure
        return data.decode("utf-8", "surrogateescape")