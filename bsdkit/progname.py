"""Short name of the running program."""

from __future__ import annotations

import os
import sys

__all__ = ["getprogname", "setprogname"]

_WINDOWS = os.name == "nt"
_SEPARATORS = ("/", "\\") if _WINDOWS else ("/",)

_progname: str | None = None


def _basename(path: str) -> str:
    cut = max(path.rfind(sep) for sep in _SEPARATORS)
    return path[cut + 1 :]


def getprogname() -> str | None:
    """Return the program name, taken from ``sys.argv[0]`` unless set."""
    global _progname
    if _progname is None:
        argv0 = sys.argv[0] if sys.argv else ""
        if argv0:
            name = _basename(argv0)
            if _WINDOWS:
                name = os.path.splitext(name)[0]
            _progname = name
    return _progname


def setprogname(progname: str) -> None:
    """Set the program name to the last path component of *progname*."""
    global _progname
    _progname = _basename(progname)