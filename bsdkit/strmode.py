"""Render file mode bits as an ``ls -l`` style string."""

from __future__ import annotations

import stat

__all__ = ["strmode"]

_S_IFWHT = 0o160000

_TYPES = {
    stat.S_IFDIR: "d",
    stat.S_IFCHR: "c",
    stat.S_IFBLK: "b",
    stat.S_IFREG: "-",
    stat.S_IFLNK: "l",
    stat.S_IFSOCK: "s",
    stat.S_IFIFO: "p",
    _S_IFWHT: "w",
}


def _triplet(mode: int, read: int, write: int, execute: int, special: int,
             with_exec: str, without_exec: str) -> str:
    r = "r" if mode & read else "-"
    w = "w" if mode & write else "-"
    has_x = bool(mode & execute)
    if mode & special:
        x = with_exec if has_x else without_exec
    else:
        x = "x" if has_x else "-"
    return r + w + x


def strmode(mode: int) -> str:
    """Return the 11-character description of *mode*.

    The first character gives the file type, the next nine the permissions
    with set-id and sticky bits, and the last is a space.
    """
    kind = _TYPES.get(mode & 0o170000, "?")
    user = _triplet(mode, stat.S_IRUSR, stat.S_IWUSR, stat.S_IXUSR,
                    stat.S_ISUID, "s", "S")
    group = _triplet(mode, stat.S_IRGRP, stat.S_IWGRP, stat.S_IXGRP,
                     stat.S_ISGID, "s", "S")
    other = _triplet(mode, stat.S_IROTH, stat.S_IWOTH, stat.S_IXOTH,
                     stat.S_ISVTX, "t", "T")
    return kind + user + group + other + " "