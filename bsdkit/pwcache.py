"""Cached lookups between user and group names and their numeric ids.

Both hits and misses are remembered, so repeated lookups do not go back to
the password and group databases.
"""

from __future__ import annotations

import grp
import pwd

__all__ = ["user_from_uid", "group_from_gid", "uid_from_user", "gid_from_group"]

_NAME_MAX = 31

_uid_names: dict[int, tuple[str, bool]] = {}
_gid_names: dict[int, tuple[str, bool]] = {}
_user_ids: dict[str, int | None] = {}
_group_ids: dict[str, int | None] = {}

_MISS = (KeyError, OverflowError, ValueError)


def _check_id(value: int) -> None:
    if value < 0:
        raise ValueError("ids must not be negative")


def user_from_uid(uid: int, noname: bool = False) -> str | None:
    """Return the user name for *uid*.

    When no user has that id, the id in decimal is returned, or ``None``
    if *noname* is true.
    """
    _check_id(uid)
    entry = _uid_names.get(uid)
    if entry is None:
        try:
            entry = (pwd.getpwuid(uid).pw_name[:_NAME_MAX], True)
        except _MISS:
            entry = (str(uid), False)
        _uid_names[uid] = entry
    name, valid = entry
    if noname and not valid:
        return None
    return name


def group_from_gid(gid: int, noname: bool = False) -> str | None:
    """Return the group name for *gid*.

    When no group has that id, the id in decimal is returned, or ``None``
    if *noname* is true.
    """
    _check_id(gid)
    entry = _gid_names.get(gid)
    if entry is None:
        try:
            entry = (grp.getgrgid(gid).gr_name[:_NAME_MAX], True)
        except _MISS:
            entry = (str(gid), False)
        _gid_names[gid] = entry
    name, valid = entry
    if noname and not valid:
        return None
    return name


def uid_from_user(name: str) -> int:
    """Return the user id for *name*.

    Raises :class:`ValueError` for an empty name and :class:`KeyError`
    when no such user exists.
    """
    if not name:
        raise ValueError("empty user name")
    if name in _user_ids:
        uid = _user_ids[name]
    else:
        try:
            uid = pwd.getpwnam(name).pw_uid
        except _MISS:
            uid = None
        _user_ids[name] = uid
    if uid is None:
        raise KeyError(name)
    return uid


def gid_from_group(name: str) -> int:
    """Return the group id for *name*.

    Raises :class:`ValueError` for an empty name and :class:`KeyError`
    when no such group exists.
    """
    if not name:
        raise ValueError("empty group name")
    if name in _group_ids:
        gid = _group_ids[name]
    else:
        try:
            gid = grp.getgrnam(name).gr_gid
        except _MISS:
            gid = None
        _group_ids[name] = gid
    if gid is None:
        raise KeyError(name)
    return gid