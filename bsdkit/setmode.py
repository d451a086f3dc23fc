"""Compile symbolic or octal file mode specifications and apply them."""

from __future__ import annotations

import os
import stat
from dataclasses import dataclass

__all__ = [
    "S_ISTXT",
    "STANDARD_BITS",
    "CMD2_CLR",
    "CMD2_SET",
    "CMD2_GBITS",
    "CMD2_OBITS",
    "CMD2_UBITS",
    "BitCommand",
    "ModeChange",
    "setmode",
    "getmode",
]

S_ISTXT = stat.S_ISVTX
STANDARD_BITS = (
    stat.S_ISUID | stat.S_ISGID | stat.S_IRWXU | stat.S_IRWXG | stat.S_IRWXO
)

CMD2_CLR = 0x01
CMD2_SET = 0x02
CMD2_GBITS = 0x04
CMD2_OBITS = 0x08
CMD2_UBITS = 0x10

_MODE_MASK = 0xFFFFFFFF
_OCTAL = "01234567"
_WHO = {
    "a": STANDARD_BITS,
    "u": stat.S_ISUID | stat.S_IRWXU,
    "g": stat.S_ISGID | stat.S_IRWXG,
    "o": stat.S_IRWXO,
}
_ANY_EXEC = stat.S_IFDIR | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH


@dataclass(frozen=True)
class BitCommand:
    """One step of a mode change.

    ``cmd`` is ``'+'`` (set bits), ``'-'`` (clear bits), ``'X'`` (set bits
    if the file is a directory or already executable) or ``'u'``, ``'g'``,
    ``'o'`` (copy that class's permissions, as directed by ``cmd2``).
    """

    cmd: str
    bits: int
    cmd2: int = 0


@dataclass(frozen=True)
class ModeChange:
    """A compiled mode specification, as returned by :func:`setmode`."""

    commands: tuple[BitCommand, ...]

    def apply(self, omode: int) -> int:
        """Return *omode* changed as the specification describes."""
        omode &= _MODE_MASK
        newmode = omode
        for command in self.commands:
            op = command.cmd
            if op in ("u", "g", "o"):
                if op == "u":
                    value = (newmode & stat.S_IRWXU) >> 6
                elif op == "g":
                    value = (newmode & stat.S_IRWXG) >> 3
                else:
                    value = newmode & stat.S_IRWXO
                cmd2 = command.cmd2
                bits = command.bits
                if cmd2 & CMD2_CLR:
                    clrval = stat.S_IRWXO if cmd2 & CMD2_SET else value
                    if cmd2 & CMD2_UBITS:
                        newmode &= ~((clrval << 6) & bits)
                    if cmd2 & CMD2_GBITS:
                        newmode &= ~((clrval << 3) & bits)
                    if cmd2 & CMD2_OBITS:
                        newmode &= ~(clrval & bits)
                if cmd2 & CMD2_SET:
                    if cmd2 & CMD2_UBITS:
                        newmode |= (value << 6) & bits
                    if cmd2 & CMD2_GBITS:
                        newmode |= (value << 3) & bits
                    if cmd2 & CMD2_OBITS:
                        newmode |= value & bits
            elif op == "+":
                newmode |= command.bits
            elif op == "-":
                newmode &= ~command.bits
            elif op == "X":
                if omode & _ANY_EXEC:
                    newmode |= command.bits
            else:
                break
        return newmode & _MODE_MASK


def _addcmd(op: str, who: int, perm: int, mask: int) -> list[BitCommand]:
    """Commands for a '+', '-', '=' or 'X' operation on *perm*."""
    if op == "=":
        return [
            BitCommand("-", who or STANDARD_BITS),
            BitCommand("+", (who or mask) & perm),
        ]
    return [BitCommand(op, (who or mask) & perm)]


def _addcopy(source: str, who: int, op: str, mask: int) -> BitCommand:
    """Command copying the *source* class's bits with operation *op*."""
    if who:
        cmd2 = (
            (CMD2_UBITS if who & stat.S_IRUSR else 0)
            | (CMD2_GBITS if who & stat.S_IRGRP else 0)
            | (CMD2_OBITS if who & stat.S_IROTH else 0)
        )
        bits = _MODE_MASK
    else:
        cmd2 = CMD2_UBITS | CMD2_GBITS | CMD2_OBITS
        bits = mask
    if op == "+":
        cmd2 |= CMD2_SET
    elif op == "-":
        cmd2 |= CMD2_CLR
    else:
        cmd2 |= CMD2_SET | CMD2_CLR
    return BitCommand(source, bits, cmd2)


def _compress(commands: list[BitCommand]) -> tuple[BitCommand, ...]:
    """Merge each run of '+', '-' and 'X' commands into at most three."""
    out: list[BitCommand] = []
    idx = 0
    total = len(commands)
    while idx < total:
        if commands[idx].cmd not in ("+", "-", "X"):
            out.append(commands[idx])
            idx += 1
            continue
        setbits = clrbits = xbits = 0
        while idx < total and commands[idx].cmd in ("+", "-", "X"):
            command = commands[idx]
            if command.cmd == "-":
                clrbits |= command.bits
                setbits &= ~command.bits
                xbits &= ~command.bits
            elif command.cmd == "+":
                setbits |= command.bits
                clrbits &= ~command.bits
                xbits &= ~command.bits
            else:
                xbits |= command.bits & ~setbits
            idx += 1
        if clrbits:
            out.append(BitCommand("-", clrbits))
        if setbits:
            out.append(BitCommand("+", setbits))
        if xbits:
            out.append(BitCommand("X", xbits))
    return tuple(out)


def _current_umask() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return mask


def setmode(spec: str, mask: int | None = None) -> ModeChange:
    """Compile a mode specification such as ``"755"`` or ``"u+x,go-w"``.

    *mask* is the file-creation mask honoured by clauses that name no
    class; it defaults to the process umask.  Raises :class:`ValueError`
    for a malformed specification.
    """
    if not spec:
        raise ValueError("empty mode specification")
    umask = _current_umask() if mask is None else mask
    keep = ~umask & _MODE_MASK

    if spec[0].isdigit() and spec[0].isascii():
        text = spec.partition("\0")[0]
        if any(ch not in _OCTAL for ch in text):
            raise ValueError(f"invalid octal mode: {spec!r}")
        value = int(text, 8)
        if value & ~(STANDARD_BITS | S_ISTXT):
            raise ValueError(f"invalid mode bits: {spec!r}")
        return ModeChange(
            tuple(_addcmd("=", STANDARD_BITS | S_ISTXT, value, keep))
        )

    length = len(spec)

    def at(index: int) -> str:
        return spec[index] if index < length else "\0"

    commands: list[BitCommand] = []
    equalopdone = False
    i = 0
    finished = False
    while not finished:
        who = 0
        while at(i) in _WHO:
            who |= _WHO[at(i)]
            i += 1
        while True:
            op = at(i)
            i += 1
            if op not in ("+", "-", "="):
                raise ValueError(f"invalid mode specification: {spec!r}")
            if op == "=":
                equalopdone = False
            who &= ~S_ISTXT
            perm = 0
            permxbits = 0
            while True:
                ch = at(i)
                if ch == "r":
                    perm |= stat.S_IRUSR | stat.S_IRGRP | stat.S_IROTH
                elif ch == "s":
                    if who == 0 or who & ~stat.S_IRWXO:
                        perm |= stat.S_ISUID | stat.S_ISGID
                elif ch == "t":
                    if who == 0 or who & ~stat.S_IRWXO:
                        who |= S_ISTXT
                        perm |= S_ISTXT
                elif ch == "w":
                    perm |= stat.S_IWUSR | stat.S_IWGRP | stat.S_IWOTH
                elif ch == "X":
                    permxbits = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH
                elif ch == "x":
                    perm |= stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH
                elif ch in ("u", "g", "o"):
                    if perm:
                        commands.extend(_addcmd(op, who, perm, keep))
                        perm = 0
                    if op == "=":
                        equalopdone = True
                    if op == "+" and permxbits:
                        commands.extend(_addcmd("X", who, permxbits, keep))
                        permxbits = 0
                    commands.append(_addcopy(ch, who, op, keep))
                else:
                    if perm or (op == "=" and not equalopdone):
                        if op == "=":
                            equalopdone = True
                        commands.extend(_addcmd(op, who, perm, keep))
                        perm = 0
                    if permxbits:
                        commands.extend(_addcmd("X", who, permxbits, keep))
                        permxbits = 0
                    break
                i += 1
            if at(i) == "\0":
                finished = True
                break
            if at(i) != ",":
                continue
            i += 1
            break
    return ModeChange(_compress(commands))


def getmode(change: ModeChange, omode: int) -> int:
    """Apply a compiled *change* to *omode* and return the new mode."""
    return change.apply(omode)