# bsdkit

Small, well-specified utility routines in the BSD tradition, written in plain
Python with nothing beyond the standard library.

## What is inside

| Module | What it does |
| --- | --- |
| `bsdkit.strl` | `strlcpy`, `strlcat` and `strnstr`: size-bounded string copy, append and search |
| `bsdkit.strtonum` | `strtoi`, `strtou` and `strtonum`: integer parsing with range checks (`Status`, `ParseResult`, `StrtonumError`) |
| `bsdkit.timeconv` | fixed-width time conversions such as `time_to_time32` and `time32_to_time` |
| `bsdkit.progname` | `getprogname` and `setprogname` |
| `bsdkit.humanize` | `humanize_number` with `HumanizeFlags` and the scale constants `HN_AUTOSCALE` and `HN_GETSCALE` |
| `bsdkit.inet` | `inet_net_pton` for IPv4 network numbers with classful or CIDR widths |
| `bsdkit.md5` | `MD5Context`, `md5_data`, `md5_file` and `md5_file_chunk` |
| `bsdkit.strmode` | `strmode`: a mode number as an `ls -l` style string |
| `bsdkit.setmode` | `setmode` and `getmode`: symbolic or octal `chmod` specifications (`ModeChange`, `BitCommand`) |
| `bsdkit.pwcache` | cached `user_from_uid`, `group_from_gid`, `uid_from_user`, `gid_from_group` |
| `bsdkit.unvis` | the `Unvis` decoder and `strunvis`, `strnunvis`, `strunvisx`, `strnunvisx` (`UnvisFlags`, `UnvisResult`) |
| `bsdkit.stringlist` | `StringList` with `add`, `find` and `delete` |
| `bsdkit.mergesort` | `mergesort`: a stable natural merge sort with a three-way comparison function |
| `bsdkit.radixsort` | `radixsort` and the stable `sradixsort` for byte strings |
| `bsdkit.pidfile` | `pidfile_open` returning a locked `PidFile`; `PidFileExistsError` when another process holds it |
| `bsdkit.readpassphrase` | `readpassphrase` with `RPPFlags`, reading from the terminal with echo turned off |

Errors are reported by raising exceptions (`ValueError`, `KeyError`,
`OSError` and its subclasses) rather than through return codes.

`bsdkit.pwcache`, `bsdkit.pidfile` and `bsdkit.readpassphrase` rely on the
POSIX-only standard modules `pwd`/`grp`, `fcntl` and `termios`.

## Installing

```
pip install bsdkit
```

## A few examples

```python
from bsdkit.strl import strlcpy
from bsdkit.strtonum import strtonum, StrtonumError
from bsdkit.humanize import humanize_number, HumanizeFlags, HN_AUTOSCALE
from bsdkit.strmode import strmode
from bsdkit.md5 import md5_data

copied, needed = strlcpy("hello world", 6)      # ("hello", 11)

strtonum("42", 0, 100)                           # 42
try:
    strtonum("1000", 0, 100)
except StrtonumError as exc:
    print(exc.reason)                            # too large

humanize_number(7, 1536 * 1024, "B", HN_AUTOSCALE, HumanizeFlags.DECIMAL)
                                                 # "1.5 MB"

strmode(0o100644)                                # "-rw-r--r-- "

md5_data(b"abc")                                 # "900150983cd24fb0d6963f7d28e17f72"
```

Applying a symbolic file mode (the second argument is the umask used by
clauses that name no class; it defaults to the process umask):

```python
from bsdkit.setmode import setmode

change = setmode("u+x,go-w", 0o022)
change.apply(0o644)                              # 0o744
```

Holding a pid file for the life of a daemon:

```python
from bsdkit.pidfile import pidfile_open, PidFileExistsError

try:
    pidfh = pidfile_open("/tmp/mydaemon.pid", 0o600)
except PidFileExistsError as exc:
    raise SystemExit(f"already running as pid {exc.pid}")
pidfh.write()
...
pidfh.remove()
```

`PidFile` is also a context manager that removes the file on exit.

## What it does not do

bsdkit is a library only: it installs no command-line programs.

## Running the tests

```
pip install -e .[test]
pytest
```