import os
import stat

import pytest

from bsdkit import setmode as sm
from bsdkit.setmode import BitCommand, getmode, setmode


def test_octal_spec_sets_exact_bits():
    change = setmode("755", 0)
    assert change.apply(0) == int("755", 8)
    assert change.apply(0o7777) == int("755", 8)


def test_octal_spec_commands():
    change = setmode("644", 0)
    assert change.commands == (
        BitCommand("-", sm.STANDARD_BITS | sm.S_ISTXT),
        BitCommand("+", int("644", 8)),
    )


def test_octal_spec_keeps_file_type():
    result = setmode("600", 0).apply(stat.S_IFREG | 0o777)
    assert stat.S_IFMT(result) == stat.S_IFREG
    assert stat.S_IMODE(result) == int("600", 8)


@pytest.mark.parametrize("spec", ["", "8", "99", "17777", "u*x", "u+x,", "u+x,g", "q"])
def test_invalid_specs(spec):
    with pytest.raises(ValueError):
        setmode(spec, 0)


def test_user_add_execute():
    result = setmode("u+x", 0o022).apply(0o644)
    assert result & stat.S_IXUSR
    assert result & ~stat.S_IXUSR == 0o644


def test_group_other_remove_write():
    result = setmode("go-w", 0).apply(0o666)
    assert result & (stat.S_IWGRP | stat.S_IWOTH) == 0
    assert result & stat.S_IWUSR


def test_no_class_honours_mask():
    result = setmode("+w", 0o022).apply(0o444)
    assert result & stat.S_IWUSR
    assert result & (stat.S_IWGRP | stat.S_IWOTH) == 0


def test_default_mask_is_process_umask():
    old = os.umask(0o077)
    try:
        change = setmode("+w")
    finally:
        os.umask(old)
    assert change.apply(0) == stat.S_IWUSR


def test_symbolic_equals_numeric():
    symbolic = setmode("u=rwx,g=rx,o=rx", 0)
    numeric = setmode("755", 0)
    for mode in (0, 0o777, 0o4644, 0o2600):
        assert symbolic.apply(mode) == numeric.apply(mode)


def test_all_equals_read():
    assert setmode("a=r", 0).apply(0o777) == setmode("444", 0).apply(0o777)


def test_copy_group_to_user():
    result = setmode("u=g", 0).apply(0o654)
    assert (result >> 6) & 7 == (0o654 >> 3) & 7
    assert result & 0o077 == 0o654 & 0o077


def test_conditional_execute_on_plain_file():
    assert setmode("+X", 0).apply(0o644) == 0o644


def test_conditional_execute_on_executable_file():
    result = setmode("+X", 0).apply(0o744)
    assert result & 0o111 == 0o111


def test_conditional_execute_on_directory():
    result = setmode("+X", 0).apply(stat.S_IFDIR | 0o644)
    assert result & 0o111 == 0o111
    assert stat.S_ISDIR(result)


def test_sticky_for_other_only_is_ignored():
    assert setmode("o+t", 0).apply(0o644) == 0o644


def test_sticky_without_class():
    assert setmode("+t", 0).apply(0o755) == 0o1755


def test_setuid_for_user():
    assert setmode("u+s", 0).apply(0o755) == 0o4755


def test_setuid_for_other_only_is_ignored():
    assert setmode("o+s", 0).apply(0o755) == 0o755


def test_compress_merges_additions():
    change = setmode("u+r,u+w", 0)
    assert change.commands == (
        BitCommand("+", stat.S_IRUSR | stat.S_IWUSR),
    )


def test_compress_later_clear_wins():
    change = setmode("u+r,u-r", 0)
    assert change.commands == (BitCommand("-", stat.S_IRUSR),)
    assert change.apply(0o777) & stat.S_IRUSR == 0


def test_apply_is_idempotent():
    change = setmode("go-w,u+x", 0)
    once = change.apply(0o666)
    assert change.apply(once) == once


def test_getmode_matches_apply():
    change = setmode("a+rx", 0)
    for mode in (0, 0o600, 0o777):
        assert getmode(change, mode) == change.apply(mode)