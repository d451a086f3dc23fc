import sys

import pytest

from bsdkit import progname
from bsdkit.progname import getprogname, setprogname


@pytest.fixture(autouse=True)
def _restore_name(monkeypatch):
    monkeypatch.setattr(progname, "_progname", progname._progname)
    yield


def test_setprogname_strips_directories():
    setprogname("/usr/bin/foo")
    assert getprogname() == "foo"


def test_setprogname_plain_name():
    setprogname("bar")
    assert getprogname() == "bar"


def test_setprogname_trailing_separator():
    setprogname("dir/")
    assert getprogname() == ""


def test_setprogname_relative_path():
    setprogname("./tools/baz")
    assert getprogname() == "baz"


def test_getprogname_defaults_to_argv0(monkeypatch):
    monkeypatch.setattr(progname, "_progname", None)
    monkeypatch.setattr(sys, "argv", ["/opt/app/runner"])
    assert getprogname() == "runner"


def test_getprogname_is_stable(monkeypatch):
    monkeypatch.setattr(progname, "_progname", None)
    monkeypatch.setattr(sys, "argv", ["/opt/app/first"])
    first = getprogname()
    monkeypatch.setattr(sys, "argv", ["/opt/app/second"])
    assert getprogname() == first


def test_getprogname_without_argv(monkeypatch):
    monkeypatch.setattr(progname, "_progname", None)
    monkeypatch.setattr(sys, "argv", [])
    assert getprogname() is None


def test_setprogname_overrides_default(monkeypatch):
    monkeypatch.setattr(sys, "argv", ["/opt/app/runner"])
    setprogname("/x/other")
    assert getprogname() == "other"