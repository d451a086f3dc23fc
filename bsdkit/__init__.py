"""BSD-style utility routines for strings, numbers, file modes, vis decoding, sorting, pid files and passphrases."""

__version__ = "0.1.0"