"""Stable natural merge sort driven by a three-way comparison function."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, TypeVar

__all__ = ["mergesort"]

T = TypeVar("T")

_SMALL = 5


def _natural_cmp(a: Any, b: Any) -> int:
    if a < b:
        return -1
    if b < a:
        return 1
    return 0


def _insertion_sort(seq: list[T], cmp: Callable[[T, T], int]) -> None:
    for i in range(1, len(seq)):
        item = seq[i]
        j = i
        while j > 0 and cmp(seq[j - 1], item) > 0:
            seq[j] = seq[j - 1]
            j -= 1
        seq[j] = item


def _runs(seq: list[T], cmp: Callable[[T, T], int]) -> list[list[T]]:
    """Split *seq* into ascending runs; strictly descending runs are reversed."""
    runs: list[list[T]] = []
    n = len(seq)
    start = 0
    while start < n:
        end = start + 1
        if end < n and cmp(seq[start], seq[end]) > 0:
            while end < n and cmp(seq[end - 1], seq[end]) > 0:
                end += 1
            run = seq[start:end]
            run.reverse()
        else:
            while end < n and cmp(seq[end - 1], seq[end]) <= 0:
                end += 1
            run = seq[start:end]
        runs.append(run)
        start = end
    return runs


def _merge(left: list[T], right: list[T], cmp: Callable[[T, T], int]) -> list[T]:
    merged: list[T] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if cmp(left[i], right[j]) <= 0:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def mergesort(
    items: Iterable[T], cmp: Callable[[T, T], int] | None = None
) -> list[T]:
    """Return the items sorted stably.

    *cmp* returns a negative number, zero or a positive number as its first
    argument sorts before, equal to or after its second; by default the
    items' own ordering is used.  Equal items keep their original order.
    """
    compare = cmp if cmp is not None else _natural_cmp
    seq = list(items)
    if len(seq) < 2:
        return seq
    if len(seq) <= _SMALL:
        _insertion_sort(seq, compare)
        return seq
    runs = _runs(seq, compare)
    while len(runs) > 1:
        paired = [
            _merge(runs[k], runs[k + 1], compare)
            for k in range(0, len(runs) - 1, 2)
        ]
        if len(runs) % 2:
            paired.append(runs[-1])
        runs = paired
    return runs[0]