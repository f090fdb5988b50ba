"""
fsorder.natural

Natural ordering for path strings: embedded integer runs compare by value and
ASCII letters compare case-insensitively, so "frame2.png" sorts before
"frame10.png".

The comparison walks both operands with integer cursors. Digit runs are
compared exactly (leading zeros stripped, then by length, then digit by
digit), so arbitrarily long runs never overflow.

Works on ``str`` and ``bytes`` alike; ``os.PathLike`` inputs are converted
with ``os.fspath``.
"""

from __future__ import annotations

import os
from functools import cmp_to_key
from typing import AnyStr, Iterable, List, Sequence, Union

PathString = Union[str, bytes]

_ZERO = ord("0")
_NINE = ord("9")
_LOWER_A = ord("a")
_LOWER_Z = ord("z")
_CASE_SHIFT = ord("a") - ord("A")


def _ordinals(path: PathString) -> Sequence[int]:
    if isinstance(path, bytes):
        return path
    return [ord(ch) for ch in path]


def _coerce_pair(a: object, b: object) -> tuple[Sequence[int], Sequence[int]]:
    a = os.fspath(a)  # type: ignore[arg-type]
    b = os.fspath(b)  # type: ignore[arg-type]
    if isinstance(a, bytes) != isinstance(b, bytes):
        raise TypeError("Can't compare str and bytes paths")
    return _ordinals(a), _ordinals(b)


def _is_digit(code: int) -> bool:
    return _ZERO <= code <= _NINE


def _upper(code: int) -> int:
    if _LOWER_A <= code <= _LOWER_Z:
        return code - _CASE_SHIFT
    return code


def _digit_run_end(codes: Sequence[int], start: int) -> int:
    end = start
    size = len(codes)
    while end < size and _is_digit(codes[end]):
        end += 1
    return end


def _compare_digit_runs(
    a: Sequence[int], a_start: int, a_end: int,
    b: Sequence[int], b_start: int, b_end: int,
) -> int:
    """Compare two digit runs by integer value; returns -1, 0 or 1."""
    while a_start < a_end - 1 and a[a_start] == _ZERO:
        a_start += 1
    while b_start < b_end - 1 and b[b_start] == _ZERO:
        b_start += 1

    a_len = a_end - a_start
    b_len = b_end - b_start
    if a_len != b_len:
        return -1 if a_len < b_len else 1

    for offset in range(a_len):
        da = a[a_start + offset]
        db = b[b_start + offset]
        if da != db:
            return -1 if da < db else 1
    return 0


def _compare_codes(a: Sequence[int], b: Sequence[int]) -> bool:
    i = 0
    j = 0
    a_len = len(a)
    b_len = len(b)

    while True:
        if i >= a_len or j >= b_len:
            return i >= a_len and j < b_len

        ca = a[i]
        cb = b[j]
        a_digit = _is_digit(ca)
        b_digit = _is_digit(cb)

        if a_digit and not b_digit:
            return True
        if b_digit and not a_digit:
            return False

        if not a_digit:
            ua = _upper(ca)
            ub = _upper(cb)
            if ua != ub:
                return ua < ub
            i += 1
            j += 1
            continue

        a_end = _digit_run_end(a, i)
        b_end = _digit_run_end(b, j)
        order = _compare_digit_runs(a, i, a_end, b, j, b_end)
        if order:
            return order < 0
        i = a_end
        j = b_end


def compare_path_natural(a: PathString, b: PathString) -> bool:
    """
    Return True when ``a`` sorts strictly before ``b`` in natural order.

    Rules, applied from the front of both strings:
     - an exhausted string sorts before a non-exhausted one
     - a digit sorts before a non-digit at the same position
     - non-digits compare by their ASCII-uppercased ordinal
     - digit runs compare by integer value; equal runs continue after the run

    Raises:
        TypeError: if one operand is ``str`` and the other ``bytes``.
    """
    codes_a, codes_b = _coerce_pair(a, b)
    return _compare_codes(codes_a, codes_b)


def natural_compare(a: PathString, b: PathString) -> int:
    """Three-way natural comparison: -1, 0 or 1."""
    codes_a, codes_b = _coerce_pair(a, b)
    if _compare_codes(codes_a, codes_b):
        return -1
    if _compare_codes(codes_b, codes_a):
        return 1
    return 0


natural_sort_key = cmp_to_key(natural_compare)


def natural_sort(items: Iterable[AnyStr]) -> List[AnyStr]:
    """Sort path strings in natural order.

    Example:
        >>> natural_sort(["img10.jpg", "img2.jpg", "IMG1.jpg"])
        ['IMG1.jpg', 'img2.jpg', 'img10.jpg']
    """
    return sorted(items, key=natural_sort_key)
