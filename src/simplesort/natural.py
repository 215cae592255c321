"""Natural ("human") ordering for strings with embedded numbers.

``natural_key`` splits a string into alternating text and digit runs, so
``"item10"`` becomes ``["item", (2, "10"), ""]``. Because ``re.split`` with
a capturing group always puts text at even positions and digits at odd
ones, two keys only ever compare text with text and digit runs with digit
runs.

A digit run is keyed as ``(length, digits)`` with leading zeros removed,
which orders runs by value at any length without converting to ``int``.
``"01"`` and ``"1"`` are therefore equal; a stable sort leaves such ties in
their input order.
"""

from __future__ import annotations

import re

_DIGITS_RE = re.compile(r"([0-9]+)")

NaturalKey = list[str | tuple[int, str]]


def _digit_key(run: str) -> tuple[int, str]:
    stripped = run.lstrip("0")
    return len(stripped), stripped


def natural_key(value: str, *, case_sensitive: bool = False) -> NaturalKey:
    text = value if case_sensitive else value.lower()
    parts = _DIGITS_RE.split(text)
    return [
        _digit_key(part) if index % 2 else part for index, part in enumerate(parts)
    ]


def natural_compare(left: str, right: str, *, case_sensitive: bool = False) -> int:
    left_key = natural_key(left, case_sensitive=case_sensitive)
    right_key = natural_key(right, case_sensitive=case_sensitive)
    if left_key < right_key:
        return -1
    if left_key > right_key:
        return 1
    return 0
