"""Exact comparison of number literals.

Literals are kept as canonical decimal text. `parse_number` turns the text into
either a Python int (when it is an integer literal within signed 64-bit range)
or an exact Fraction. Comparing ints with Fractions is exact in Python, so no
precision is lost on either path.
"""

from __future__ import annotations

import logging
import re
from decimal import Decimal, InvalidOperation
from fractions import Fraction
from typing import Union

import numpy as np

from regula.errors import RegulaIllegalNumber

logger = logging.getLogger(__name__)

_INT64 = np.iinfo(np.int64)
INT64_MIN: int = int(_INT64.min)
INT64_MAX: int = int(_INT64.max)
# len(str(INT64_MAX)); longer digit runs cannot fit
_INT64_DIGITS = 19

# ASCII digits only; \d would also match other Unicode digits
INT_RE = re.compile(r"[+-]?([0-9]+)")
NUMBER_RE = re.compile(r"-?(?:0|[1-9][0-9]*)(?:\.[0-9]+)?(?:[eE][+-]?[0-9]+)?")

ZERO = Fraction(0)

ParsedNumber = Union[int, Fraction]


def parse_int64(text: str) -> int | None:
    """The literal as an int if it is an integer literal that fits in int64."""
    m = INT_RE.fullmatch(text)
    if m is None:
        return None
    digits = m.group(1).lstrip("0") or "0"
    if len(digits) > _INT64_DIGITS:
        return None
    i = -int(digits) if text[0] == "-" else int(digits)
    if INT64_MIN <= i <= INT64_MAX:
        return i
    return None


def parse_number(text: str) -> ParsedNumber:
    i = parse_int64(text)
    if i is not None:
        return i
    if NUMBER_RE.fullmatch(text) is None and INT_RE.fullmatch(text) is None:
        raise RegulaIllegalNumber(f"Illegal number literal: {text!r}")
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("rational fallback for number literal of length %d", len(text))
    try:
        d = Decimal(text)
    except InvalidOperation:
        raise RegulaIllegalNumber(f"Illegal number literal: {text!r}") from None
    # Decimal keeps every digit, so is_zero() is exact. Substituting ZERO skips
    # building a huge rational for literals like 0e999999999.
    if d.is_zero():
        return ZERO
    return Fraction(d)


def compare_numbers(a: str, b: str) -> int:
    """Three-way comparison of two number literals by value."""
    x = parse_number(a)
    y = parse_number(b)
    if x == y:
        return 0
    return -1 if x < y else 1
