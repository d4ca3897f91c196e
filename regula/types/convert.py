"""Conversion of native Python (and numpy) data into values.

    - None                   -> Null
    - bool / numpy.bool_     -> Boolean
    - int / numpy.integer    -> Number
    - float / numpy.floating -> Number (finite only)
    - Decimal                -> Number (finite only)
    - str                    -> String
    - list / tuple / ndarray -> Array
    - set / frozenset        -> Set
    - dict                   -> Object
    - Value / Term           -> unchanged
"""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Any

import numpy as np

from regula.errors import RegulaTypeError
from regula.types.containers import Object, Set
from regula.types.scalars import Boolean, Null, Number, String
from regula.types.sequences import Array
from regula.types.value import Term, Value


def to_value(obj: Any) -> Value:
    if isinstance(obj, Value):
        return obj
    if isinstance(obj, Term):
        return obj.value
    if obj is None:
        return Null
    # bool before int: bool is an int subclass
    if isinstance(obj, (bool, np.bool_)):
        return Boolean(bool(obj))
    if isinstance(obj, (int, np.integer)):
        return Number(str(int(obj)))
    if isinstance(obj, (float, np.floating)):
        f = float(obj)
        if not math.isfinite(f):
            raise RegulaTypeError(f"Cannot represent non-finite number {f!r}")
        return Number(repr(f))
    if isinstance(obj, Decimal):
        if not obj.is_finite():
            raise RegulaTypeError(f"Cannot represent non-finite number {obj!r}")
        return Number(str(obj))
    if isinstance(obj, str):
        return String(obj)
    if isinstance(obj, np.ndarray):
        return Array(to_term(x) for x in obj.tolist())
    if isinstance(obj, (list, tuple)):
        return Array(to_term(x) for x in obj)
    if isinstance(obj, (set, frozenset)):
        return Set(to_term(x) for x in obj)
    if isinstance(obj, dict):
        return Object((to_term(k), to_term(v)) for k, v in obj.items())
    raise RegulaTypeError(f"Cannot convert {type(obj).__name__} to a value")


def to_term(obj: Any) -> Term:
    if isinstance(obj, Term):
        return obj
    return Term(to_value(obj))
