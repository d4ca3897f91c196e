"""Boolean equality over values.

Scalar and simple ordered kinds get direct checks that skip three-way work;
every other kind falls back to `compare(a, b) == 0`. Both routes always agree
with the dispatcher.
"""

from __future__ import annotations

from typing import Callable, Sequence

from regula import Comparable
from regula.ordering import dispatch
from regula.ordering.numbers import parse_number
from regula.ordering.rank import rank
from regula.types import Kind, Ref, Term, Value


def equal(a: Comparable, b: Comparable) -> bool:
    if isinstance(a, Term):
        a = a.value
    if isinstance(b, Term):
        b = b.value
    if a is None or b is None:
        return a is None and b is None
    return value_equal(a, b)


def value_equal(a: Value, b: Value) -> bool:
    if rank(a) != rank(b):
        return False
    fast = _FAST_PATHS.get(a.kind)
    if fast is not None:
        return fast(a, b)
    return dispatch.compare(a, b) == 0


def equal_sequences(a: Sequence[Comparable], b: Sequence[Comparable]) -> bool:
    if len(a) != len(b):
        return False
    return all(equal(x, y) for x, y in zip(a, b))


def ref_equal(a: Ref, b: Ref) -> bool:
    return equal_sequences(a.elems, b.elems)


def term_value_equal(a: Term, b: Term) -> bool:
    return value_equal(a.value, b.value)


_FAST_PATHS: dict[Kind, Callable[[Value, Value], bool]] = {
    Kind.NULL: lambda a, b: True,
    Kind.BOOLEAN: lambda a, b: a.value == b.value,
    Kind.NUMBER: lambda a, b: parse_number(a.text) == parse_number(b.text),
    Kind.STRING: lambda a, b: a.value == b.value,
    Kind.VAR: lambda a, b: a.name == b.name,
    Kind.REF: lambda a, b: equal_sequences(a.elems, b.elems),
    Kind.ARRAY: lambda a, b: equal_sequences(a.elems, b.elems),
}
