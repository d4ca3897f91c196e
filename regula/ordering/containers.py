"""Comparison of Object and Set values.

Both only give equality a meaning. Unequal collections are still ordered,
by comparing their canonical sorted forms, so results are deterministic.
"""

from __future__ import annotations

from regula.errors import RegulaIllegalValue
from regula.ordering import dispatch
from regula.ordering.rank import three_way
from regula.ordering.sequences import compare_sequences
from regula.types import LazyObject, Object, Set


def _materialize(x) -> Object:
    if isinstance(x, LazyObject):
        return x.force()
    if not isinstance(x, Object):
        raise RegulaIllegalValue(f"Illegal value: {type(x).__name__} tagged as object")
    return x


def compare_objects(a, b) -> int:
    """Walk both canonical pair forms, key before value; size breaks ties."""
    items_a = _materialize(a).sorted_items()
    items_b = _materialize(b).sorted_items()
    for (ka, va), (kb, vb) in zip(items_a, items_b):
        cmp = dispatch.compare(ka, kb)
        if cmp != 0:
            return cmp
        cmp = dispatch.compare(va, vb)
        if cmp != 0:
            return cmp
    return three_way(len(items_a), len(items_b))


def sets_equal(a: Set, b: Set) -> bool:
    """True when the symmetric difference of a and b is empty."""
    if len(a) != len(b):
        return False
    return not a.difference(b) and not b.difference(a)


def compare_sets(a: Set, b: Set) -> int:
    if sets_equal(a, b):
        return 0
    return compare_sequences(a.sorted(), b.sorted())
