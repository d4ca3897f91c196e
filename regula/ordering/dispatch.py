"""Top-level comparison of values.

`compare` returns -1, 0 or 1. Different kinds never compare equal; they are
ordered by rank:

    absent < Null < Boolean < Number < String < Var < Ref < Array < Object
    < Set < ArrayComprehension < ObjectComprehension < SetComprehension
    < Call < Args < Expr < SomeDecl < Every < With < Head < Body < Rule
    < Import < Package < Annotations < Module

Values of the same kind are handed to the comparator registered for that kind.
Composite comparators call back into `compare` for their sub-terms.
"""

from __future__ import annotations

import logging
from functools import cmp_to_key
from typing import Callable, Iterable

from regula import Comparable
from regula.errors import RegulaIllegalValue
from regula.ordering import containers, nodes, sequences
from regula.ordering.numbers import compare_numbers
from regula.ordering.rank import rank, three_way
from regula.types import Kind, Ref, Term, Var

logger = logging.getLogger(__name__)


def compare(a: Comparable, b: Comparable) -> int:
    if isinstance(a, Term):
        a = a.value
    if isinstance(b, Term):
        b = b.value

    if a is None:
        return 0 if b is None else -1
    if b is None:
        return 1

    rank_a = rank(a)
    rank_b = rank(b)
    if rank_a != rank_b:
        return -1 if rank_a < rank_b else 1

    return _COMPARATORS[a.kind](a, b)


# ----------------- Typed entry points -----------------
def var_compare(a: Var, b: Var) -> int:
    return three_way(a.name, b.name)


def ref_compare(a: Ref, b: Ref) -> int:
    return sequences.compare_sequences(a.elems, b.elems)


def term_value_compare(a: Term, b: Term) -> int:
    return compare(a.value, b.value)


sort_key = cmp_to_key(compare)


def sorted_terms(terms: Iterable[Comparable]) -> list:
    """Terms (or values) in ascending order under `compare`."""
    return sorted(terms, key=sort_key)


# ----------------- Per-kind comparators -----------------
def _compare_null(a, b) -> int:
    return 0


def _compare_boolean(a, b) -> int:
    return nodes.compare_bools(a.value, b.value)


def _compare_number(a, b) -> int:
    return compare_numbers(a.text, b.text)


def _compare_string(a, b) -> int:
    return three_way(a.value, b.value)


def _compare_elements(a, b) -> int:
    return sequences.compare_sequences(a.elems, b.elems)


_COMPARATORS: dict[Kind, Callable[[Comparable, Comparable], int]] = {
    Kind.NULL: _compare_null,
    Kind.BOOLEAN: _compare_boolean,
    Kind.NUMBER: _compare_number,
    Kind.STRING: _compare_string,
    Kind.VAR: var_compare,
    Kind.REF: _compare_elements,
    Kind.ARRAY: _compare_elements,
    Kind.OBJECT: containers.compare_objects,
    Kind.SET: containers.compare_sets,
    Kind.ARRAY_COMPREHENSION: nodes.compare_array_comprehensions,
    Kind.OBJECT_COMPREHENSION: nodes.compare_object_comprehensions,
    Kind.SET_COMPREHENSION: nodes.compare_set_comprehensions,
    Kind.CALL: _compare_elements,
    Kind.ARGS: _compare_elements,
    Kind.EXPR: nodes.compare_exprs,
    Kind.SOME_DECL: nodes.compare_some_decls,
    Kind.EVERY: nodes.compare_everys,
    Kind.WITH: nodes.compare_withs,
    Kind.HEAD: nodes.compare_heads,
    Kind.BODY: nodes.compare_bodies,
    Kind.RULE: nodes.compare_rules,
    Kind.IMPORT: nodes.compare_imports,
    Kind.PACKAGE: nodes.compare_packages,
    Kind.ANNOTATIONS: nodes.compare_annotations,
    Kind.MODULE: nodes.compare_modules,
}


def comparator_for(kind: Kind) -> Callable[[Comparable, Comparable], int]:
    return _COMPARATORS[kind]


def _check_exhaustive() -> None:
    missing = [k.name for k in Kind if k not in _COMPARATORS]
    if missing:
        logger.error("kinds without a comparator: %s", ", ".join(missing))
        raise RegulaIllegalValue(f"No comparator registered for: {', '.join(missing)}")


_check_exhaustive()
