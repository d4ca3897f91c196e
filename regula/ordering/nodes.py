"""Field-by-field comparison of syntax-tree nodes.

Every comparator walks its node's fields in a fixed order and returns the
first non-zero result. Nested values go back through the dispatcher;
list-valued fields use the sequence rule.
"""

from __future__ import annotations

from regula.errors import RegulaIllegalValue
from regula.ordering import dispatch
from regula.ordering.rank import three_way
from regula.ordering.sequences import compare_sequences
from regula.types import (
    Annotations,
    ArrayComprehension,
    Body,
    Every,
    Expr,
    Head,
    Import,
    Module,
    ObjectComprehension,
    Package,
    Rule,
    SetComprehension,
    SomeDecl,
    Term,
    With,
)


def compare_bools(a: bool, b: bool) -> int:
    """False sorts before True."""
    if a == b:
        return 0
    return 1 if a else -1


# ----------------- Comprehensions -----------------
def compare_array_comprehensions(a: ArrayComprehension, b: ArrayComprehension) -> int:
    cmp = dispatch.compare(a.term, b.term)
    if cmp != 0:
        return cmp
    return dispatch.compare(a.body, b.body)


def compare_set_comprehensions(a: SetComprehension, b: SetComprehension) -> int:
    cmp = dispatch.compare(a.term, b.term)
    if cmp != 0:
        return cmp
    return dispatch.compare(a.body, b.body)


def compare_object_comprehensions(a: ObjectComprehension, b: ObjectComprehension) -> int:
    cmp = dispatch.compare(a.key, b.key)
    if cmp != 0:
        return cmp
    cmp = dispatch.compare(a.value, b.value)
    if cmp != 0:
        return cmp
    return dispatch.compare(a.body, b.body)


# ----------------- Expressions -----------------
def _terms_form(terms) -> int:
    # Declarations first, then plain terms, then calls, then every
    if isinstance(terms, SomeDecl):
        return 0
    if isinstance(terms, Term):
        return 1
    if isinstance(terms, tuple):
        return 2
    if isinstance(terms, Every):
        return 3
    raise RegulaIllegalValue(f"Illegal expression terms: {type(terms).__name__}")


def compare_exprs(a: Expr, b: Expr) -> int:
    """Order: index, negated, shape of terms, terms, with-modifiers."""
    cmp = three_way(a.index, b.index)
    if cmp != 0:
        return cmp
    cmp = compare_bools(a.negated, b.negated)
    if cmp != 0:
        return cmp
    form_a, form_b = _terms_form(a.terms), _terms_form(b.terms)
    if form_a != form_b:
        return three_way(form_a, form_b)
    if form_a == 2:
        cmp = compare_sequences(a.terms, b.terms)
    else:
        cmp = dispatch.compare(a.terms, b.terms)
    if cmp != 0:
        return cmp
    return compare_sequences(a.with_, b.with_)


def compare_some_decls(a: SomeDecl, b: SomeDecl) -> int:
    return compare_sequences(a.symbols, b.symbols)


def compare_everys(a: Every, b: Every) -> int:
    for x, y in ((a.key, b.key), (a.value, b.value), (a.domain, b.domain), (a.body, b.body)):
        cmp = dispatch.compare(x, y)
        if cmp != 0:
            return cmp
    return 0


def compare_withs(a: With, b: With) -> int:
    cmp = dispatch.compare(a.target, b.target)
    if cmp != 0:
        return cmp
    return dispatch.compare(a.value, b.value)


def compare_bodies(a: Body, b: Body) -> int:
    return compare_sequences(a.elems, b.elems)


# ----------------- Rules -----------------
def compare_heads(a: Head, b: Head) -> int:
    """Order: name, reference, args, key, value, assign."""
    for x, y in (
        (a.name, b.name),
        (a.reference, b.reference),
        (a.args, b.args),
        (a.key, b.key),
        (a.value, b.value),
    ):
        cmp = dispatch.compare(x, y)
        if cmp != 0:
            return cmp
    return compare_bools(a.assign, b.assign)


def compare_rules(a: Rule, b: Rule) -> int:
    """Order: head, default, body, annotations, then the else chain."""
    cmp = dispatch.compare(a.head, b.head)
    if cmp != 0:
        return cmp
    cmp = compare_bools(a.default, b.default)
    if cmp != 0:
        return cmp
    cmp = dispatch.compare(a.body, b.body)
    if cmp != 0:
        return cmp
    cmp = compare_sequences(a.annotations, b.annotations)
    if cmp != 0:
        return cmp
    return dispatch.compare(a.else_, b.else_)


# ----------------- Module level -----------------
def compare_imports(a: Import, b: Import) -> int:
    cmp = dispatch.compare(a.path, b.path)
    if cmp != 0:
        return cmp
    return dispatch.compare(a.alias, b.alias)


def compare_packages(a: Package, b: Package) -> int:
    return dispatch.compare(a.path, b.path)


def compare_annotations(a: Annotations, b: Annotations) -> int:
    # Text and text-list fields order natively; tuples already follow the
    # shorter-is-less rule on a common prefix.
    for x, y in (
        (a.scope, b.scope),
        (a.title, b.title),
        (a.description, b.description),
        (a.organizations, b.organizations),
        (a.related_resources, b.related_resources),
        (a.authors, b.authors),
    ):
        cmp = three_way(x, y)
        if cmp != 0:
            return cmp
    cmp = compare_bools(a.entrypoint, b.entrypoint)
    if cmp != 0:
        return cmp
    return dispatch.compare(a.custom, b.custom)


def compare_modules(a: Module, b: Module) -> int:
    """Order: package, imports, annotations, rules."""
    cmp = dispatch.compare(a.package, b.package)
    if cmp != 0:
        return cmp
    for x, y in ((a.imports, b.imports), (a.annotations, b.annotations), (a.rules, b.rules)):
        cmp = compare_sequences(x, y)
        if cmp != 0:
            return cmp
    return 0
