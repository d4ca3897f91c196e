"""Syntax-tree kinds: comprehensions, query expressions and rule structure."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Optional, Union

from regula.types.kind import Kind
from regula.types.sequences import Args, Elements, Ref
from regula.types.value import Term, Value
from regula.types.var import Var


class Node(Value):
    """Base for dataclass nodes; hashes over the declared fields."""

    __slots__ = ()

    def __hash__(self) -> int:
        return hash((self.kind,) + tuple(getattr(self, f.name) for f in fields(self)))


class Body(Elements):
    """Ordered conjunction of expressions."""

    __slots__ = ()
    kind = Kind.BODY

    @staticmethod
    def _coerce(elem):
        return elem

    def __str__(self) -> str:
        return "; ".join(str(e) for e in self.elems)


@dataclass(frozen=True, eq=False)
class ArrayComprehension(Node):
    term: Term
    body: Body
    kind = Kind.ARRAY_COMPREHENSION

    def __str__(self) -> str:
        return f"[{self.term} | {self.body}]"


@dataclass(frozen=True, eq=False)
class ObjectComprehension(Node):
    key: Term
    value: Term
    body: Body
    kind = Kind.OBJECT_COMPREHENSION

    def __str__(self) -> str:
        return f"{{{self.key}: {self.value} | {self.body}}}"


@dataclass(frozen=True, eq=False)
class SetComprehension(Node):
    term: Term
    body: Body
    kind = Kind.SET_COMPREHENSION

    def __str__(self) -> str:
        return f"{{{self.term} | {self.body}}}"


@dataclass(frozen=True, eq=False)
class SomeDecl(Node):
    """`some x, y` or `some k, v in xs` declaration."""

    symbols: tuple[Term, ...] = ()
    kind = Kind.SOME_DECL

    def __str__(self) -> str:
        return "some " + ", ".join(str(s) for s in self.symbols)


@dataclass(frozen=True, eq=False)
class Every(Node):
    key: Optional[Term]
    value: Term
    domain: Term
    body: Body
    kind = Kind.EVERY

    def __str__(self) -> str:
        names = f"{self.key}, {self.value}" if self.key is not None else str(self.value)
        return f"every {names} in {self.domain} {{ {self.body} }}"


@dataclass(frozen=True, eq=False)
class With(Node):
    target: Term
    value: Term
    kind = Kind.WITH

    def __str__(self) -> str:
        return f"with {self.target} as {self.value}"


# What an expression holds: a single term, an operator call spelled as a
# tuple of terms, or a declaration
ExprTerms = Union[Term, tuple, SomeDecl, Every]


@dataclass(frozen=True, eq=False)
class Expr(Node):
    terms: ExprTerms
    index: int = 0
    negated: bool = False
    with_: tuple[With, ...] = ()
    kind = Kind.EXPR

    def is_call(self) -> bool:
        return isinstance(self.terms, tuple)

    def __str__(self) -> str:
        if isinstance(self.terms, tuple):
            op, *args = self.terms
            s = f"{op}(" + ", ".join(str(a) for a in args) + ")"
        else:
            s = str(self.terms)
        if self.negated:
            s = "not " + s
        for w in self.with_:
            s += f" {w}"
        return s


@dataclass(frozen=True, eq=False)
class Head(Node):
    name: Optional[Var] = None
    reference: Optional[Ref] = None
    args: Optional[Args] = None
    key: Optional[Term] = None
    value: Optional[Term] = None
    assign: bool = False
    kind = Kind.HEAD

    def __str__(self) -> str:
        s = str(self.reference) if self.reference is not None else str(self.name or "")
        if self.args is not None:
            s += str(self.args)
        if self.key is not None:
            s += f" contains {self.key}"
        if self.value is not None:
            s += (" := " if self.assign else " = ") + str(self.value)
        return s


@dataclass(frozen=True, eq=False)
class Rule(Node):
    head: Head
    body: Body = field(default_factory=Body)
    default: bool = False
    annotations: tuple = ()
    else_: Optional[Rule] = None
    kind = Kind.RULE

    def __str__(self) -> str:
        s = ("default " if self.default else "") + str(self.head)
        if len(self.body):
            s += f" {{ {self.body} }}"
        if self.else_ is not None:
            s += f" else {self.else_}"
        return s
