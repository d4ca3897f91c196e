"""Base classes shared by every node of the value model.

A Term owns exactly one Value plus an optional source location. Locations are
informational only and never take part in ordering, equality or hashing.

Values are immutable once constructed. `==` and `hash` on values and terms
agree with `regula.ordering.equal`, which is what lets Object and Set key their
storage by Term.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from regula.errors import RegulaIllegalValue
from regula.types.kind import Kind


@dataclass(frozen=True)
class Location:
    row: int
    col: int
    file: str = ""

    def __str__(self) -> str:
        if self.file:
            return f"{self.file}:{self.row}:{self.col}"
        return f"{self.row}:{self.col}"


class Value:
    """Common behaviour for all value kinds."""

    __slots__ = ()

    kind: Kind

    def compare(self, other: Any) -> int:
        from regula.ordering.dispatch import compare
        return compare(self, other)

    def equal(self, other: Any) -> bool:
        from regula.ordering.equality import equal
        return equal(self, other)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, (Value, Term)):
            return NotImplemented
        return self.equal(other)

    def __hash__(self) -> int:
        return hash(self.kind)


class Term:
    """Wrapper owning exactly one Value."""

    __slots__ = ("value", "location")

    def __init__(self, value: Value, location: Optional[Location] = None):
        if not isinstance(value, Value):
            raise RegulaIllegalValue(f"Term cannot own {type(value).__name__}")
        self.value: Value = value
        self.location: Optional[Location] = location

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, (Value, Term)):
            return NotImplemented
        return self.value.equal(other)

    def __hash__(self) -> int:
        return hash(self.value)

    def __repr__(self) -> str:
        return f"Term({self.value!r})"

    def __str__(self) -> str:
        return str(self.value)


def as_term(x: Any) -> Term:
    """Wrap a bare Value in a Term; Terms pass through unchanged."""
    if isinstance(x, Term):
        return x
    if isinstance(x, Value):
        return Term(x)
    raise RegulaIllegalValue(f"Expected a Term or Value, got {type(x).__name__}")


def as_optional_term(x: Any) -> Optional[Term]:
    return None if x is None else as_term(x)
