"""Value kinds that are ordered lists of sub-terms."""

from __future__ import annotations

from typing import Any, Iterable, Iterator

from regula.types.kind import Kind
from regula.types.value import Term, Value, as_term


class Elements(Value):
    """Immutable ordered run of elements; base of Ref, Array, Call, Args and Body."""

    __slots__ = ("elems",)

    def __init__(self, elems: Iterable[Any] = ()):
        self.elems: tuple = tuple(self._coerce(e) for e in elems)

    @staticmethod
    def _coerce(elem: Any) -> Any:
        return as_term(elem)

    def __len__(self) -> int:
        return len(self.elems)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.elems)

    def __getitem__(self, i: int) -> Any:
        return self.elems[i]

    def __hash__(self) -> int:
        return hash((self.kind, self.elems))

    def __repr__(self) -> str:
        inner = ", ".join(repr(e) for e in self.elems)
        return f"{type(self).__name__}([{inner}])"


class Ref(Elements):
    __slots__ = ()
    kind = Kind.REF

    def __str__(self) -> str:
        if not self.elems:
            return ""
        parts = [str(self.elems[0])]
        for t in self.elems[1:]:
            parts.append(f"[{t}]")
        return "".join(parts)


class Array(Elements):
    __slots__ = ()
    kind = Kind.ARRAY

    def __str__(self) -> str:
        return "[" + ", ".join(str(t) for t in self.elems) + "]"


class Call(Elements):
    """Operator term followed by the argument terms."""

    __slots__ = ()
    kind = Kind.CALL

    @property
    def operator(self) -> Term:
        return self.elems[0]

    @property
    def operands(self) -> tuple:
        return self.elems[1:]

    def __str__(self) -> str:
        if not self.elems:
            return "()"
        return f"{self.elems[0]}(" + ", ".join(str(t) for t in self.elems[1:]) + ")"


class Args(Elements):
    __slots__ = ()
    kind = Kind.ARGS

    def __str__(self) -> str:
        return "(" + ", ".join(str(t) for t in self.elems) + ")"
