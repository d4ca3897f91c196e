from __future__ import annotations
import sys

from regula.types.kind import Kind
from regula.types.value import Value


class Var(Value):
    __slots__ = ("name",)
    kind = Kind.VAR

    def __init__(self, name: str):
        # variable names repeat across rules; interned names compare by identity
        self.name: str = sys.intern(name)

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self):
        return f"Var({self.name!r})"

    def __str__(self):
        return self.name
