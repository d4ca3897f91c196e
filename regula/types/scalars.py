from __future__ import annotations

import json

from regula.types.kind import Kind
from regula.types.value import Value


class NullType(Value):
    __slots__ = ()
    kind = Kind.NULL

    def __repr__(self): return "null"

    def __str__(self): return "null"

    def __hash__(self) -> int:
        return hash(None)


Null = NullType()


class Boolean(Value):
    __slots__ = ("value",)
    kind = Kind.BOOLEAN

    def __init__(self, value: bool):
        self.value: bool = bool(value)

    def __hash__(self) -> int:
        return hash(self.value)

    def __repr__(self) -> str:
        return f"Boolean({self.value!r})"

    def __str__(self) -> str:
        return "true" if self.value else "false"


class Number(Value):
    """A number literal kept in its canonical decimal text.

    The text is interpreted as an exact rational only when compared or hashed,
    see regula.ordering.numbers.
    """

    __slots__ = ("text",)
    kind = Kind.NUMBER

    def __init__(self, text: str):
        self.text: str = str(text)

    @classmethod
    def from_int(cls, i: int) -> Number:
        return cls(str(int(i)))

    def __hash__(self) -> int:
        # Hash the parsed quantity so 1, 1.0 and 1e0 land in the same bucket
        from regula.ordering.numbers import parse_number
        return hash(parse_number(self.text))

    def __repr__(self) -> str:
        return f"Number({self.text!r})"

    def __str__(self) -> str:
        return self.text


class String(Value):
    __slots__ = ("value",)
    kind = Kind.STRING

    def __init__(self, value: str):
        self.value: str = value

    def __hash__(self) -> int:
        return hash(self.value)

    def __repr__(self) -> str:
        return f"String({self.value!r})"

    def __str__(self) -> str:
        return json.dumps(self.value)
