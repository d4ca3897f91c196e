"""Unordered collection kinds: Object (key/value map) and Set.

Both key their storage by Term, relying on Term hashing being consistent with
structural equality. They expose the two capabilities the comparators consume:
a canonical sorted form, and membership/difference.
"""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Mapping, Optional

from regula.types.kind import Kind
from regula.types.value import Term, Value, as_term


def _sorted(terms: Iterable[Term]) -> list:
    from regula.ordering.dispatch import sort_key
    return sorted(terms, key=sort_key)


class Object(Value):
    """Map from key Term to value Term. Later duplicates of a key win."""

    __slots__ = ("_items",)
    kind = Kind.OBJECT

    def __init__(self, pairs: Iterable[tuple[Any, Any]] = ()):
        items: dict[Term, Term] = {}
        for k, v in pairs:
            items[as_term(k)] = as_term(v)
        self._items = items

    def get(self, key: Any) -> Optional[Term]:
        return self._items.get(as_term(key))

    def keys(self) -> list[Term]:
        return list(self._items)

    def items(self) -> list[tuple[Term, Term]]:
        return list(self._items.items())

    def sorted_items(self) -> list[tuple[Term, Term]]:
        """Canonical pair form: pairs ordered by key."""
        from regula.ordering.dispatch import sort_key
        return sorted(self._items.items(), key=lambda kv: sort_key(kv[0]))

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, key: Any) -> bool:
        return as_term(key) in self._items

    def __hash__(self) -> int:
        return hash(frozenset(self._items.items()))

    def __repr__(self) -> str:
        inner = ", ".join(f"{k!r}: {v!r}" for k, v in self._items.items())
        return f"Object({{{inner}}})"

    def __str__(self) -> str:
        return "{" + ", ".join(f"{k}: {v}" for k, v in self._items.items()) + "}"


class LazyObject(Value):
    """Object backed by a native Python mapping, materialized on demand.

    `force()` builds a fresh Object on each call and leaves the backing
    mapping untouched.
    """

    __slots__ = ("native",)
    kind = Kind.OBJECT

    def __init__(self, native: Mapping[Any, Any]):
        self.native = native

    def force(self) -> Object:
        from regula.types.convert import to_term
        return Object((to_term(k), to_term(v)) for k, v in self.native.items())

    def sorted_items(self) -> list[tuple[Term, Term]]:
        return self.force().sorted_items()

    def __len__(self) -> int:
        return len(self.native)

    def __hash__(self) -> int:
        return hash(self.force())

    def __repr__(self) -> str:
        return f"LazyObject({self.native!r})"

    def __str__(self) -> str:
        return str(self.force())


class Set(Value):
    __slots__ = ("_elems",)
    kind = Kind.SET

    def __init__(self, elems: Iterable[Any] = ()):
        # dict keeps first-seen order, which only matters for repr
        self._elems: dict[Term, None] = dict.fromkeys(as_term(e) for e in elems)

    def contains(self, elem: Any) -> bool:
        return as_term(elem) in self._elems

    def difference(self, other: Set) -> Set:
        """Elements of self that are not members of other."""
        return Set(t for t in self._elems if t not in other._elems)

    def sorted(self) -> list[Term]:
        return _sorted(self._elems)

    def __len__(self) -> int:
        return len(self._elems)

    def __iter__(self) -> Iterator[Term]:
        return iter(self._elems)

    def __contains__(self, elem: Any) -> bool:
        return self.contains(elem)

    def __hash__(self) -> int:
        return hash(frozenset(self._elems))

    def __repr__(self) -> str:
        inner = ", ".join(repr(t) for t in self._elems)
        return f"Set({{{inner}}})"

    def __str__(self) -> str:
        if not self._elems:
            return "set()"
        return "{" + ", ".join(str(t) for t in self._elems) + "}"
