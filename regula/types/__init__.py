from __future__ import annotations

# Public surface for the value model
from .kind import Kind, ABSENT_RANK
from .value import Location, Term, Value, as_term
from .scalars import Boolean, Null, NullType, Number, String
from .var import Var
from .sequences import Args, Array, Call, Elements, Ref
from .containers import LazyObject, Object, Set
from .nodes import (
    ArrayComprehension,
    Body,
    Every,
    Expr,
    Head,
    Node,
    ObjectComprehension,
    Rule,
    SetComprehension,
    SomeDecl,
    With,
)
from .module import Annotations, Import, Module, Package
from .convert import to_term, to_value

__all__ = [
    "Kind",
    "ABSENT_RANK",
    "Location",
    "Term",
    "Value",
    "as_term",
    "Null",
    "NullType",
    "Boolean",
    "Number",
    "String",
    "Var",
    "Elements",
    "Ref",
    "Array",
    "Call",
    "Args",
    "Object",
    "LazyObject",
    "Set",
    "Node",
    "ArrayComprehension",
    "ObjectComprehension",
    "SetComprehension",
    "SomeDecl",
    "Every",
    "With",
    "Expr",
    "Body",
    "Head",
    "Rule",
    "Import",
    "Package",
    "Annotations",
    "Module",
    "to_value",
    "to_term",
]
