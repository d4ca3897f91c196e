"""File-level declarations: package, imports, annotations and the module itself."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from regula.types.containers import Object
from regula.types.kind import Kind
from regula.types.nodes import Node, Rule
from regula.types.sequences import Ref
from regula.types.value import Term
from regula.types.var import Var


@dataclass(frozen=True, eq=False)
class Import(Node):
    path: Term
    alias: Optional[Var] = None
    kind = Kind.IMPORT

    def __str__(self) -> str:
        if self.alias is not None:
            return f"import {self.path} as {self.alias}"
        return f"import {self.path}"


@dataclass(frozen=True, eq=False)
class Package(Node):
    path: Ref
    kind = Kind.PACKAGE

    def __str__(self) -> str:
        return f"package {self.path}"


@dataclass(frozen=True, eq=False)
class Annotations(Node):
    """Metadata block attached to a package, rule or document.

    Plain-text fields compare as strings, list fields as tuples of strings,
    and `custom` as an Object value.
    """

    scope: str = ""
    title: str = ""
    description: str = ""
    organizations: tuple[str, ...] = ()
    related_resources: tuple[str, ...] = ()
    authors: tuple[str, ...] = ()
    entrypoint: bool = False
    custom: Optional[Object] = None
    kind = Kind.ANNOTATIONS

    def __str__(self) -> str:
        return f"# METADATA scope={self.scope} title={self.title!r}"


@dataclass(frozen=True, eq=False)
class Module(Node):
    package: Package
    imports: tuple[Import, ...] = ()
    annotations: tuple[Annotations, ...] = ()
    rules: tuple[Rule, ...] = ()
    kind = Kind.MODULE

    def __str__(self) -> str:
        lines = [str(self.package)]
        lines.extend(str(i) for i in self.imports)
        lines.extend(str(r) for r in self.rules)
        return "\n".join(lines)
