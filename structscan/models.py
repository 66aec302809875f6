"""Core data models shared across structscan components."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple, Union

from tree_sitter import Node


@dataclass(frozen=True)
class TypeName:
    """Package-qualified type identifier used as the catalog key."""

    namespace: str
    identifier: str

    def __str__(self) -> str:
        return f"{self.namespace}.{self.identifier}"


@dataclass(frozen=True)
class StructShape:
    """An explicit ``struct { ... }`` type literal."""

    fields: Tuple[str, ...] = ()


@dataclass(frozen=True)
class NamedRef:
    """An unqualified type name, resolved against the local package."""

    identifier: str


@dataclass(frozen=True)
class QualifiedRef:
    """A ``pkg.Name`` reference; the qualifier is used literally."""

    namespace: str
    identifier: str


@dataclass(frozen=True)
class OtherShape:
    """Any terminal, non-struct shape (pointer, slice, map, func, ...)."""

    kind: str


TypeExpr = Union[StructShape, NamedRef, QualifiedRef, OtherShape]


class Classification(Enum):
    """Outcome of resolving a type expression."""

    STRUCTURAL = "structural"
    NON_STRUCTURAL = "non_structural"


@dataclass(frozen=True)
class TypeDefinition:
    """Right-hand side of a package-level ``type`` declaration."""

    name: TypeName
    expr: TypeExpr
    path: str = ""
    line: int = 0


@dataclass(frozen=True)
class SourceUnit:
    """One parsed Go file."""

    path: str
    namespace: str
    root: Node = field(compare=False, repr=False)
    source: bytes = field(compare=False, repr=False)

    def line_of(self, node: Node) -> int:
        return node.start_point[0] + 1

    def text_of(self, node: Node) -> str:
        return self.source[node.start_byte : node.end_byte].decode("utf-8", errors="replace")


@dataclass(frozen=True)
class FunctionSignature:
    """Declared results of a function or method declaration."""

    namespace: str
    path: str
    line: int
    name: str
    results: Tuple[TypeExpr, ...]
    header: str
    type_parameters: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Finding:
    """A declaration whose results include a struct-shaped type."""

    path: str
    line: int
    signature: str
