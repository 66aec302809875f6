"""Go syntax front-end powered by tree-sitter."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Tuple

import tree_sitter_go
from tree_sitter import Language, Node, Parser

from .errors import SourceDiscoveryError, SourceParseError
from .logging import get_logger
from .models import (
    FunctionSignature,
    NamedRef,
    OtherShape,
    QualifiedRef,
    SourceUnit,
    StructShape,
    TypeDefinition,
    TypeExpr,
    TypeName,
)

GO_LANGUAGE = Language(tree_sitter_go.language())

_FUNCTION_NODE_TYPES = frozenset({"function_declaration", "method_declaration"})
_TYPE_SPEC_NODE_TYPES = frozenset({"type_spec", "type_alias"})

# Node types that map onto OtherShape kinds; anything unlisted keeps its grammar name.
_OTHER_KINDS = {
    "pointer_type": "pointer",
    "slice_type": "slice",
    "array_type": "array",
    "implicit_length_array_type": "array",
    "map_type": "map",
    "channel_type": "channel",
    "function_type": "function",
    "interface_type": "interface",
    "generic_type": "generic",
    "negated_type": "constraint",
}

_SPACE_FIXES: Tuple[Tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"([(\[]) "), r"\1"),
    (re.compile(r" ([)\]])"), r"\1"),
    (re.compile(r",([)\]])"), r"\1"),
)

logger = get_logger("parser")


class GoParser:
    """Parses Go source into :class:`SourceUnit` objects."""

    def __init__(self) -> None:
        self._parser = Parser()
        self._parser.language = GO_LANGUAGE

    def parse_file(self, path: Path, display_path: Optional[str] = None) -> SourceUnit:
        """Read and parse one file; ``display_path`` is what findings report."""
        try:
            source = path.read_bytes()
        except OSError as exc:
            raise SourceDiscoveryError(f"Cannot read {path}: {exc}") from exc
        return self.parse_source(source, display_path or str(path))

    def parse_source(self, source: bytes | str, path: str = "<source>") -> SourceUnit:
        """Parse in-memory source, rejecting files with syntax errors."""
        if isinstance(source, str):
            source = source.encode("utf-8")
        tree = self._parser.parse(source)
        root = tree.root_node
        if root.has_error:
            bad = _first_error(root)
            line = bad.start_point[0] + 1 if bad is not None else None
            raise SourceParseError(path, line)

        namespace = _package_name(root, source)
        if namespace is None:
            raise SourceParseError(path, None, "expected 'package' clause")
        logger.debug("Parsed %s (package %s)", path, namespace)
        return SourceUnit(path=path, namespace=namespace, root=root, source=source)


def type_definitions(unit: SourceUnit) -> Iterator[TypeDefinition]:
    """Yield the package-level type declarations of a unit in source order."""
    for decl in unit.root.named_children:
        if decl.type != "type_declaration":
            continue
        for spec in decl.named_children:
            if spec.type not in _TYPE_SPEC_NODE_TYPES:
                continue
            name_node = spec.child_by_field_name("name")
            type_node = spec.child_by_field_name("type")
            if name_node is None or type_node is None:
                continue
            yield TypeDefinition(
                name=TypeName(unit.namespace, unit.text_of(name_node)),
                expr=to_type_expr(type_node, unit),
                path=unit.path,
                line=unit.line_of(spec),
            )


def function_signatures(unit: SourceUnit) -> Iterator[FunctionSignature]:
    """Yield every top-level function and method declaration of a unit."""
    for decl in unit.root.named_children:
        if decl.type not in _FUNCTION_NODE_TYPES:
            continue
        name_node = decl.child_by_field_name("name")
        yield FunctionSignature(
            namespace=unit.namespace,
            path=unit.path,
            line=unit.line_of(decl),
            name=unit.text_of(name_node) if name_node is not None else "",
            results=tuple(_result_types(decl, unit)),
            header=render_header(decl, unit),
            type_parameters=tuple(_type_parameter_names(decl, unit)),
        )


def to_type_expr(node: Node, unit: SourceUnit) -> TypeExpr:
    """Convert a tree-sitter type node into the closed :data:`TypeExpr` union."""
    while node.type == "parenthesized_type":
        inner = _first_named(node)
        if inner is None:
            return OtherShape("parenthesized")
        node = inner

    if node.type == "struct_type":
        return StructShape(fields=tuple(_struct_field_names(node, unit)))
    if node.type == "type_identifier":
        return NamedRef(unit.text_of(node))
    if node.type == "qualified_type":
        package = node.child_by_field_name("package")
        name = node.child_by_field_name("name")
        if package is not None and name is not None:
            return QualifiedRef(unit.text_of(package), unit.text_of(name))
    return OtherShape(_OTHER_KINDS.get(node.type, node.type))


def render_header(decl: Node, unit: SourceUnit) -> str:
    """Render a declaration header on one line, without its body or comments."""
    body = decl.child_by_field_name("body")
    end = body.start_byte if body is not None else decl.end_byte

    pieces: List[bytes] = []
    cursor = decl.start_byte
    for comment in _comments_within(decl, end):
        pieces.append(unit.source[cursor : comment.start_byte])
        pieces.append(b" ")
        cursor = comment.end_byte
    pieces.append(unit.source[cursor:end])

    text = " ".join(b"".join(pieces).decode("utf-8", errors="replace").split())
    for pattern, replacement in _SPACE_FIXES:
        text = pattern.sub(replacement, text)
    return text


def _result_types(decl: Node, unit: SourceUnit) -> Iterable[TypeExpr]:
    result = decl.child_by_field_name("result")
    if result is None:
        return
    if result.type != "parameter_list":
        yield to_type_expr(result, unit)
        return
    for param in result.named_children:
        if param.type == "parameter_declaration":
            type_node = param.child_by_field_name("type")
            if type_node is not None:
                yield to_type_expr(type_node, unit)
        elif param.type == "variadic_parameter_declaration":
            yield OtherShape("variadic")


def _type_parameter_names(decl: Node, unit: SourceUnit) -> Iterable[str]:
    params = decl.child_by_field_name("type_parameters")
    if params is not None:
        for param in params.named_children:
            for name in param.children_by_field_name("name"):
                yield unit.text_of(name)

    receiver = decl.child_by_field_name("receiver")
    if receiver is None:
        return
    for generic in _descendants(receiver, "generic_type"):
        arguments = generic.child_by_field_name("type_arguments")
        if arguments is None:
            continue
        for argument in arguments.named_children:
            if argument.type == "type_elem" and argument.named_child_count == 1:
                argument = argument.named_children[0]
            if argument.type == "type_identifier":
                yield unit.text_of(argument)


def _struct_field_names(node: Node, unit: SourceUnit) -> Iterable[str]:
    for field_list in node.named_children:
        if field_list.type != "field_declaration_list":
            continue
        for field_decl in field_list.named_children:
            if field_decl.type != "field_declaration":
                continue
            names = field_decl.children_by_field_name("name")
            if names:
                for name in names:
                    yield unit.text_of(name)
            else:
                embedded = field_decl.child_by_field_name("type")
                if embedded is not None:
                    yield unit.text_of(embedded).lstrip("*")


def _package_name(root: Node, source: bytes) -> Optional[str]:
    for child in root.named_children:
        if child.type != "package_clause":
            continue
        for part in child.named_children:
            if part.type == "package_identifier":
                return source[part.start_byte : part.end_byte].decode("utf-8")
    return None


def _comments_within(node: Node, end: int) -> Iterator[Node]:
    for child in node.children:
        if child.start_byte >= end:
            break
        if child.type == "comment":
            yield child
        else:
            yield from _comments_within(child, end)


def _descendants(node: Node, node_type: str) -> Iterator[Node]:
    for child in node.named_children:
        if child.type == node_type:
            yield child
        else:
            yield from _descendants(child, node_type)


def _first_named(node: Node) -> Optional[Node]:
    for child in node.named_children:
        if child.type != "comment":
            return child
    return None


def _first_error(node: Node) -> Optional[Node]:
    if node.type == "ERROR" or node.is_missing:
        return node
    for child in node.children:
        if child.has_error or child.is_missing:
            found = _first_error(child)
            if found is not None:
                return found
    return None


__all__ = [
    "GO_LANGUAGE",
    "GoParser",
    "function_signatures",
    "render_header",
    "to_type_expr",
    "type_definitions",
]
