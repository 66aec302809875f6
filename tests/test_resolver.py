"""Tests for alias-chasing type classification."""

from __future__ import annotations

import logging

import pytest

from structscan.catalog import CatalogBuilder, TypeCatalog
from structscan.models import (
    Classification,
    NamedRef,
    OtherShape,
    QualifiedRef,
    StructShape,
    TypeDefinition,
    TypeName,
)
from structscan.resolver import TypeResolver


def _catalog(*entries) -> TypeCatalog:
    builder = CatalogBuilder()
    for namespace, identifier, expr in entries:
        builder.register(TypeDefinition(name=TypeName(namespace, identifier), expr=expr))
    return builder.build()


STRUCTURAL = Classification.STRUCTURAL
NON_STRUCTURAL = Classification.NON_STRUCTURAL


def test_struct_literal_needs_no_catalog() -> None:
    resolver = TypeResolver(TypeCatalog())
    assert resolver.classify(StructShape(), "pkg") is STRUCTURAL


@pytest.mark.parametrize("name", ["int", "error", "string", "Unknown"])
def test_unknown_names_are_non_structural(name: str) -> None:
    resolver = TypeResolver(TypeCatalog())
    assert resolver.classify(NamedRef(name), "pkg") is NON_STRUCTURAL


def test_named_struct_is_structural() -> None:
    resolver = TypeResolver(_catalog(("pkg", "S", StructShape(("X",)))))
    assert resolver.classify(NamedRef("S"), "pkg") is STRUCTURAL


def test_unqualified_names_resolve_in_local_package_only() -> None:
    resolver = TypeResolver(_catalog(("pkg", "S", StructShape())))
    assert resolver.classify(NamedRef("S"), "other") is NON_STRUCTURAL


def test_long_alias_chain_reaches_struct() -> None:
    entries = [("pkg", "T0", StructShape())]
    entries += [("pkg", f"T{i}", NamedRef(f"T{i - 1}")) for i in range(1, 20)]
    resolver = TypeResolver(_catalog(*entries))

    assert resolver.classify(NamedRef("T19"), "pkg") is STRUCTURAL
    assert len(resolver.resolve_chain(NamedRef("T19"), "pkg")) == 20


def test_alias_chain_ending_in_non_struct() -> None:
    resolver = TypeResolver(
        _catalog(
            ("pkg", "A", NamedRef("B")),
            ("pkg", "B", OtherShape("pointer")),
        )
    )
    assert resolver.classify(NamedRef("A"), "pkg") is NON_STRUCTURAL


def test_chain_crosses_packages_using_defining_namespace() -> None:
    resolver = TypeResolver(
        _catalog(
            ("api", "View", QualifiedRef("model", "Record")),
            ("model", "Record", NamedRef("row")),
            ("model", "row", StructShape()),
            ("api", "row", OtherShape("slice")),
        )
    )

    assert resolver.classify(NamedRef("View"), "api") is STRUCTURAL
    assert resolver.resolve_chain(NamedRef("View"), "api") == [
        TypeName("api", "View"),
        TypeName("model", "Record"),
        TypeName("model", "row"),
    ]


def test_qualified_reference_is_taken_literally() -> None:
    resolver = TypeResolver(_catalog(("pkg", "S", StructShape())))

    assert resolver.classify(QualifiedRef("pkg", "S"), "main") is STRUCTURAL
    assert resolver.classify(QualifiedRef("other", "S"), "pkg") is NON_STRUCTURAL


@pytest.mark.parametrize("kind", ["pointer", "slice", "map", "function", "interface", "generic"])
def test_other_shapes_are_terminal(kind: str) -> None:
    resolver = TypeResolver(_catalog(("pkg", "S", StructShape())))
    assert resolver.classify(OtherShape(kind), "pkg") is NON_STRUCTURAL


def test_alias_cycle_terminates_non_structural(caplog: pytest.LogCaptureFixture) -> None:
    resolver = TypeResolver(
        _catalog(
            ("pkg", "A", NamedRef("B")),
            ("pkg", "B", QualifiedRef("pkg", "C")),
            ("pkg", "C", NamedRef("A")),
            ("pkg", "Self", NamedRef("Self")),
        )
    )

    with caplog.at_level(logging.DEBUG, logger="structscan"):
        assert resolver.classify(NamedRef("A"), "pkg") is NON_STRUCTURAL
        assert resolver.classify(NamedRef("Self"), "pkg") is NON_STRUCTURAL
    assert "cycle" in caplog.text


def test_max_depth_bounds_resolution() -> None:
    resolver = TypeResolver(
        _catalog(
            ("pkg", "S", StructShape()),
            ("pkg", "A", NamedRef("S")),
            ("pkg", "B", NamedRef("A")),
        ),
        max_depth=2,
    )

    assert resolver.classify(NamedRef("A"), "pkg") is STRUCTURAL
    assert resolver.classify(NamedRef("B"), "pkg") is NON_STRUCTURAL


def test_max_depth_must_be_positive() -> None:
    with pytest.raises(ValueError):
        TypeResolver(TypeCatalog(), max_depth=0)
