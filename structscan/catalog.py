"""Package-level type catalog shared by the resolver and scanner."""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Iterable, Iterator, Mapping, Optional

from .logging import get_logger
from .models import SourceUnit, TypeDefinition, TypeName
from .parser import type_definitions

logger = get_logger("catalog")


class TypeCatalog:
    """Read-only mapping from :class:`TypeName` to :class:`TypeDefinition`."""

    def __init__(self, entries: Mapping[TypeName, TypeDefinition] | None = None) -> None:
        self._entries: Mapping[TypeName, TypeDefinition] = MappingProxyType(dict(entries or {}))

    def lookup(self, name: TypeName) -> Optional[TypeDefinition]:
        return self._entries.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __iter__(self) -> Iterator[TypeName]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"TypeCatalog({len(self)} types)"


class CatalogBuilder:
    """Collects type definitions across every unit before freezing them.

    Redeclaring a name overwrites the earlier entry. Go rejects such programs,
    but directories sharing a package name land in the same namespace, so the
    last definition registered wins and the overwrite is only logged.
    """

    def __init__(self) -> None:
        self._entries: Dict[TypeName, TypeDefinition] = {}
        self._built = False
        self.duplicates = 0

    def register(self, definition: TypeDefinition) -> None:
        if self._built:
            raise RuntimeError("CatalogBuilder.register() called after build()")
        previous = self._entries.get(definition.name)
        if previous is not None:
            self.duplicates += 1
            logger.debug(
                "Type %s redeclared at %s:%d (previous %s:%d); keeping the latest",
                definition.name,
                definition.path,
                definition.line,
                previous.path,
                previous.line,
            )
        self._entries[definition.name] = definition

    def register_unit(self, unit: SourceUnit) -> None:
        for definition in type_definitions(unit):
            self.register(definition)

    def build(self) -> TypeCatalog:
        self._built = True
        catalog = TypeCatalog(self._entries)
        logger.debug("Catalog built with %d types (%d redeclared)", len(catalog), self.duplicates)
        return catalog


def build_catalog(units: Iterable[SourceUnit]) -> TypeCatalog:
    """Register every type declaration from ``units`` and return the frozen catalog."""
    builder = CatalogBuilder()
    for unit in units:
        builder.register_unit(unit)
    return builder.build()


__all__ = ["CatalogBuilder", "TypeCatalog", "build_catalog"]
