"""Alias-chasing classification of Go type expressions."""

from __future__ import annotations

from typing import List, Set, Tuple

from .catalog import TypeCatalog
from .logging import get_logger
from .models import (
    Classification,
    NamedRef,
    QualifiedRef,
    StructShape,
    TypeExpr,
    TypeName,
)

DEFAULT_MAX_DEPTH = 64

logger = get_logger("resolver")


class TypeResolver:
    """Answers whether a type expression ultimately denotes a struct.

    Unqualified names resolve in the package that wrote them: the scanned
    declaration's package for a result type, the defining package for the
    right-hand side of a catalogued type. Qualified names are looked up
    literally. Pointers, slices, maps and every other composite shape are
    terminal, so ``*S`` is never structural even when ``S`` is.

    Nothing here raises on bad input. Missing names, cycles and chains
    longer than ``max_depth`` all classify as non-structural.
    """

    def __init__(self, catalog: TypeCatalog, *, max_depth: int = DEFAULT_MAX_DEPTH) -> None:
        if max_depth < 1:
            raise ValueError("max_depth must be at least 1")
        self.catalog = catalog
        self.max_depth = max_depth

    def classify(self, expr: TypeExpr, namespace: str) -> Classification:
        """Classify ``expr`` as written in package ``namespace``."""
        classification, _ = self._follow(expr, namespace)
        return classification

    def is_structural(self, expr: TypeExpr, namespace: str) -> bool:
        return self.classify(expr, namespace) is Classification.STRUCTURAL

    def resolve_chain(self, expr: TypeExpr, namespace: str) -> List[TypeName]:
        """Return the catalogued names visited while resolving ``expr``."""
        _, chain = self._follow(expr, namespace)
        return chain

    def _follow(self, expr: TypeExpr, namespace: str) -> Tuple[Classification, List[TypeName]]:
        chain: List[TypeName] = []
        visited: Set[TypeName] = set()

        while True:
            if isinstance(expr, StructShape):
                return Classification.STRUCTURAL, chain
            if isinstance(expr, NamedRef):
                name = TypeName(namespace, expr.identifier)
            elif isinstance(expr, QualifiedRef):
                name = TypeName(expr.namespace, expr.identifier)
            else:
                return Classification.NON_STRUCTURAL, chain

            if name in visited:
                logger.debug("Alias cycle through %s: %s", name, " -> ".join(map(str, chain)))
                return Classification.NON_STRUCTURAL, chain
            if len(chain) >= self.max_depth:
                logger.debug("Alias chain from %s exceeds %d links", chain[0], self.max_depth)
                return Classification.NON_STRUCTURAL, chain

            definition = self.catalog.lookup(name)
            if definition is None:
                return Classification.NON_STRUCTURAL, chain

            visited.add(name)
            chain.append(name)
            expr = definition.expr
            namespace = definition.name.namespace


__all__ = ["DEFAULT_MAX_DEPTH", "TypeResolver"]
