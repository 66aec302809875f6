"""Reports declarations whose results resolve to struct types."""

from __future__ import annotations

from typing import Iterable, Iterator

from .logging import get_logger
from .models import Finding, FunctionSignature, NamedRef, SourceUnit, TypeExpr
from .parser import function_signatures
from .resolver import TypeResolver

logger = get_logger("scanner")


class DeclarationScanner:
    """Walks function and method declarations against a resolver."""

    def __init__(self, resolver: TypeResolver) -> None:
        self.resolver = resolver

    def scan(self, unit: SourceUnit) -> Iterator[Finding]:
        """Yield one finding per qualifying declaration, in source order."""
        return self.scan_signatures(function_signatures(unit))

    def scan_signatures(self, signatures: Iterable[FunctionSignature]) -> Iterator[Finding]:
        for signature in signatures:
            if self.returns_struct(signature):
                logger.debug("%s:%d %s returns a struct", signature.path, signature.line, signature.name)
                yield Finding(path=signature.path, line=signature.line, signature=signature.header)

    def returns_struct(self, signature: FunctionSignature) -> bool:
        return any(self._is_struct_result(result, signature) for result in signature.results)

    def _is_struct_result(self, result: TypeExpr, signature: FunctionSignature) -> bool:
        # Type parameters shadow package-level types of the same name.
        if isinstance(result, NamedRef) and result.identifier in signature.type_parameters:
            return False
        return self.resolver.is_structural(result, signature.namespace)


__all__ = ["DeclarationScanner"]
