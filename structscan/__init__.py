"""Find Go declarations whose results resolve to struct types."""

from .catalog import CatalogBuilder, TypeCatalog, build_catalog
from .errors import SourceDiscoveryError, SourceParseError, StructScanError
from .models import (
    Classification,
    Finding,
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
from .parser import GoParser
from .pipeline import Pipeline, ScanResult
from .resolver import TypeResolver
from .scanner import DeclarationScanner

__version__ = "0.1.0"

__all__ = [
    "CatalogBuilder",
    "Classification",
    "DeclarationScanner",
    "Finding",
    "FunctionSignature",
    "GoParser",
    "NamedRef",
    "OtherShape",
    "Pipeline",
    "QualifiedRef",
    "ScanResult",
    "SourceDiscoveryError",
    "SourceParseError",
    "SourceUnit",
    "StructScanError",
    "StructShape",
    "TypeCatalog",
    "TypeDefinition",
    "TypeExpr",
    "TypeName",
    "TypeResolver",
    "build_catalog",
]
