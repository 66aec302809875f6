"""Two-stage scan pipeline: catalog every type, then scan every declaration."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, Iterator, List

from .catalog import TypeCatalog, build_catalog
from .config import ScanConfig
from .logging import get_logger
from .models import Finding, SourceUnit
from .parser import GoParser
from .resolver import TypeResolver
from .scanner import DeclarationScanner
from .source_walker import SourceDirectory, SourceWalker


@dataclass
class ScanResult:
    """Everything produced by one pipeline run."""

    units: List[SourceUnit]
    catalog: TypeCatalog
    findings: List[Finding] = field(default_factory=list)


class Pipeline:
    """Coordinates discovery, cataloguing and declaration scanning."""

    def __init__(
        self,
        config: ScanConfig | None = None,
        walker: SourceWalker | None = None,
        parser: GoParser | None = None,
    ) -> None:
        self.config = config or ScanConfig()
        self.walker = walker or SourceWalker(
            self.config.exclude, include_tests=self.config.include_tests
        )
        self.parser = parser or GoParser()
        self.logger = get_logger("pipeline")

    def run(self, root: str) -> ScanResult:
        """Parse everything under ``root``, build the catalog, then scan."""
        units = self.load_units(root)
        catalog = build_catalog(units)
        self.logger.info("Catalogued %d types from %d files", len(catalog), len(units))
        findings = list(self.scan(units, catalog))
        self.logger.info("Found %d declarations returning structs", len(findings))
        return ScanResult(units=units, catalog=catalog, findings=findings)

    def load_units(self, root: str) -> List[SourceUnit]:
        """Parse every Go file under ``root`` in discovery order.

        Within a directory, files are grouped by package clause. Packages are
        ordered by the first file that declares them.
        """
        units: List[SourceUnit] = []
        for directory in self.walker.walk(root):
            units.extend(self._parse_directory(directory))
        return units

    def scan(self, units: Iterable[SourceUnit], catalog: TypeCatalog) -> Iterator[Finding]:
        resolver = TypeResolver(catalog, max_depth=self.config.max_alias_depth)
        scanner = DeclarationScanner(resolver)
        for unit in units:
            yield from scanner.scan(unit)

    def _parse_directory(self, directory: SourceDirectory) -> List[SourceUnit]:
        packages: Dict[str, List[SourceUnit]] = {}
        for path in directory.files:
            unit = self.parser.parse_file(Path(path), path)
            packages.setdefault(unit.namespace, []).append(unit)
        self.logger.debug(
            "Parsed %d files in %s (packages: %s)",
            len(directory.files),
            directory.path,
            ", ".join(packages),
        )
        return [unit for group in packages.values() for unit in group]


__all__ = ["Pipeline", "ScanResult"]
