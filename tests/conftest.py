from __future__ import annotations

import logging
import textwrap
from pathlib import Path
from typing import Callable

import pytest

from structscan.models import SourceUnit
from structscan.parser import GoParser
from tests._fixtures.go_tree import GoTreeBuilder


@pytest.fixture
def go_tree(tmp_path: Path) -> GoTreeBuilder:
    """Provide a reusable Go tree builder rooted at the pytest tmp_path."""
    return GoTreeBuilder(tmp_path)


@pytest.fixture(scope="session")
def go_parser() -> GoParser:
    return GoParser()


@pytest.fixture
def parse_go(go_parser: GoParser) -> Callable[..., SourceUnit]:
    """Parse dedented Go source into a SourceUnit without touching disk."""

    def _parse(source: str, path: str = "pkg/file.go") -> SourceUnit:
        return go_parser.parse_source(textwrap.dedent(source).lstrip("\n"), path)

    return _parse


@pytest.fixture(autouse=True)
def _reset_structscan_logger():
    """Undo handler and propagation changes made by configure_logging()."""
    logger = logging.getLogger("structscan")
    yield
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
