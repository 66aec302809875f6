"""Directory walking and Go source discovery."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from fnmatch import fnmatchcase
from pathlib import Path
from typing import Iterator, List, Sequence

from .errors import SourceDiscoveryError
from .logging import get_logger

_GO_SUFFIX = ".go"
_TEST_SUFFIX = "_test.go"

logger = get_logger("source_walker")


@dataclass
class SourceDirectory:
    """A directory holding at least one Go file, with files in name order."""

    path: str
    files: List[str] = field(default_factory=list)


def _raise_walk_error(exc: OSError) -> None:
    raise SourceDiscoveryError(f"Cannot list {exc.filename}: {exc.strerror or exc}") from exc


def _is_excluded(name: str, rel_path: str, patterns: Sequence[str]) -> bool:
    for pattern in patterns:
        pattern = pattern.strip().strip("/")
        if not pattern:
            continue
        if "/" in pattern:
            if fnmatchcase(rel_path, pattern):
                return True
        elif fnmatchcase(name, pattern):
            return True
    return False


class SourceWalker:
    """Walks a tree in lexical pre-order and yields its Go source directories."""

    def __init__(self, exclude: Sequence[str] = (), *, include_tests: bool = True) -> None:
        self.exclude = list(exclude)
        self.include_tests = include_tests

    def walk(self, root: str) -> Iterator[SourceDirectory]:
        root_path = Path(root).expanduser()
        if not root_path.exists():
            raise SourceDiscoveryError(f"Source path not found: {root}")
        if not root_path.is_dir():
            raise SourceDiscoveryError(f"Source path is not a directory: {root}")

        top = str(root_path)
        for dirpath, dirnames, filenames in os.walk(top, onerror=_raise_walk_error):
            rel_dir = os.path.relpath(dirpath, top)
            rel_dir = "" if rel_dir == "." else rel_dir.replace(os.sep, "/")

            kept = []
            for name in sorted(dirnames):
                rel_path = f"{rel_dir}/{name}" if rel_dir else name
                if _is_excluded(name, rel_path, self.exclude):
                    logger.debug("Skipping excluded directory %s", rel_path)
                    continue
                kept.append(name)
            dirnames[:] = kept

            files = []
            for name in sorted(filenames):
                if not self._is_source(name):
                    continue
                rel_path = f"{rel_dir}/{name}" if rel_dir else name
                if _is_excluded(name, rel_path, self.exclude):
                    continue
                files.append(os.path.normpath(os.path.join(dirpath, name)))
            if files:
                yield SourceDirectory(path=os.path.normpath(dirpath), files=files)

    def _is_source(self, name: str) -> bool:
        if not name.endswith(_GO_SUFFIX):
            return False
        return self.include_tests or not name.endswith(_TEST_SUFFIX)


__all__ = ["SourceDirectory", "SourceWalker"]
