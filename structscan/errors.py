"""Error types raised by structscan."""

from __future__ import annotations

from typing import Optional


class StructScanError(RuntimeError):
    """Base class for fatal scan failures."""


class SourceDiscoveryError(StructScanError):
    """Raised when the source tree cannot be walked or a file cannot be read."""


class SourceParseError(StructScanError):
    """Raised when a Go file does not parse cleanly."""

    def __init__(self, path: str, line: Optional[int] = None, detail: str = "syntax error") -> None:
        location = f"{path}:{line}" if line is not None else path
        super().__init__(f"{location}: {detail}")
        self.path = path
        self.line = line


__all__ = ["SourceDiscoveryError", "SourceParseError", "StructScanError"]
