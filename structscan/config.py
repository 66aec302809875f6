"""Run configuration for structscan, assembled from command-line options."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Optional, Sequence

from .errors import StructScanError
from .resolver import DEFAULT_MAX_DEPTH


class ConfigError(StructScanError):
    """Raised when run options are inconsistent."""


@dataclass
class ScanConfig:
    """Options controlling discovery, resolution and logging for one run."""

    exclude: List[str] = field(default_factory=list)
    include_tests: bool = True
    max_alias_depth: int = DEFAULT_MAX_DEPTH
    verbose: bool = False
    log_file: Optional[Path] = None

    def __post_init__(self) -> None:
        if self.max_alias_depth < 1:
            raise ConfigError(f"max_alias_depth must be positive, got {self.max_alias_depth}")

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "ScanConfig":
        depth = _as_int(getattr(args, "max_alias_depth", None))
        log_file = _as_str(getattr(args, "log_file", None))
        return cls(
            exclude=_as_str_list(getattr(args, "exclude", None)),
            include_tests=not bool(getattr(args, "no_tests", False)),
            max_alias_depth=depth if depth is not None else DEFAULT_MAX_DEPTH,
            verbose=bool(getattr(args, "verbose", False)),
            log_file=Path(log_file).expanduser() if log_file else None,
        )


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float)) and str(item).strip()]
    return []


__all__ = ["ConfigError", "ScanConfig"]
