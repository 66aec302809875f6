"""Plain-text reporting of findings."""

from __future__ import annotations

import sys
from typing import Iterable, Optional, TextIO

from .models import Finding


def format_finding(finding: Finding) -> str:
    """Return ``<path>:<line> <signature>`` for one finding."""
    return f"{finding.path}:{finding.line} {finding.signature}"


class Reporter:
    """Writes one line per finding, in the order received."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self.stream = stream if stream is not None else sys.stdout
        self.count = 0

    def report(self, findings: Iterable[Finding]) -> int:
        for finding in findings:
            self.stream.write(format_finding(finding) + "\n")
            self.count += 1
        self.stream.flush()
        return self.count


__all__ = ["Reporter", "format_finding"]
