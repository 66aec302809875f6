"""Tests for structscan.config."""

from __future__ import annotations

import argparse
from pathlib import Path

import pytest

from structscan.cli import _build_parser
from structscan.config import ConfigError, ScanConfig
from structscan.resolver import DEFAULT_MAX_DEPTH


def test_defaults_match_plain_invocation() -> None:
    config = ScanConfig.from_args(_build_parser().parse_args(["src"]))

    assert config == ScanConfig()
    assert config.include_tests is True
    assert config.exclude == []
    assert config.max_alias_depth == DEFAULT_MAX_DEPTH
    assert config.log_file is None


def test_from_args_reads_every_option(tmp_path: Path) -> None:
    log_file = tmp_path / "scan.log"
    args = _build_parser().parse_args(
        [
            "-v",
            "--exclude",
            "vendor",
            "--no-tests",
            "--max-alias-depth",
            "8",
            "--log-file",
            str(log_file),
            "src",
        ]
    )

    config = ScanConfig.from_args(args)

    assert config.verbose is True
    assert config.exclude == ["vendor"]
    assert config.include_tests is False
    assert config.max_alias_depth == 8
    assert config.log_file == log_file


def test_from_args_tolerates_partial_namespaces() -> None:
    config = ScanConfig.from_args(argparse.Namespace(exclude="testdata", max_alias_depth="12"))

    assert config.exclude == ["testdata"]
    assert config.max_alias_depth == 12
    assert config.verbose is False


def test_non_positive_depth_is_rejected() -> None:
    with pytest.raises(ConfigError):
        ScanConfig(max_alias_depth=0)
