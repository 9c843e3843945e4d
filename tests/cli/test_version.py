# topmark:header:start
#
#   project      : TCInspect
#   file         : test_version.py
#   file_relpath : tests/cli/test_version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test: `version` command output and entry point basics."""

from __future__ import annotations

from tests.cli.conftest import assert_SUCCESS, run_cli
from tcinspect.constants import TCINSPECT_VERSION


def test_version_outputs_installed_version() -> None:
    """It should output the PEP 440 version string (exact match)."""
    result = run_cli(["version"])

    assert_SUCCESS(result)
    assert result.stdout.strip() == TCINSPECT_VERSION


def test_group_without_command_prints_help() -> None:
    """Invoking the bare group shows a hint and the help text."""
    result = run_cli([])

    assert_SUCCESS(result)
    assert "tcinspect emit" in result.stdout
    assert "inspection-types" in result.stdout
