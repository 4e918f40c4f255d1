# topmark:header:start
#
#   project      : TsMark
#   file         : test_version.py
#   file_relpath : tests/cli/test_version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test: `version` command output and the bare group."""

from __future__ import annotations

from tests.cli.conftest import assert_SUCCESS, run_cli
from tests.conftest import mark_cli
from tsmark.constants import TSMARK_VERSION


@mark_cli
def test_version_outputs_installed_version() -> None:
    """It prints the installed distribution version and nothing else."""
    result = run_cli(["--no-color", "version"])

    assert_SUCCESS(result)
    assert result.output.strip() == TSMARK_VERSION


@mark_cli
def test_group_without_command_prints_hint_and_help() -> None:
    """Invoking the bare group shows a hint and the help text."""
    result = run_cli(["--no-color"])

    assert_SUCCESS(result)
    assert "tsmark apply REPORT" in result.output
    assert "apply" in result.output and "version" in result.output
