# topmark:header:start
#
#   project      : TsMark
#   file         : test_apply.py
#   file_relpath : tests/cli/test_apply.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test: `apply` command behavior, output and configuration."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tests.cli.conftest import assert_SUCCESS, run_cli_in
from tests.conftest import mark_cli, parametrize, read_lines, write_lines

if TYPE_CHECKING:
    from pathlib import Path

NOTE = "@ts-expect-error TODO: fix error and remove"
MESSAGE = "Parameter 'x' implicitly has an 'any' type."
SOURCE = ["export function f(x) {", "  const y = 1;", "", "  doThing(x);", "}", ""]

JSX = [
    "export const App = () => (",
    "  <main>",
    "    {user.name}",
    "  </main>",
    ");",
    "",
]


def _project(tmp_path: Path) -> None:
    write_lines(tmp_path / "lib" / "x.ts", SOURCE)
    write_lines(tmp_path / "tsc.log", [f"lib/x.ts(4,1): error TS7006: {MESSAGE}", ""])


def _jsx_project(tmp_path: Path) -> None:
    write_lines(tmp_path / "src" / "App.tsx", JSX)
    write_lines(tmp_path / "tsc.log", ["src/App.tsx(3,5): error TS2304: Cannot find name 'user'."])


@mark_cli
def test_apply_inserts_directive(tmp_path: Path) -> None:
    """The source file gets the message and directive above the error line."""
    _project(tmp_path)

    result = run_cli_in(tmp_path, ["--no-color", "apply", "tsc.log", "--no-config"])

    assert_SUCCESS(result)
    assert read_lines(tmp_path / "lib" / "x.ts")[3:6] == [
        f"  // {MESSAGE}",
        f"  // {NOTE}",
        "  doThing(x);",
    ]
    assert "Done: inserted 1 directive(s) in 1 file(s), 0 site(s) skipped." in result.output


@mark_cli
def test_apply_dry_previews_without_writing(tmp_path: Path) -> None:
    """``--dry`` prints the pseudo-diff and leaves the file untouched."""
    _project(tmp_path)

    result = run_cli_in(tmp_path, ["--no-color", "apply", "tsc.log", "--dry", "--no-config"])

    assert_SUCCESS(result)
    assert read_lines(tmp_path / "lib" / "x.ts") == SOURCE
    lines = result.output.splitlines()
    start = lines.index("lib/x.ts")
    assert lines[start + 1 : start + 4] == [
        f" 4:   // {MESSAGE}",
        f" 5:   // {NOTE}",
        " 6:   doThing(x);",
    ]
    assert "Dry run: would insert 1 directive(s)" in result.output


@mark_cli
def test_apply_todo_option(tmp_path: Path) -> None:
    """``--todo`` replaces the TODO prefix of the directive note."""
    _project(tmp_path)

    result = run_cli_in(tmp_path, ["apply", "tsc.log", "--todo", "JIRA-123", "--no-config"])

    assert_SUCCESS(result)
    assert "  // @ts-expect-error JIRA-123: fix error and remove" in read_lines(
        tmp_path / "lib" / "x.ts"
    )


@mark_cli
def test_apply_verbose_traces_io(tmp_path: Path) -> None:
    """``--verbose`` reports every successful read and write."""
    _project(tmp_path)

    result = run_cli_in(tmp_path, ["--no-color", "apply", "tsc.log", "--verbose", "--no-config"])

    assert_SUCCESS(result)
    assert "[INFO] Reading tsc.log...OK" in result.output
    assert "[INFO] Reading lib/x.ts...OK" in result.output
    assert "[INFO] Writing lib/x.ts...OK" in result.output


@mark_cli
def test_apply_second_run_is_a_no_op(tmp_path: Path) -> None:
    """Re-running with the shifted line number inserts nothing."""
    _project(tmp_path)
    assert_SUCCESS(run_cli_in(tmp_path, ["apply", "tsc.log", "--no-config"]))
    after_first = (tmp_path / "lib" / "x.ts").read_bytes()
    write_lines(tmp_path / "tsc.log", [f"lib/x.ts(6,1): error TS7006: {MESSAGE}"])

    result = run_cli_in(tmp_path, ["--no-color", "apply", "tsc.log", "--no-config", "--verbose"])

    assert_SUCCESS(result)
    assert (tmp_path / "lib" / "x.ts").read_bytes() == after_first
    assert "lib/x.ts:6: skipped (already suppressed)" in result.output


@mark_cli
@parametrize(
    "answer, expected",
    [
        ("\n", ["    // Cannot find name 'user'.", f"    // {NOTE}"]),
        ("jsx\n", ["    {/* Cannot find name 'user'. */}", f"    {{/* {NOTE} */}}"]),
        ("skip\n", []),
        ("  SKIP \n", []),
    ],
)
def test_apply_prompts_for_markup_sites(tmp_path: Path, answer: str, expected: list[str]) -> None:
    """Ambiguous `.tsx` sites are resolved by the user's answer."""
    _jsx_project(tmp_path)

    result = run_cli_in(
        tmp_path, ["--no-color", "apply", "tsc.log", "--no-config"], input_text=answer
    )

    assert_SUCCESS(result)
    assert "File: src/App.tsx" in result.output
    assert "Status: 0 files remaining" in result.output
    assert " - Cannot find name 'user'." in result.output
    assert " >     {user.name}" in result.output
    assert "Format: type anything for JSX..." in result.output
    assert read_lines(tmp_path / "src" / "App.tsx") == JSX[:2] + expected + JSX[2:]


@mark_cli
def test_apply_ambiguous_option_skips_the_prompt(tmp_path: Path) -> None:
    """``--ambiguous embedded`` answers every question up front."""
    _jsx_project(tmp_path)

    result = run_cli_in(
        tmp_path, ["--no-color", "apply", "tsc.log", "--no-config", "--ambiguous", "embedded"]
    )

    assert_SUCCESS(result)
    assert "Format:" not in result.output
    assert read_lines(tmp_path / "src" / "App.tsx")[2] == "    {/* Cannot find name 'user'. */}"


@mark_cli
def test_apply_reads_project_config(tmp_path: Path) -> None:
    """A discovered ``tsmark.toml`` is honored unless ``--no-config`` is given."""
    _project(tmp_path)
    write_lines(tmp_path / "tsmark.toml", ["root = true", 'todo = "CFG"', ""])

    assert_SUCCESS(run_cli_in(tmp_path, ["apply", "tsc.log", "--dry", "--no-config"]))
    result = run_cli_in(tmp_path, ["--no-color", "apply", "tsc.log", "--dry"])

    assert_SUCCESS(result)
    assert "@ts-expect-error CFG: fix error and remove" in result.output


@mark_cli
def test_apply_cli_option_beats_config_file(tmp_path: Path) -> None:
    """Command line options override values from ``--config`` files."""
    _project(tmp_path)
    write_lines(tmp_path / "ci.toml", ['todo = "CFG"', ""])

    result = run_cli_in(
        tmp_path,
        ["--no-color", "apply", "tsc.log", "--dry", "--no-config", "--config", "ci.toml",
         "--todo", "CLI"],
    )

    assert_SUCCESS(result)
    assert "@ts-expect-error CLI: fix error and remove" in result.output


@mark_cli
def test_apply_root_resolves_report_paths(tmp_path: Path) -> None:
    """``--root`` is the base of relative paths in the report."""
    _project(tmp_path / "web")
    (tmp_path / "logs").mkdir()
    (tmp_path / "web" / "tsc.log").rename(tmp_path / "logs" / "tsc.log")

    result = run_cli_in(
        tmp_path, ["apply", "logs/tsc.log", "--root", "web", "--no-config"]
    )

    assert_SUCCESS(result)
    assert read_lines(tmp_path / "web" / "lib" / "x.ts")[4] == f"  // {NOTE}"


@mark_cli
def test_apply_diff_shows_unified_diff(tmp_path: Path) -> None:
    """``--diff`` prints a unified diff of every changed file."""
    _project(tmp_path)

    result = run_cli_in(tmp_path, ["--no-color", "apply", "tsc.log", "--dry", "--diff", "--no-config"])

    assert_SUCCESS(result)
    assert "--- lib/x.ts (original)" in result.output
    assert "+++ lib/x.ts (updated)" in result.output
    assert f"+  // {NOTE}" in result.output


@mark_cli
def test_apply_sample_and_seed(tmp_path: Path) -> None:
    """``--sample`` restricts the run to a subset of the diagnostics."""
    write_lines(tmp_path / "a.ts", [f"l{i}" for i in range(1, 11)])
    write_lines(tmp_path / "tsc.log", [f"a.ts({i},1): error TS1: e{i}" for i in range(1, 11)])

    result = run_cli_in(
        tmp_path,
        ["--no-color", "apply", "tsc.log", "--sample", "4", "--seed", "3", "--no-config"],
    )

    assert_SUCCESS(result)
    assert "Done: inserted 4 directive(s) in 1 file(s)" in result.output
    assert len(read_lines(tmp_path / "a.ts")) == 10 + 4 * 2
