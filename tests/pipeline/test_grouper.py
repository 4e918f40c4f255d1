# topmark:header:start
#
#   project      : TsMark
#   file         : test_grouper.py
#   file_relpath : tests/pipeline/test_grouper.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Grouping diagnostics into per-file, descending-line plans."""

from __future__ import annotations

from tests.conftest import mark_pipeline
from tsmark.diagnostic import Diagnostic
from tsmark.pipeline.grouper import EditSite, group_diagnostics


def _diag(file_path: str, line: int, message: str) -> Diagnostic:
    return Diagnostic(file_path=file_path, line=line, column=1, code="TS1", message=message)


@mark_pipeline
def test_files_keep_first_seen_order() -> None:
    """Plans follow the order in which files first appear in the report."""
    plans = group_diagnostics(
        [_diag("b.ts", 1, "m1"), _diag("a.ts", 1, "m2"), _diag("b.ts", 2, "m3")]
    )
    assert [p.file_path for p in plans] == ["b.ts", "a.ts"]


@mark_pipeline
def test_sites_are_sorted_by_descending_line() -> None:
    """Sites are ordered highest line first, with distinct lines."""
    plans = group_diagnostics(
        [
            _diag("a.ts", 3, "c"),
            _diag("a.ts", 10, "j"),
            _diag("a.ts", 1, "a"),
            _diag("a.ts", 7, "g"),
        ]
    )
    lines = [s.line for s in plans[0].sites]
    assert lines == [10, 7, 3, 1]
    assert len(set(lines)) == len(lines)


@mark_pipeline
def test_same_line_messages_are_merged_in_encounter_order() -> None:
    """Two errors on one line become one site carrying both messages."""
    plans = group_diagnostics(
        [_diag("a.ts", 4, "first"), _diag("a.ts", 2, "other"), _diag("a.ts", 4, "second")]
    )

    assert plans[0].sites == (
        EditSite(line=4, messages=("first", "second")),
        EditSite(line=2, messages=("other",)),
    )
    assert plans[0].n_messages == 3


@mark_pipeline
def test_empty_input_yields_no_plans() -> None:
    """No diagnostics, no plans."""
    assert group_diagnostics([]) == []
