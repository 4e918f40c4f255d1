# topmark:header:start
#
#   project      : TsMark
#   file         : test_diff_render.py
#   file_relpath : tests/utils/test_diff_render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diff utils: unified diff of line buffers and colorized rendering."""

from __future__ import annotations

from tsmark.utils.diff import render_patch, unified_diff


def test_unified_diff_shows_inserted_block() -> None:
    """Only the inserted lines are marked, with report-relative headers."""
    diff = unified_diff(["a", "b"], ["a", "// x", "b"], "src/a.ts")

    assert diff[0] == "--- src/a.ts (original)"
    assert diff[1] == "+++ src/a.ts (updated)"
    assert diff[2].startswith("@@")
    assert [line for line in diff[3:] if line.startswith("+")] == ["+// x"]
    assert not any(line.startswith("-") for line in diff[3:])


def test_unified_diff_of_identical_buffers_is_empty() -> None:
    """No change means no diff lines."""
    assert unified_diff(["a"], ["a"], "a.ts") == []


def test_render_patch_accepts_str_and_list() -> None:
    """`render_patch` should accept both a diff string and a sequence of lines."""
    diff_text = "--- a\n+++ b\n-foo\n+bar\n"
    s1 = render_patch(diff_text)
    s2 = render_patch(diff_text.splitlines(False))

    assert isinstance(s1, str) and isinstance(s2, str) and s1 and s2
    assert "foo" in s1 and "bar" in s2


def test_render_patch_line_numbers() -> None:
    """Line numbers are zero-padded prefixes."""
    assert "0002|" in render_patch(["+a", "-b"], show_line_numbers=True)


def test_render_patch_empty_input_is_safe() -> None:
    """Empty diff input should not raise and should return a string."""
    assert isinstance(render_patch(""), str)
