# topmark:header:start
#
#   project      : TsMark
#   file         : diff.py
#   file_relpath : src/tsmark/utils/diff.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unified diff generation and colorized preview."""

from __future__ import annotations

import difflib
from typing import Sequence

from yachalk import chalk

from tsmark.config.logging import get_logger

logger = get_logger(__name__)


def unified_diff(
    original: Sequence[str],
    updated: Sequence[str],
    path: str,
    *,
    context: int = 3,
) -> list[str]:
    """Return the unified diff between two versions of a file.

    Args:
        original: Lines before the change (without delimiters).
        updated: Lines after the change (without delimiters).
        path: File name shown in the ``---``/``+++`` headers.
        context: Number of unchanged context lines around each hunk.

    Returns:
        The diff lines (empty when both versions are equal).
    """
    diff: list[str] = list(
        difflib.unified_diff(
            list(original),
            list(updated),
            fromfile=f"{path} (original)",
            tofile=f"{path} (updated)",
            n=context,
            lineterm="",
        )
    )
    logger.trace("Diff for %s: %d line(s)", path, len(diff))
    return diff


def render_patch(patch: Sequence[str] | str, show_line_numbers: bool = False) -> str:
    """Render a colorized preview of a unified diff.

    Args:
        patch: A unified diff as **either** a sequence of lines **or** a single
            multiline string.
        show_line_numbers: Whether to prefix output with line numbers.

    Returns:
        The formatted, colorized diff preview.
    """
    if isinstance(patch, str):
        lines: list[str] = patch.splitlines(keepends=False)
    else:
        lines = list(patch)

    def process_line(line: str) -> str:
        # Make stray control characters visible
        content = line.replace("\r", "\\r").replace("\n", "\\n")
        match line[:1]:
            case "-":
                return chalk.bold.red(content)
            case "+":
                return chalk.bold.green(content)
            case "@":
                return chalk.cyan(content)
            case _:
                return chalk.bold.white(content)

    if show_line_numbers:
        return chalk.gray(
            "".join(f"{i:04d}|{process_line(line)}\n" for i, line in enumerate(lines, 1))
        )
    return chalk.gray("".join(f"{process_line(line)}\n" for line in lines))
