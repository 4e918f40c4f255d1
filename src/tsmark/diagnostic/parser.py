# topmark:header:start
#
#   project      : TsMark
#   file         : parser.py
#   file_relpath : src/tsmark/diagnostic/parser.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Parse a ``tsc`` diagnostic report into `Diagnostic` records.

Each report line is matched against the fixed shape::

    <file>(<line>,<column>): error <code>: <message>

Lines that do not match (summaries, continuation lines of multi-line messages, blank
lines, ...) are dropped silently: they contribute no record and raise no error.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Final

from tsmark.config.logging import get_logger
from tsmark.diagnostic.model import Diagnostic

if TYPE_CHECKING:
    from collections.abc import Iterable

    from tsmark.config.logging import TsmarkLogger

logger: TsmarkLogger = get_logger(__name__)

DIAGNOSTIC_RE: Final[re.Pattern[str]] = re.compile(
    r"^(?P<file_path>[^(]+)"
    r"\((?P<line>\d+),(?P<column>\d+)\)"
    r":\serror\s(?P<code>TS\d+):\s(?P<message>.*)$"
)


def parse_diagnostic_line(line: str) -> Diagnostic | None:
    """Parse a single report line.

    Args:
        line (str): One line of the report (a trailing ``\\r`` is ignored).

    Returns:
        Diagnostic | None: The parsed record, or ``None`` when the line is not a
        diagnostic or its line number is not a valid 1-based integer.
    """
    match: re.Match[str] | None = DIAGNOSTIC_RE.match(line.rstrip("\r\n"))
    if match is None:
        return None

    try:
        line_no = int(match["line"])
        column = int(match["column"])
    except ValueError:
        return None
    if line_no < 1:
        return None

    return Diagnostic(
        file_path=match["file_path"],
        line=line_no,
        column=column,
        code=match["code"],
        message=match["message"],
    )


def parse_report_lines(lines: Iterable[str]) -> list[Diagnostic]:
    """Parse report lines into diagnostics, preserving input order.

    Args:
        lines (Iterable[str]): Raw report lines.

    Returns:
        list[Diagnostic]: One record per matching line.
    """
    diagnostics: list[Diagnostic] = []
    dropped = 0
    for raw in lines:
        diag: Diagnostic | None = parse_diagnostic_line(raw)
        if diag is None:
            if raw.strip():
                dropped += 1
                logger.trace("Ignoring non-diagnostic report line: %r", raw)
            continue
        diagnostics.append(diag)

    logger.debug("Parsed %d diagnostic(s), ignored %d line(s)", len(diagnostics), dropped)
    return diagnostics
