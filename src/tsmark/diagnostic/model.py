# topmark:header:start
#
#   project      : TsMark
#   file         : model.py
#   file_relpath : src/tsmark/diagnostic/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Structured diagnostic record produced by the report parser."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """One error reported by a type-checker run.

    Attributes:
        file_path (str): Path of the offending file, exactly as written in the report.
        line (int): 1-based line number (the type-checker's convention).
        column (int): 1-based column number.
        code (str): Error code, e.g. ``"TS2322"``.
        message (str): Human-readable error text.
    """

    file_path: str
    line: int
    column: int
    code: str
    message: str

    @property
    def index(self) -> int:
        """Return the 0-based line index used when addressing a line buffer."""
        return self.line - 1

    def __str__(self) -> str:
        """Render the diagnostic back in report form."""
        return f"{self.file_path}({self.line},{self.column}): error {self.code}: {self.message}"
