# topmark:header:start
#
#   project      : TsMark
#   file         : __init__.py
#   file_relpath : src/tsmark/diagnostic/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Type-checker diagnostics: the record model and the report parser."""

from __future__ import annotations

from tsmark.diagnostic.model import Diagnostic
from tsmark.diagnostic.parser import parse_diagnostic_line, parse_report_lines

__all__ = [
    "Diagnostic",
    "parse_diagnostic_line",
    "parse_report_lines",
]
