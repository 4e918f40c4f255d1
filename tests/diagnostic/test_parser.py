# topmark:header:start
#
#   project      : TsMark
#   file         : test_parser.py
#   file_relpath : tests/diagnostic/test_parser.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Report parsing: matching lines, dropped lines, ordering."""

from __future__ import annotations

from tests.conftest import mark_pipeline, parametrize
from tsmark.diagnostic import Diagnostic, parse_diagnostic_line, parse_report_lines


@mark_pipeline
def test_parses_a_diagnostic_line() -> None:
    """All five fields are captured; line and column become integers."""
    diag = parse_diagnostic_line(
        "src/app.ts(12,7): error TS2322: Type 'string' is not assignable to type 'number'."
    )

    assert diag == Diagnostic(
        file_path="src/app.ts",
        line=12,
        column=7,
        code="TS2322",
        message="Type 'string' is not assignable to type 'number'.",
    )
    assert diag.index == 11


@mark_pipeline
def test_str_renders_report_form() -> None:
    """`str(Diagnostic)` reproduces the report line."""
    line = "lib/x.ts(4,1): error TS7006: Parameter 'a' implicitly has an 'any' type."
    diag = parse_diagnostic_line(line)
    assert diag is not None
    assert str(diag) == line


@mark_pipeline
def test_trailing_carriage_return_is_ignored() -> None:
    """Reports captured with CRLF endings still parse, without a stray ``\\r``."""
    diag = parse_diagnostic_line("a.ts(1,1): error TS1005: ';' expected.\r")
    assert diag is not None
    assert diag.message == "';' expected."


@mark_pipeline
@parametrize(
    "line",
    [
        "",
        "Found 3 errors in 2 files.",
        "  The last overload gave the following error.",
        "a.ts(1,1): warning TS6133: 'x' is declared but its value is never read.",
        "a.ts(1): error TS1005: ';' expected.",
        "a.ts(x,1): error TS1005: ';' expected.",
        "a.ts(1,1): error 1005: ';' expected.",
        "a.ts(0,1): error TS1005: ';' expected.",
    ],
)
def test_non_diagnostic_lines_are_dropped(line: str) -> None:
    """Anything that is not a well-formed, 1-based error line yields no record."""
    assert parse_diagnostic_line(line) is None


@mark_pipeline
def test_report_order_is_preserved_and_noise_dropped() -> None:
    """Records come out in input order; summary and continuation lines vanish."""
    report = [
        "b.ts(9,1): error TS1: second file first",
        "  continuation of the message above",
        "a.ts(2,3): error TS2: first file",
        "b.ts(1,1): error TS3: second file again",
        "",
        "Found 3 errors.",
    ]

    diags = parse_report_lines(report)

    assert [(d.file_path, d.line, d.code) for d in diags] == [
        ("b.ts", 9, "TS1"),
        ("a.ts", 2, "TS2"),
        ("b.ts", 1, "TS3"),
    ]


@mark_pipeline
def test_parsing_is_stateless_across_calls() -> None:
    """Parsing the same line repeatedly always succeeds."""
    line = "a.ts(3,1): error TS2304: Cannot find name 'foo'."
    assert all(parse_diagnostic_line(line) is not None for _ in range(5))
    assert len(parse_report_lines([line, line, line])) == 3
