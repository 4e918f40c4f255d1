# topmark:header:start
#
#   project      : TsMark
#   file         : test_formatter.py
#   file_relpath : tests/pipeline/test_formatter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Comment syntax selection (markup heuristic) and block rendering."""

from __future__ import annotations

from dataclasses import dataclass, field

from tests.conftest import make_config, mark_pipeline, parametrize
from tsmark.pipeline.formatter import (
    MARKUP_HINT_RE,
    FixedDecision,
    SiteContext,
    SiteFormatter,
    context_window,
)
from tsmark.pipeline.grouper import EditSite
from tsmark.pipeline.processors.types import CommentSyntax

NOTE = "// @ts-expect-error TODO: fix error and remove"


@dataclass
class RecordingDecision:
    """Decision source answering ``answer`` and remembering what it was asked."""

    answer: CommentSyntax
    asked: list[SiteContext] = field(default_factory=lambda: [])

    def __call__(self, site: SiteContext) -> CommentSyntax:
        self.asked.append(site)
        return self.answer


JSX_LINES = [
    "export function App() {",
    "  return (",
    "    <div>",
    "      {user.name}",
    "    </div>",
    "  );",
    "}",
]


@mark_pipeline
@parametrize(
    "line, expected",
    [
        ("    <div>", True),
        ("  return <App />;", True),
        ("    </div>", True),
        ('<Foo bar={1} />', True),
        ("const x = foo<Bar>(y);", False),
        ("if (a < b) {", False),
        ("const y = { a: 1 };", False),
    ],
)
def test_markup_hint(line: str, expected: bool) -> None:
    """The heuristic flags tag-like fragments and JSX attributes only."""
    assert bool(MARKUP_HINT_RE.search(line)) is expected


@mark_pipeline
def test_context_window_is_clamped() -> None:
    """The window is clamped, excludes the line at +radius and tracks the target."""
    lines = [str(i) for i in range(10)]

    assert context_window(lines, 0, 3) == (["0", "1", "2"], 0)
    assert context_window(lines, 5, 2) == (["3", "4", "5", "6"], 2)
    assert context_window(lines, 9, 5) == (["4", "5", "6", "7", "8", "9"], 5)
    assert context_window(lines, 4, 0) == (["4"], 0)


@mark_pipeline
def test_plain_for_non_markup_extension() -> None:
    """`.ts` files never trigger a question, even with tag-like content."""
    decide = RecordingDecision(CommentSyntax.EMBEDDED)
    formatter = SiteFormatter(make_config(), decide)

    syntax = formatter.choose_syntax("src/app.ts", EditSite(4, ("m",)), JSX_LINES)

    assert syntax is CommentSyntax.PLAIN
    assert decide.asked == []


@mark_pipeline
def test_plain_for_markup_file_without_markup_context() -> None:
    """A `.tsx` site surrounded by plain code is not ambiguous."""
    decide = RecordingDecision(CommentSyntax.EMBEDDED)
    formatter = SiteFormatter(make_config(context=1), decide)
    lines = ["const a = 1;", "const b: number = 'x';", "const c = 3;", "", "<div />"]

    assert formatter.choose_syntax("a.tsx", EditSite(2, ("m",)), lines) is CommentSyntax.PLAIN
    assert decide.asked == []


@mark_pipeline
def test_markup_at_window_end_is_ignored() -> None:
    """Markup exactly ``context`` lines below the target does not make it ambiguous."""
    decide = RecordingDecision(CommentSyntax.EMBEDDED)
    formatter = SiteFormatter(make_config(context=2), decide)
    lines = ["const a: number = 'x';", "const b = 2;", "<div />"]

    assert formatter.choose_syntax("a.tsx", EditSite(1, ("m",)), lines) is CommentSyntax.PLAIN
    assert decide.asked == []


@mark_pipeline
def test_ambiguous_site_is_delegated_with_context() -> None:
    """Markup around a `.tsx` target asks the decision source with full context."""
    decide = RecordingDecision(CommentSyntax.EMBEDDED)
    formatter = SiteFormatter(make_config(context=2), decide)

    site_in = EditSite(4, ("Property 'name' does not exist.",))
    syntax = formatter.choose_syntax("src/App.tsx", site_in, JSX_LINES, files_remaining=3)

    assert syntax is CommentSyntax.EMBEDDED
    (site,) = decide.asked
    assert site.file_path == "src/App.tsx"
    assert site.line == 4
    assert site.messages == ("Property 'name' does not exist.",)
    assert site.context_lines == tuple(JSX_LINES[1:5])
    assert site.focus_index == 2
    assert site.target == "      {user.name}"
    assert site.files_remaining == 3


@mark_pipeline
def test_markup_extensions_are_configurable() -> None:
    """Only the configured suffixes are considered markup dialects."""
    decide = RecordingDecision(CommentSyntax.EMBEDDED)
    formatter = SiteFormatter(make_config(markup_extensions=[".vue"]), decide)

    assert formatter.choose_syntax("a.tsx", EditSite(4, ("m",)), JSX_LINES) is CommentSyntax.PLAIN
    assert formatter.choose_syntax("a.vue", EditSite(4, ("m",)), JSX_LINES) is (
        CommentSyntax.EMBEDDED
    )


@mark_pipeline
def test_render_plain_block_with_directive_note_last() -> None:
    """One line per message, then the directive note, all indented."""
    formatter = SiteFormatter(make_config(), FixedDecision(CommentSyntax.PLAIN))

    block = formatter.render(["first", "second"], CommentSyntax.PLAIN, 2)

    assert block == ["  // first", "  // second", f"  {NOTE}"]


@mark_pipeline
def test_render_embedded_block() -> None:
    """Embedded syntax wraps every line in an expression comment."""
    formatter = SiteFormatter(make_config(todo="FIXME"), FixedDecision(CommentSyntax.PLAIN))

    block = formatter.render(["oops"], CommentSyntax.EMBEDDED, 4)

    assert block == [
        "    {/* oops */}",
        "    {/* @ts-expect-error FIXME: fix error and remove */}",
    ]


@mark_pipeline
def test_render_skip_block_is_empty() -> None:
    """A skipped site renders no line at all."""
    formatter = SiteFormatter(make_config(), FixedDecision(CommentSyntax.PLAIN))
    assert formatter.render(["oops"], CommentSyntax.SKIP, 0) == []


@mark_pipeline
def test_format_site_uses_the_decision() -> None:
    """`format_site` combines syntax selection and rendering."""
    formatter = SiteFormatter(make_config(), FixedDecision(CommentSyntax.SKIP))

    assert formatter.format_site("a.jsx", EditSite(4, ("m",)), JSX_LINES, 6) == []
    assert formatter.format_site("a.js", EditSite(4, ("m",)), JSX_LINES, 6) == [
        "      // m",
        f"      {NOTE}",
    ]
