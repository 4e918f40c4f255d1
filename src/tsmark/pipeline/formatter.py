# topmark:header:start
#
#   project      : TsMark
#   file         : formatter.py
#   file_relpath : src/tsmark/pipeline/formatter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Decide the comment syntax of an insertion site and render its block.

A plain ``//`` comment is correct everywhere except between JSX tags, where it would be
rendered as text. Deciding that exactly would require parsing the file; instead a cheap
lexical heuristic flags sites in markup files whose surroundings *look* like markup, and
the decision for those sites is delegated to an injected `DecisionSource`:

* `tsmark.cli.prompt.ClickPromptDecision` asks the user interactively;
* `FixedDecision` always answers the same (batch mode and tests).

The heuristic is best-effort on purpose: it may flag sites that are plain code (e.g. a
generic call ``foo<Bar>()``), which only costs a question.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final, Protocol

from tsmark.config.logging import get_logger
from tsmark.pipeline.processors import get_processor
from tsmark.pipeline.processors.types import CommentSyntax

if TYPE_CHECKING:
    from collections.abc import Sequence

    from tsmark.config import Config
    from tsmark.config.logging import TsmarkLogger
    from tsmark.pipeline.grouper import EditSite

logger: TsmarkLogger = get_logger(__name__)

# Opening tag, self-closing tag end, closing tag start, or a JSX expression attribute.
MARKUP_HINT_RE: Final[re.Pattern[str]] = re.compile(r"(([^\w]<\w+)|(/>)|(</)|(={))")


def context_window(lines: Sequence[str], index: int, radius: int) -> tuple[list[str], int]:
    """Return the lines surrounding ``index`` and the position of the target in it.

    Args:
        lines (Sequence[str]): The file lines.
        index (int): 0-based target index (must be within ``lines``).
        radius (int): Number of lines to take before the target; the window stops short of
            ``index + radius``, and always contains the target itself.

    Returns:
        tuple[list[str], int]: The window (clamped to the buffer) and the index of the
        target line inside the window.
    """
    start: int = max(0, index - radius)
    end: int = min(len(lines), max(index + radius, index + 1))
    return list(lines[start:end]), index - start


def looks_like_markup(lines: Sequence[str]) -> bool:
    """Return True if any line matches the markup heuristic."""
    return any(MARKUP_HINT_RE.search(line) for line in lines)


@dataclass(frozen=True, slots=True)
class SiteContext:
    """What a decision source gets to see about an ambiguous site.

    Attributes:
        file_path (str): Path as written in the report.
        line (int): 1-based target line.
        messages (tuple[str, ...]): Diagnostic messages reported on the target line.
        context_lines (tuple[str, ...]): Lines around the target.
        focus_index (int): Index of the target line within ``context_lines``.
        files_remaining (int): Number of files still to process after this one.
    """

    file_path: str
    line: int
    messages: tuple[str, ...]
    context_lines: tuple[str, ...]
    focus_index: int
    files_remaining: int

    @property
    def target(self) -> str:
        """Return the target line itself."""
        return self.context_lines[self.focus_index]


class DecisionSource(Protocol):
    """Callable resolving the comment syntax of an ambiguous site."""

    def __call__(self, site: SiteContext) -> CommentSyntax:
        """Return the syntax to use for ``site``."""
        ...


@dataclass(frozen=True, slots=True)
class FixedDecision:
    """Decision source that always answers ``syntax``."""

    syntax: CommentSyntax

    def __call__(self, site: SiteContext) -> CommentSyntax:
        """Return the fixed syntax regardless of ``site``."""
        logger.trace("Fixed decision for %s:%d: %s", site.file_path, site.line, self.syntax.value)
        return self.syntax


class SiteFormatter:
    """Render insertion blocks for the sites of one run.

    Args:
        config (Config): Frozen runtime configuration (directive note, context radius,
            markup extensions).
        decide (DecisionSource): Resolves sites flagged by the markup heuristic.
    """

    def __init__(self, config: Config, decide: DecisionSource) -> None:
        self.config: Config = config
        self.decide: DecisionSource = decide

    def is_markup_file(self, file_path: str) -> bool:
        """Return True if ``file_path`` has one of the configured markup extensions."""
        return file_path.endswith(tuple(self.config.markup_extensions))

    def choose_syntax(
        self,
        file_path: str,
        site: EditSite,
        lines: Sequence[str],
        *,
        files_remaining: int = 0,
    ) -> CommentSyntax:
        """Select the comment syntax for ``site``.

        Args:
            file_path (str): Path as written in the report.
            site (EditSite): The insertion site (target line must be within ``lines``).
            lines (Sequence[str]): Current content of the file.
            files_remaining (int): Files still to process after this one (shown to the user).

        Returns:
            CommentSyntax: ``PLAIN`` unless the site is ambiguous, else the decision
            source's answer.
        """
        if not self.is_markup_file(file_path):
            return CommentSyntax.PLAIN

        window, focus = context_window(lines, site.line - 1, self.config.context)
        if not looks_like_markup(window):
            return CommentSyntax.PLAIN

        logger.debug("Ambiguous comment syntax at %s:%d", file_path, site.line)
        return self.decide(
            SiteContext(
                file_path=file_path,
                line=site.line,
                messages=site.messages,
                context_lines=tuple(window),
                focus_index=focus,
                files_remaining=files_remaining,
            )
        )

    def render(self, messages: Sequence[str], syntax: CommentSyntax, offset: int) -> list[str]:
        """Render the messages and the directive note as indented comment lines.

        Args:
            messages (Sequence[str]): Diagnostic messages, one comment line each.
            syntax (CommentSyntax): Comment syntax to apply.
            offset (int): Number of leading spaces of the target line.

        Returns:
            list[str]: The insertion block; empty when the syntax renders nothing.
        """
        processor = get_processor(syntax)
        indent: str = " " * offset
        block: list[str] = []
        for text in (*messages, self.config.directive_note):
            rendered: str | None = processor.render_line(text)
            if rendered is None:
                continue
            block.append(f"{indent}{rendered}")
        return block

    def format_site(
        self,
        file_path: str,
        site: EditSite,
        lines: Sequence[str],
        offset: int,
        *,
        files_remaining: int = 0,
    ) -> list[str]:
        """Choose the syntax for ``site`` and render its insertion block."""
        syntax: CommentSyntax = self.choose_syntax(
            file_path, site, lines, files_remaining=files_remaining
        )
        return self.render(site.messages, syntax, offset)
