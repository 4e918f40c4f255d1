# topmark:header:start
#
#   project      : TsMark
#   file         : prompt.py
#   file_relpath : src/tsmark/cli/prompt.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Interactive resolution of ambiguous comment syntax.

For every site flagged by the markup heuristic the user sees the file, the number of
files left, the diagnostic messages and the surrounding lines (target highlighted), and
answers a single question:

* empty answer: plain ``//`` comment,
* ``skip``: no insertion for this site,
* anything else: JSX-embedded ``{/* */}`` comment.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tsmark.config.logging import get_logger
from tsmark.pipeline.processors.types import CommentSyntax

if TYPE_CHECKING:
    from tsmark.cli_shared.console_api import ConsoleLike
    from tsmark.config.logging import TsmarkLogger
    from tsmark.pipeline.formatter import SiteContext

logger: TsmarkLogger = get_logger(__name__)

SKIP_ANSWER = "skip"


def syntax_from_answer(answer: str | None) -> CommentSyntax:
    """Map a prompt answer to a comment syntax (case and surrounding blanks ignored)."""
    key: str = (answer or "").strip().lower()
    if key == "":
        return CommentSyntax.PLAIN
    if key == SKIP_ANSWER:
        return CommentSyntax.SKIP
    return CommentSyntax.EMBEDDED


class ClickPromptDecision:
    """Decision source asking the user on the terminal.

    Args:
        console (ConsoleLike): Where the site summary is printed.
    """

    def __init__(self, console: ConsoleLike) -> None:
        self.console: ConsoleLike = console

    def show_site(self, site: SiteContext) -> None:
        """Print the summary of ``site``."""
        c = self.console
        c.print(f"{c.styled('File:', fg='magenta')} {site.file_path}")
        c.print(f"{c.styled('Status:', fg='cyan')} {site.files_remaining} files remaining")
        c.print()

        c.print(c.styled("Errors:", fg="red"))
        for message in site.messages:
            c.print(f" - {message}")
        c.print()

        c.print(c.styled("Context:", fg="yellow"))
        for idx, line in enumerate(site.context_lines):
            shown: str = c.styled(line, fg="yellow") if idx == site.focus_index else line
            c.print(f" > {shown}")
        c.print()

    def __call__(self, site: SiteContext) -> CommentSyntax:
        """Show ``site`` and return the syntax chosen by the user."""
        self.show_site(site)
        answer: str = click.prompt(
            f"{self.console.styled('Format:', fg='blue')} type anything for JSX...",
            default="",
            show_default=False,
            prompt_suffix=" ",
        )
        self.console.print()

        syntax: CommentSyntax = syntax_from_answer(answer)
        logger.debug("User chose %s for %s:%d", syntax.value, site.file_path, site.line)
        return syntax
