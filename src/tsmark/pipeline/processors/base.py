# topmark:header:start
#
#   project      : TsMark
#   file         : base.py
#   file_relpath : src/tsmark/pipeline/processors/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Comment processor base class.

A *comment processor* knows how to wrap one line of text in the comment syntax of a
given context. Concrete processors set ``line_prefix`` / ``line_suffix``; the
registry (see `tsmark.pipeline.processors`) binds one processor instance to each
`CommentSyntax`.
"""

from __future__ import annotations

from typing import ClassVar

from tsmark.pipeline.processors.types import CommentSyntax


class CommentProcessor:
    """Base class for processors rendering single-line comments.

    Attributes:
        syntax (CommentSyntax): The syntax this processor implements (set on registration).
        line_prefix (str): Text emitted before the comment payload.
        line_suffix (str): Text emitted after the comment payload.
    """

    syntax: ClassVar[CommentSyntax]

    line_prefix: str = ""
    line_suffix: str = ""

    def render_line(self, text: str) -> str | None:
        """Wrap ``text`` in this processor's comment syntax.

        Args:
            text (str): Comment payload (a diagnostic message or the directive note).

        Returns:
            str | None: The rendered comment (without indentation), or ``None`` when the
            processor emits nothing.
        """
        return f"{self.line_prefix}{text}{self.line_suffix}"

    def __repr__(self) -> str:
        """Return a string representation."""
        return (
            f"{self.__class__.__name__}(prefix={self.line_prefix!r}, suffix={self.line_suffix!r})"
        )
