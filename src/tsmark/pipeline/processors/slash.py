# topmark:header:start
#
#   project      : TsMark
#   file         : slash.py
#   file_relpath : src/tsmark/pipeline/processors/slash.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Comment processor for C-style ``//`` line comments.

This is the default syntax: it is valid anywhere in TypeScript/JavaScript code
outside of JSX markup.
"""

from __future__ import annotations

from tsmark.pipeline.processors import register_processor
from tsmark.pipeline.processors.base import CommentProcessor
from tsmark.pipeline.processors.types import CommentSyntax


@register_processor(CommentSyntax.PLAIN)
class SlashCommentProcessor(CommentProcessor):
    """Render comments as ``// text``."""

    line_prefix = "// "
