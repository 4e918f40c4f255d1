# topmark:header:start
#
#   project      : TsMark
#   file         : skip.py
#   file_relpath : src/tsmark/pipeline/processors/skip.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Null comment processor used when a site is skipped."""

from __future__ import annotations

from tsmark.pipeline.processors import register_processor
from tsmark.pipeline.processors.base import CommentProcessor
from tsmark.pipeline.processors.types import CommentSyntax


@register_processor(CommentSyntax.SKIP)
class SkipCommentProcessor(CommentProcessor):
    """Render nothing: every text is dropped from the insertion block."""

    def render_line(self, text: str) -> str | None:
        """Return ``None`` for every text."""
        return None
