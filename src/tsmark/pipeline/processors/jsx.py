# topmark:header:start
#
#   project      : TsMark
#   file         : jsx.py
#   file_relpath : src/tsmark/pipeline/processors/jsx.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Comment processor for comments embedded in JSX markup.

Between JSX tags a ``//`` comment would be rendered as text; the comment has to be
wrapped in an expression container instead: ``{/* text */}``. ``tsc`` honors a
``@ts-expect-error`` directive written this way.
"""

from __future__ import annotations

from tsmark.pipeline.processors import register_processor
from tsmark.pipeline.processors.base import CommentProcessor
from tsmark.pipeline.processors.types import CommentSyntax


@register_processor(CommentSyntax.EMBEDDED)
class JsxCommentProcessor(CommentProcessor):
    """Render comments as ``{/* text */}``."""

    line_prefix = "{/* "
    line_suffix = " */}"
