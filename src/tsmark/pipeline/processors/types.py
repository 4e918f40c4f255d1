# topmark:header:start
#
#   project      : TsMark
#   file         : types.py
#   file_relpath : src/tsmark/pipeline/processors/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared types for comment processors."""

from __future__ import annotations

from enum import Enum


class CommentSyntax(str, Enum):
    """Comment syntax chosen for one insertion site.

    Members:
        PLAIN: ``// text`` line comment (plain TypeScript/JavaScript context).
        EMBEDDED: ``{/* text */}`` expression comment (inside JSX markup).
        SKIP: Emit nothing for this site.
    """

    PLAIN = "plain"
    EMBEDDED = "embedded"
    SKIP = "skip"
