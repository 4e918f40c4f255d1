# topmark:header:start
#
#   project      : TsMark
#   file         : types.py
#   file_relpath : src/tsmark/config/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Lightweight config types and aliases.

This module hosts stable, import-friendly definitions that other config modules
can depend on without risk of circular imports.

Exports:
    - `ArgsLike`: structural mapping type for CLI/API argument dicts.
    - `AmbiguousPolicy`: how markup-ambiguous insertion sites are resolved.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any

# ArgsLike: generic mapping accepted by config loaders (works for CLI namespaces and API dicts).
ArgsLike = Mapping[str, Any]


class AmbiguousPolicy(str, Enum):
    """Resolution of insertion sites whose comment syntax cannot be decided lexically.

    Members:
        ASK: Prompt the user for every ambiguous site (interactive default).
        PLAIN: Always use a plain ``//`` line comment.
        EMBEDDED: Always use a JSX-embedded ``{/* ... */}`` comment.
        SKIP: Never insert anything at an ambiguous site.
    """

    ASK = "ask"
    PLAIN = "plain"
    EMBEDDED = "embedded"
    SKIP = "skip"
