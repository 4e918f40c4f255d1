# topmark:header:start
#
#   project      : TsMark
#   file         : keys.py
#   file_relpath : src/tsmark/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML key names for TsMark configuration.

This module defines the authoritative string constants used when reading
TsMark configuration from TOML sources (``tsmark.toml`` and ``[tool.tsmark]``
in ``pyproject.toml``).

Design notes:
    - Keys defined here represent *external configuration API*.
    - Renaming or removing keys is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML keys used by TsMark configuration.

    The TsMark table is flat: all keys live at the top level of ``tsmark.toml``
    or directly inside ``[tool.tsmark]``.
    """

    # Section holding TsMark settings inside pyproject.toml
    SECTION_TOOL: Final[str] = "tool"
    SECTION_TSMARK: Final[str] = "tsmark"

    # Root / discovery
    KEY_ROOT: Final[str] = "root"

    # Directive rendering
    KEY_TODO: Final[str] = "todo"
    KEY_DIRECTIVE: Final[str] = "directive"

    # Markup heuristic
    KEY_CONTEXT: Final[str] = "context"
    KEY_MARKUP_EXTENSIONS: Final[str] = "markup_extensions"
    KEY_AMBIGUOUS: Final[str] = "ambiguous"

    # Sampling
    KEY_SAMPLE: Final[str] = "sample"
    KEY_SEED: Final[str] = "seed"
