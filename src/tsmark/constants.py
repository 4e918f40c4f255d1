# topmark:header:start
#
#   project      : TsMark
#   file         : constants.py
#   file_relpath : src/tsmark/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TsMark Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version
from typing import Final

TSMARK_VERSION: str = get_version("tsmark")

# Config file names discovered next to (or above) the working directory
PYPROJECT_TOML_NAME: Final[str] = "pyproject.toml"
TSMARK_TOML_NAME: Final[str] = "tsmark.toml"

# Environment variable controlling internal logging
TSMARK_LOG_LEVEL_ENV: Final[str] = "TSMARK_LOG_LEVEL"

# Comment marker understood by `tsc` as "the next line is expected to error"
TS_EXPECT_ERROR: Final[str] = "@ts-expect-error"

DEFAULT_TODO_PREFIX: Final[str] = "TODO"
DEFAULT_CONTEXT_LINES: Final[int] = 5
DEFAULT_MARKUP_EXTENSIONS: Final[tuple[str, ...]] = (".tsx", ".jsx")

# Synthesized note placed below the diagnostic messages of an insertion block
DIRECTIVE_NOTE_TEMPLATE: Final[str] = "{directive} {todo}: fix error and remove"
