# topmark:header:start
#
#   project      : TsMark
#   file         : loaders.py
#   file_relpath : src/tsmark/config/io/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML configuration sources.

This module provides I/O helpers for reading TsMark configuration from:
- the runtime defaults (defined in code), and
- on-disk TOML files (`tsmark.toml` / `pyproject.toml`).

Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from tsmark.config.keys import Toml
from tsmark.config.logging import get_logger
from tsmark.constants import (
    DEFAULT_CONTEXT_LINES,
    DEFAULT_MARKUP_EXTENSIONS,
    DEFAULT_TODO_PREFIX,
    PYPROJECT_TOML_NAME,
    TS_EXPECT_ERROR,
)

if TYPE_CHECKING:
    from pathlib import Path

    from tsmark.config.logging import TsmarkLogger

    from .types import TomlTable

logger: TsmarkLogger = get_logger(__name__)


def load_defaults_dict() -> TomlTable:
    """Return TsMark's **runtime defaults** as a Python dict.

    This function intentionally performs **no I/O**.

    Returns:
        A TOML-table-compatible dict containing the runtime defaults.

    Notes:
        The returned value is a new dict so callers can mutate it safely.
    """
    return {
        Toml.KEY_TODO: DEFAULT_TODO_PREFIX,
        Toml.KEY_DIRECTIVE: TS_EXPECT_ERROR,
        Toml.KEY_CONTEXT: DEFAULT_CONTEXT_LINES,
        Toml.KEY_MARKUP_EXTENSIONS: list(DEFAULT_MARKUP_EXTENSIONS),
        Toml.KEY_AMBIGUOUS: "ask",
    }


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path: Path to a TOML document (e.g., ``tsmark.toml`` or ``pyproject.toml``).

    Returns:
        The parsed TOML content.

    Notes:
        - Errors are logged and an empty dict is returned on failure.
        - Encoding is assumed to be UTF-8.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data_any: Any = doc.unwrap()
        return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}
    except (TypeError, ValueError) as e:
        logger.error("Unknown error while reading TOML from %s: %s", path, e)
        return {}


def load_tool_table(path: Path) -> TomlTable | None:
    """Return the TsMark table of a config file.

    For ``pyproject.toml`` this is the ``[tool.tsmark]`` sub-table; any other file is
    considered a dedicated TsMark config whose top level is the table.

    Args:
        path: The config file to read.

    Returns:
        The TsMark table, or ``None`` when a ``pyproject.toml`` has no (valid) TsMark section.
    """
    data: TomlTable = load_toml_dict(path)
    if path.name != PYPROJECT_TOML_NAME:
        return data

    tool_tbl: Any = data.get(Toml.SECTION_TOOL, {})
    section: Any = tool_tbl.get(Toml.SECTION_TSMARK) if isinstance(tool_tbl, dict) else None
    if not isinstance(section, dict):
        logger.debug("[tool.tsmark] section missing or malformed in %s", path)
        return None
    return cast("TomlTable", section)
