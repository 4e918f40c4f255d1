# topmark:header:start
#
#   project      : TsMark
#   file         : __init__.py
#   file_relpath : src/tsmark/config/io/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML I/O helpers for TsMark configuration.

Submodules:
    - `loaders`: read TOML documents (defaults, files, pyproject sections).
    - `getters`: typed, checked value extraction from parsed tables.
    - `types`: shared type aliases.
"""

from __future__ import annotations

from .getters import (
    get_int_value_or_none_checked,
    get_string_list_value_or_none_checked,
    get_string_value_or_none_checked,
)
from .loaders import load_defaults_dict, load_tool_table, load_toml_dict
from .types import TomlTable

__all__ = [
    "TomlTable",
    "get_int_value_or_none_checked",
    "get_string_list_value_or_none_checked",
    "get_string_value_or_none_checked",
    "load_defaults_dict",
    "load_tool_table",
    "load_toml_dict",
]
