# topmark:header:start
#
#   project      : TsMark
#   file         : getters.py
#   file_relpath : src/tsmark/config/io/getters.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Value getters for TOML config tables.

The *checked* getters validate the expected shape and log a **warning** when a key is
present with the wrong type; the caller then keeps its current value. User mistakes are
surfaced without crashing or changing defaulting behavior.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final

from tsmark.config.logging import get_logger

if TYPE_CHECKING:
    from tsmark.config.logging import TsmarkLogger

    from .types import TomlTable

logger: TsmarkLogger = get_logger(__name__)


def get_string_value_or_none_checked(table: TomlTable, key: str, *, where: str) -> str | None:
    """Return an optional string value, warning when present but not `str`.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.
        where (str): Human-readable location of the table (used in warnings).

    Returns:
        str | None: The string value, or ``None`` when absent or mistyped.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return value

    loc: Final[str] = f"{where}.{key}"
    logger.warning("Expected str in %s, got %s: %r", loc, type(value).__name__, value)
    return None


def get_int_value_or_none_checked(table: TomlTable, key: str, *, where: str) -> int | None:
    """Return an optional int value, warning when present but not `int`.

    Notes:
        - Missing key / None -> None
        - `bool` is rejected (since `bool` is a subclass of `int`).
    """
    value: Any | None = table.get(key)
    if value is None:
        return None

    loc: Final[str] = f"{where}.{key}"

    # Note: bool is a subclass of int; exclude it.
    if isinstance(value, bool):
        logger.warning("Expected int in %s, got bool: %r", loc, value)
        return None

    if isinstance(value, int):
        return value

    logger.warning("Expected int in %s, got %s: %r", loc, type(value).__name__, value)
    return None


def get_bool_value(table: TomlTable, key: str, default: bool = False) -> bool:
    """Extract a boolean value from a TOML table, falling back to ``default``."""
    value: Any | None = table.get(key)
    if isinstance(value, bool):
        return value
    if value is not None:
        logger.debug("Cannot coerce %r to bool, returning default (%s)", value, default)
    return default


def get_string_list_value_or_none_checked(
    table: TomlTable, key: str, *, where: str
) -> list[str] | None:
    """Return an optional list of strings, warning on any non-string entry.

    A list containing a non-string item is rejected as a whole so that a partially
    valid list never silently replaces the previous layer.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None

    loc: Final[str] = f"{where}.{key}"
    if not isinstance(value, list):
        logger.warning("Expected list in %s, got %s: %r", loc, type(value).__name__, value)
        return None

    items: list[str] = []
    for item in value:
        if not isinstance(item, str):
            logger.warning("Expected list[str] in %s, got item %r", loc, item)
            return None
        items.append(item)
    return items
