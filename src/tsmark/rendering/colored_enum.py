# topmark:header:start
#
#   project      : TsMark
#   file         : colored_enum.py
#   file_relpath : src/tsmark/rendering/colored_enum.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""String enum carrying a colorizer for console rendering.

Members keep a plain string `.value` (so comparisons, hashing and TOML/JSON export are
unaffected) and expose a yachalk style through `.color`:

    ```python
    from yachalk import chalk

    class Outcome(ColoredStrEnum):
        DONE = ("done", chalk.green)

    Outcome.DONE.color(Outcome.DONE.value)  # green "done"
    ```
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol


class Colorizer(Protocol):
    """Callable decorating text for display (compatible with ``yachalk.ChalkBuilder``)."""

    def __call__(self, *args: object, sep: str = " ") -> str:
        """Return ``args`` joined by ``sep`` and decorated."""
        ...


class ColoredStrEnum(str, Enum):
    """`str` enum whose members are declared as ``(text, colorizer)`` pairs."""

    _value_: str
    _color: Colorizer

    def __new__(cls, text: str, color: Colorizer) -> ColoredStrEnum:
        obj: ColoredStrEnum = str.__new__(cls, text)
        obj._value_ = text
        obj._color = color
        return obj

    @property
    def value(self) -> str:
        """Return the textual value of the member."""
        return self._value_

    @property
    def color(self) -> Colorizer:
        """Return the colorizer associated with this member."""
        return self._color

    def styled(self) -> str:
        """Return the member's value rendered with its own colorizer."""
        return self._color(self._value_)
