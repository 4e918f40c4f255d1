# topmark:header:start
#
#   project      : TsMark
#   file         : reader.py
#   file_relpath : src/tsmark/pipeline/reader.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load a text file as a mutable line buffer.

The file is read as UTF-8 with newline translation disabled so that the native delimiter
survives. The buffer is split on ``"\\r\\n"`` when every line feed of the file is
part of one, and on ``"\\n"`` otherwise; in a file with mixed endings the stray ``"\\r"``
stays part of its line, so line numbers always match what ``tsc`` reports. The lines are
joined back with the same delimiter on write, so an unmodified buffer round-trips byte
for byte, including a trailing newline (which shows up as a final empty line).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from tsmark.config.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

    from tsmark.config.logging import TsmarkLogger

logger: TsmarkLogger = get_logger(__name__)

LF = "\n"
CRLF = "\r\n"


@dataclass(slots=True)
class LineBuffer:
    """In-memory lines of one file.

    Attributes:
        lines (list[str]): Lines without their delimiter.
        newline (str): Delimiter used to join ``lines`` back into text.
    """

    lines: list[str] = field(default_factory=lambda: [])
    newline: str = LF

    @classmethod
    def from_text(cls, text: str) -> LineBuffer:
        """Split ``text`` on its detected delimiter."""
        n_crlf: int = text.count(CRLF)
        newline: str = CRLF if n_crlf and n_crlf == text.count(LF) else LF
        return cls(lines=text.split(newline), newline=newline)

    def to_text(self) -> str:
        """Join the lines back into text."""
        return self.newline.join(self.lines)

    def __len__(self) -> int:
        return len(self.lines)


def read_line_buffer(path: Path) -> LineBuffer:
    """Read ``path`` into a `LineBuffer`.

    Args:
        path (Path): The file to read.

    Returns:
        LineBuffer: The file content split into lines.

    Raises:
        OSError: If the file cannot be opened or read (logged, then re-raised).
        UnicodeDecodeError: If the file is not valid UTF-8 (logged, then re-raised).
    """
    try:
        with open(path, encoding="utf-8", newline="") as f:
            text: str = f.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Error reading %s: %s", path, e)
        raise

    buffer: LineBuffer = LineBuffer.from_text(text)
    logger.debug(
        "Read %d line(s) from %s (newline=%r)", len(buffer.lines), path, buffer.newline
    )
    return buffer
