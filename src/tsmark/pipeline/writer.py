# topmark:header:start
#
#   project      : TsMark
#   file         : writer.py
#   file_relpath : src/tsmark/pipeline/writer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Write sinks for persisting updated line buffers.

Sinks
-----
- FileSystemSink: writes the buffer in-place to the file path.
- NullSink: no-op (dry-run).

The runner picks the sink once per run with `select_sink`, so preview and real runs
go through the same code path up to the very last step.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from tsmark.config.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

    from tsmark.config import Config
    from tsmark.config.logging import TsmarkLogger
    from tsmark.pipeline.reader import LineBuffer

logger: TsmarkLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class WriteResult:
    """Structured result of a write operation."""

    written: bool
    bytes_written: int = 0


class WriteSink(Protocol):
    """Protocol for sinks receiving the final content of a file."""

    def write(self, path: Path, buffer: LineBuffer) -> WriteResult:
        """Persist ``buffer`` for ``path``.

        Args:
            path (Path): Destination file.
            buffer (LineBuffer): The updated content.

        Returns:
            WriteResult: Whether anything was written, and how many bytes.
        """
        ...


class NullSink:
    """Dry-run sink: does not write anything."""

    def write(self, path: Path, buffer: LineBuffer) -> WriteResult:
        """No-op write for dry-run mode."""
        logger.debug("NullSink: not writing %s (dry run)", path)
        return WriteResult(written=False)


class FileSystemSink:
    """Filesystem sink that writes in-place to ``path``."""

    def write(self, path: Path, buffer: LineBuffer) -> WriteResult:
        """Write ``buffer`` to ``path`` using the buffer's own delimiter.

        Raises:
            OSError: If the file cannot be written (logged, then re-raised).
            UnicodeEncodeError: If the content cannot be encoded (logged, then re-raised).
        """
        text: str = buffer.to_text()
        try:
            with open(path, "w", encoding="utf-8", newline="") as f:
                f.write(text)
        except (OSError, UnicodeEncodeError) as e:
            logger.error("Error writing %s: %s", path, e)
            raise
        bytes_written: int = len(text.encode("utf-8"))
        logger.debug("FileSystemSink: wrote %d bytes to file %s", bytes_written, path)
        return WriteResult(written=True, bytes_written=bytes_written)


def select_sink(config: Config) -> WriteSink:
    """Return ``NullSink`` in dry mode, else ``FileSystemSink``."""
    if config.dry:
        logger.debug("Selected NULL sink (config.dry is True)")
        return NullSink()
    logger.debug("Selected file system sink")
    return FileSystemSink()
