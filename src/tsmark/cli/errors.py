# topmark:header:start
#
#   project      : TsMark
#   file         : errors.py
#   file_relpath : src/tsmark/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the TsMark CLI.

Raise these in CLI commands to exit with a standardized message and exit code. The
pipeline itself raises plain `OSError` / `UnicodeError`; `from_io_error` maps those to
the matching CLI error.
"""

from __future__ import annotations

from typing import IO, Any

import click

from tsmark.cli_shared.exit_codes import ExitCode


class TsmarkError(click.ClickException):
    """Base class for all TsMark CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:
        """Return the plain error message text (colorized in `show`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx: click.Context | None = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(f"Error: {self.format_message()}")
                return
        super().show(file)


class TsmarkUsageError(TsmarkError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class TsmarkFileNotFoundError(TsmarkError):
    """Error when the report or a source file does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class TsmarkPermissionDeniedError(TsmarkError):
    """Error for insufficient permissions (read/write)."""

    exit_code = ExitCode.PERMISSION_DENIED


class TsmarkIOError(TsmarkError):
    """Error for I/O errors reading/writing files."""

    exit_code = ExitCode.IO_ERROR


class TsmarkEncodingError(TsmarkError):
    """Error for text decoding/encoding errors (e.g., UnicodeDecodeError)."""

    exit_code = ExitCode.ENCODING_ERROR


def from_io_error(exc: OSError | UnicodeError) -> TsmarkError:
    """Map an I/O exception raised by the pipeline to a CLI error."""
    if isinstance(exc, UnicodeError):
        return TsmarkEncodingError(f"Cannot decode/encode file as UTF-8: {exc}")
    if isinstance(exc, FileNotFoundError):
        return TsmarkFileNotFoundError(f"File not found: {exc.filename}")
    if isinstance(exc, PermissionError):
        return TsmarkPermissionDeniedError(f"Permission denied: {exc.filename}")
    return TsmarkIOError(f"I/O error: {exc}")
