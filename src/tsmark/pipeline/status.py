# topmark:header:start
#
#   project      : TsMark
#   file         : status.py
#   file_relpath : src/tsmark/pipeline/status.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Status enums of the edit pipeline.

Each member carries a yachalk colorizer so the console reporter can render it without
a separate color table.
"""

from __future__ import annotations

from yachalk import chalk

from tsmark.rendering.colored_enum import ColoredStrEnum


class SkipReason(ColoredStrEnum):
    """Why an insertion site produced no edit.

    Members:
        ALREADY_SUPPRESSED: The line above the target already carries the directive.
        OUT_OF_RANGE: The reported line does not exist in the file.
        DECLINED: The chosen comment syntax rendered nothing (the user chose ``skip``).
    """

    ALREADY_SUPPRESSED = ("already suppressed", chalk.yellow)
    OUT_OF_RANGE = ("line out of range", chalk.red_bright)
    DECLINED = ("declined", chalk.blue)


class IoOperation(ColoredStrEnum):
    """File operations reported to the user."""

    READ = ("Reading", chalk.cyan)
    WRITE = ("Writing", chalk.magenta)
