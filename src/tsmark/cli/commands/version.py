# topmark:header:start
#
#   project      : TsMark
#   file         : version.py
#   file_relpath : src/tsmark/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TsMark `version` command.

Prints the current TsMark version as installed in the active Python environment.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tsmark.constants import TSMARK_VERSION

if TYPE_CHECKING:
    from tsmark.cli_shared.console_api import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of TsMark.",
)
def version_command() -> None:
    """Show the current version of TsMark."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    console.print(console.styled(TSMARK_VERSION, bold=True))
