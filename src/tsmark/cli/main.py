# topmark:header:start
#
#   project      : TsMark
#   file         : main.py
#   file_relpath : src/tsmark/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TsMark command line entry point.

Group-level options (color) are resolved once and placed into ``ctx.obj`` together with
the program-output console; internal logging is configured from ``TSMARK_LOG_LEVEL``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tsmark.cli.commands.apply import apply_command
from tsmark.cli.commands.version import version_command
from tsmark.cli.console import ClickConsole
from tsmark.cli.options import ColorMode, common_color_options, resolve_color_mode
from tsmark.config.logging import get_logger, resolve_env_log_level, setup_logging
from tsmark.pipeline.processors import register_all_processors

if TYPE_CHECKING:
    from tsmark.cli_shared.console_api import ConsoleLike

logger = get_logger(__name__)

register_all_processors()


def init_common_state(
    ctx: click.Context,
    *,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (logging, color, console) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    level_env: int | None = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    effective_color_mode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color: bool = resolve_color_mode(cli_mode=effective_color_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="TsMark: silence tsc errors with traceable @ts-expect-error directives.",
)
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Entry point for the TsMark CLI."""
    init_common_state(
        ctx,
        color_mode=ColorMode(color_mode) if color_mode else None,
        no_color=no_color,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'tsmark apply REPORT' to suppress the errors listed in REPORT.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(apply_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
