# topmark:header:start
#
#   project      : TsMark
#   file         : apply.py
#   file_relpath : src/tsmark/cli/commands/apply.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TsMark `apply` command.

Reads a ``tsc`` report and inserts a ``@ts-expect-error`` directive (preceded by the
diagnostic messages) above every reported line.

Input:
  - REPORT: the captured output of ``tsc --noEmit`` (``--pretty false``).

Exit codes:
  - 0 on success (also when nothing had to be inserted),
  - 64 for usage errors, 65/66/74/77 for I/O failures (see `ExitCode`).
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from tsmark.cli.cli_types import EnumChoiceParam
from tsmark.cli.errors import TsmarkUsageError, from_io_error
from tsmark.cli.options import common_config_options
from tsmark.cli.prompt import ClickPromptDecision
from tsmark.cli.reporter import ConsoleReporter
from tsmark.config import AmbiguousPolicy, MutableConfig
from tsmark.config.logging import get_logger
from tsmark.pipeline.formatter import FixedDecision
from tsmark.pipeline.processors.types import CommentSyntax
from tsmark.pipeline.runner import run_report
from tsmark.pipeline.sampler import SamplingError

if TYPE_CHECKING:
    from tsmark.cli_shared.console_api import ConsoleLike
    from tsmark.config import Config
    from tsmark.config.logging import TsmarkLogger
    from tsmark.pipeline.formatter import DecisionSource
    from tsmark.pipeline.runner import RunResult

logger: TsmarkLogger = get_logger(__name__)


def decision_for_policy(policy: AmbiguousPolicy, console: ConsoleLike) -> DecisionSource:
    """Return the decision source implementing ``policy``."""
    if policy == AmbiguousPolicy.ASK:
        return ClickPromptDecision(console)
    return FixedDecision(CommentSyntax(policy.value))


def _summary(console: ConsoleLike, result: RunResult, *, dry: bool) -> str:
    n_files: int = result.n_changed
    if dry:
        head: str = console.styled("Dry run:", bold=True)
        return (
            f"{head} would insert {result.n_inserted} directive(s) in {n_files} file(s), "
            f"{result.n_skipped} site(s) skipped."
        )
    head = console.styled("Done:", bold=True)
    return (
        f"{head} inserted {result.n_inserted} directive(s) in {n_files} file(s), "
        f"{result.n_skipped} site(s) skipped."
    )


@click.command(
    name="apply",
    help="Insert @ts-expect-error directives for every error in a tsc REPORT.",
)
@click.argument(
    "report",
    type=click.Path(dir_okay=False, path_type=Path),
)
@click.option("--dry", is_flag=True, default=False, help="Preview the insertions; write nothing.")
@click.option(
    "--todo",
    default=None,
    help="Prefix word of the inserted note (default: TODO).",
)
@click.option(
    "--verbose",
    is_flag=True,
    default=False,
    help="Show every read/write, insertion and skipped site.",
)
@click.option(
    "--context",
    type=int,
    default=None,
    help="Lines before/after the error inspected for JSX markup (default: 5).",
)
@click.option(
    "--sample",
    type=int,
    default=None,
    help="Only process a random subset of this many diagnostics.",
)
@click.option("--seed", type=int, default=None, help="Seed for --sample (reproducible subsets).")
@click.option(
    "--ambiguous",
    type=EnumChoiceParam(AmbiguousPolicy),
    default=None,
    help=(
        "Comment syntax for sites that may be inside JSX markup: "
        f"{', '.join(p.value for p in AmbiguousPolicy)} (default: ask)."
    ),
)
@click.option("--diff", "show_diff", is_flag=True, default=False, help="Show a unified diff.")
@click.option(
    "--root",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Directory against which relative report paths are resolved (default: CWD).",
)
@common_config_options
def apply_command(
    *,
    report: Path,
    dry: bool,
    todo: str | None,
    verbose: bool,
    context: int | None,
    sample: int | None,
    seed: int | None,
    ambiguous: AmbiguousPolicy | None,
    show_diff: bool,
    root: Path | None,
    config_paths: tuple[str, ...],
    no_config: bool,
) -> None:
    """Insert suppression directives for the errors listed in REPORT.

    Args:
        report (Path): The ``tsc`` report file.
        dry (bool): Preview only.
        todo (str | None): Override of the TODO prefix.
        verbose (bool): Trace I/O, insertions and skips.
        context (int | None): Override of the markup context radius.
        sample (int | None): Process a random subset of this size.
        seed (int | None): Seed for sampling.
        ambiguous (AmbiguousPolicy | None): Resolution of markup-ambiguous sites.
        show_diff (bool): Print a unified diff per changed file.
        root (Path | None): Base directory for relative report paths.
        config_paths (tuple[str, ...]): Extra config files.
        no_config (bool): Skip config discovery.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    if context is not None and context < 0:
        raise TsmarkUsageError(f"--context must not be negative (got {context})")
    if sample is not None and sample < 0:
        raise TsmarkUsageError(f"--sample must not be negative (got {sample})")

    draft: MutableConfig = MutableConfig.load_merged(
        start=root or Path.cwd(),
        extra_config_files=[Path(p) for p in config_paths],
        no_config=no_config,
    )
    draft.apply_args(
        {
            "todo": todo,
            "context": context,
            "sample": sample,
            "seed": seed,
            "ambiguous": ambiguous,
            "dry": dry,
            "verbose": verbose,
            "diff": show_diff,
            "base_dir": root,
        }
    )
    config: Config = draft.freeze()
    logger.debug("Effective config: %s", config)

    reporter = ConsoleReporter(console, verbose=config.verbose, show_diff=config.diff)
    try:
        result: RunResult = run_report(
            report,
            config,
            decide=decision_for_policy(config.ambiguous, console),
            reporter=reporter,
        )
    except SamplingError as e:
        raise TsmarkUsageError(str(e)) from e
    except (OSError, UnicodeError) as e:
        raise from_io_error(e) from e

    console.print(_summary(console, result, dry=config.dry))
