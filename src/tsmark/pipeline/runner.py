# topmark:header:start
#
#   project      : TsMark
#   file         : runner.py
#   file_relpath : src/tsmark/pipeline/runner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Run the edit pipeline over a diagnostic report.

Files are processed strictly one after the other, and within a file the sites are
processed one after the other, so that interactive questions come in a stable order and
at most one file is held in memory. A read or write failure aborts the run: files already
written stay written, the remaining ones are left untouched.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import TYPE_CHECKING

from tsmark.config.logging import get_logger
from tsmark.diagnostic.parser import parse_report_lines
from tsmark.pipeline.formatter import SiteFormatter
from tsmark.pipeline.grouper import group_diagnostics
from tsmark.pipeline.mutator import FileMutator
from tsmark.pipeline.reader import read_line_buffer
from tsmark.pipeline.reporter import FileEvent, IoEvent, NullReporter
from tsmark.pipeline.sampler import sample
from tsmark.pipeline.status import IoOperation
from tsmark.pipeline.writer import select_sink

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from tsmark.config import Config
    from tsmark.config.logging import TsmarkLogger
    from tsmark.diagnostic.model import Diagnostic
    from tsmark.pipeline.formatter import DecisionSource
    from tsmark.pipeline.grouper import FileEditPlan
    from tsmark.pipeline.mutator import AppliedEdit, MutationResult, SkippedSite
    from tsmark.pipeline.reader import LineBuffer
    from tsmark.pipeline.reporter import Reporter
    from tsmark.pipeline.writer import WriteResult, WriteSink

logger: TsmarkLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class FileOutcome:
    """Result of processing one file.

    Attributes:
        file_path (str): Path as written in the report.
        path (Path): Resolved path that was read (and written).
        edits (tuple[AppliedEdit, ...]): Inserted blocks, in processing order.
        skipped (tuple[SkippedSite, ...]): Sites without insertion.
        original_lines (tuple[str, ...]): Content before mutation.
        updated_lines (tuple[str, ...]): Content after mutation (also in dry mode).
        written (bool): Whether the file was persisted.
    """

    file_path: str
    path: Path
    edits: tuple[AppliedEdit, ...]
    skipped: tuple[SkippedSite, ...]
    original_lines: tuple[str, ...]
    updated_lines: tuple[str, ...]
    written: bool

    @property
    def changed(self) -> bool:
        """Return True if at least one block was inserted."""
        return bool(self.edits)


@dataclass(frozen=True, slots=True)
class RunResult:
    """Result of a whole run."""

    diagnostics: tuple[Diagnostic, ...]
    outcomes: tuple[FileOutcome, ...]

    @property
    def n_inserted(self) -> int:
        """Return the number of inserted blocks across all files."""
        return sum(len(o.edits) for o in self.outcomes)

    @property
    def n_skipped(self) -> int:
        """Return the number of sites that produced no insertion."""
        return sum(len(o.skipped) for o in self.outcomes)

    @property
    def n_written(self) -> int:
        """Return the number of files persisted."""
        return sum(1 for o in self.outcomes if o.written)

    @property
    def n_changed(self) -> int:
        """Return the number of files with at least one insertion."""
        return sum(1 for o in self.outcomes if o.changed)


def _read(path: Path, reporter: Reporter) -> LineBuffer:
    try:
        buffer: LineBuffer = read_line_buffer(path)
    except (OSError, UnicodeError) as e:
        reporter.report(IoEvent(operation=IoOperation.READ, path=path, ok=False, error=e))
        raise
    reporter.report(IoEvent(operation=IoOperation.READ, path=path, ok=True))
    return buffer


def _write(sink: WriteSink, path: Path, buffer: LineBuffer, reporter: Reporter) -> bool:
    try:
        result: WriteResult = sink.write(path, buffer)
    except (OSError, UnicodeError) as e:
        reporter.report(IoEvent(operation=IoOperation.WRITE, path=path, ok=False, error=e))
        raise
    if result.written:
        reporter.report(IoEvent(operation=IoOperation.WRITE, path=path, ok=True))
    return result.written


def run_plans(
    plans: Sequence[FileEditPlan],
    config: Config,
    *,
    decide: DecisionSource,
    reporter: Reporter | None = None,
) -> list[FileOutcome]:
    """Apply edit plans file by file.

    Args:
        plans (Sequence[FileEditPlan]): Plans in processing order.
        config (Config): Frozen runtime configuration.
        decide (DecisionSource): Resolves ambiguous comment syntax.
        reporter (Reporter | None): Receives I/O, edit, skip and file events.

    Returns:
        list[FileOutcome]: One outcome per plan, in order.

    Raises:
        OSError: A file could not be read or written; the run stops there.
        UnicodeError: A file could not be decoded or encoded; the run stops there.
    """
    rep: Reporter = reporter or NullReporter()
    formatter = SiteFormatter(config, decide)
    mutator = FileMutator(
        formatter, directive=config.directive, reporter=rep, preview=config.dry
    )
    sink: WriteSink = select_sink(config)

    outcomes: list[FileOutcome] = []
    for idx, plan in enumerate(plans):
        path: Path = config.resolve_path(plan.file_path)
        logger.info("Processing %s (%d site(s))", path, len(plan.sites))

        buffer: LineBuffer = _read(path, rep)
        original: tuple[str, ...] = tuple(buffer.lines)

        result: MutationResult = mutator.apply(
            plan, buffer, files_remaining=len(plans) - idx - 1
        )

        written = False
        if result.changed:
            written = _write(sink, path, buffer, rep)
        else:
            logger.debug("No change for %s, not writing", path)

        outcome = FileOutcome(
            file_path=plan.file_path,
            path=path,
            edits=result.edits,
            skipped=result.skipped,
            original_lines=original,
            updated_lines=tuple(buffer.lines),
            written=written,
        )
        rep.report(FileEvent(outcome=outcome))
        outcomes.append(outcome)

    return outcomes


def run_diagnostics(
    diagnostics: Sequence[Diagnostic],
    config: Config,
    *,
    decide: DecisionSource,
    reporter: Reporter | None = None,
    rng: random.Random | None = None,
) -> RunResult:
    """Sample (if configured), group and apply already parsed diagnostics.

    Raises:
        SamplingError: If ``config.sample`` exceeds the number of diagnostics.
    """
    selected: list[Diagnostic] = list(diagnostics)
    if config.sample is not None:
        selected = sample(selected, config.sample, rng=rng or random.Random(config.seed))
        logger.info("Sampled %d of %d diagnostic(s)", len(selected), len(diagnostics))

    plans: list[FileEditPlan] = group_diagnostics(selected)
    outcomes: list[FileOutcome] = run_plans(plans, config, decide=decide, reporter=reporter)
    return RunResult(diagnostics=tuple(selected), outcomes=tuple(outcomes))


def run_report(
    report_path: Path,
    config: Config,
    *,
    decide: DecisionSource,
    reporter: Reporter | None = None,
    rng: random.Random | None = None,
) -> RunResult:
    """Read a ``tsc`` report and insert directives for every diagnostic in it.

    Args:
        report_path (Path): The report file (resolved as given, not against the root).
        config (Config): Frozen runtime configuration.
        decide (DecisionSource): Resolves ambiguous comment syntax.
        reporter (Reporter | None): Receives pipeline events.
        rng (random.Random | None): Random source for sampling (default: seeded from
            ``config.seed``).

    Returns:
        RunResult: The selected diagnostics and one outcome per file.
    """
    rep: Reporter = reporter or NullReporter()
    report: LineBuffer = _read(report_path, rep)
    diagnostics: list[Diagnostic] = parse_report_lines(report.lines)
    return run_diagnostics(diagnostics, config, decide=decide, reporter=rep, rng=rng)
