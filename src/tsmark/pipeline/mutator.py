# topmark:header:start
#
#   project      : TsMark
#   file         : mutator.py
#   file_relpath : src/tsmark/pipeline/mutator.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Apply a `FileEditPlan` to an in-memory `LineBuffer`.

For each site, highest line first:

1. The target index is ``line - 1``; a line outside the buffer is skipped
   (`SkipReason.OUT_OF_RANGE`).
2. If the line directly above the target already contains the directive, the site is
   skipped (`SkipReason.ALREADY_SUPPRESSED`). The first line of a file has nothing above
   it and is never considered suppressed.
3. The block is indented with the target's leading spaces (tabs are not counted).
4. An empty block (``skip`` decision) is recorded as `SkipReason.DECLINED`.
5. Otherwise the block is inserted right before the target, which moves down by
   ``len(block)`` lines. No existing line is modified.

Because sites are processed in descending order, an insertion never shifts a site that
is still pending.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from tsmark.config.logging import get_logger
from tsmark.constants import TS_EXPECT_ERROR
from tsmark.pipeline.reporter import EditEvent, NullReporter, SkipEvent
from tsmark.pipeline.status import SkipReason

if TYPE_CHECKING:
    from tsmark.config.logging import TsmarkLogger
    from tsmark.pipeline.formatter import SiteFormatter
    from tsmark.pipeline.grouper import EditSite, FileEditPlan
    from tsmark.pipeline.reader import LineBuffer
    from tsmark.pipeline.reporter import Reporter

logger: TsmarkLogger = get_logger(__name__)


def leading_spaces(line: str) -> int:
    """Return the number of leading ``" "`` characters of ``line``."""
    return len(line) - len(line.lstrip(" "))


@dataclass(frozen=True, slots=True)
class AppliedEdit:
    """One insertion spliced into a buffer.

    Attributes:
        line (int): 1-based line of the target before insertion (first inserted line).
        block (tuple[str, ...]): The inserted lines.
        target (str): The target line (unchanged).
    """

    line: int
    block: tuple[str, ...]
    target: str

    @property
    def shifted_line(self) -> int:
        """Return the 1-based line of the target after insertion."""
        return self.line + len(self.block)


@dataclass(frozen=True, slots=True)
class SkippedSite:
    """A site that produced no edit, and why."""

    line: int
    reason: SkipReason


@dataclass(frozen=True, slots=True)
class MutationResult:
    """Edits and skips of one plan, in processing (descending line) order."""

    edits: tuple[AppliedEdit, ...]
    skipped: tuple[SkippedSite, ...]

    @property
    def changed(self) -> bool:
        """Return True if at least one block was inserted."""
        return bool(self.edits)


class FileMutator:
    """Splice insertion blocks into line buffers.

    Args:
        formatter (SiteFormatter): Chooses the syntax of each site and renders its block.
        directive (str): Token marking a line as an existing suppression.
        reporter (Reporter | None): Receives one event per edit or skip.
        preview (bool): Flag edit events as previews (dry run).
    """

    def __init__(
        self,
        formatter: SiteFormatter,
        *,
        directive: str = TS_EXPECT_ERROR,
        reporter: Reporter | None = None,
        preview: bool = False,
    ) -> None:
        self.formatter: SiteFormatter = formatter
        self.directive: str = directive
        self.reporter: Reporter = reporter or NullReporter()
        self.preview: bool = preview

    def is_suppressed(self, lines: list[str], index: int) -> bool:
        """Return True if the line above ``index`` already carries the directive."""
        if index <= 0:
            return False
        return self.directive in lines[index - 1]

    def apply(
        self,
        plan: FileEditPlan,
        buffer: LineBuffer,
        *,
        files_remaining: int = 0,
    ) -> MutationResult:
        """Apply every site of ``plan`` to ``buffer`` in place.

        Args:
            plan (FileEditPlan): Sites of one file, in descending line order.
            buffer (LineBuffer): The file content; mutated in place.
            files_remaining (int): Files still to process after this one.

        Returns:
            MutationResult: What was inserted and what was skipped.
        """
        edits: list[AppliedEdit] = []
        skipped: list[SkippedSite] = []

        for site in plan.sites:
            result: AppliedEdit | SkippedSite = self._apply_site(
                plan.file_path, site, buffer, files_remaining=files_remaining
            )
            if isinstance(result, AppliedEdit):
                edits.append(result)
                self.reporter.report(
                    EditEvent(file_path=plan.file_path, edit=result, preview=self.preview)
                )
            else:
                skipped.append(result)
                self.reporter.report(SkipEvent(file_path=plan.file_path, site=result))

        logger.debug(
            "%s: %d edit(s), %d skipped site(s)", plan.file_path, len(edits), len(skipped)
        )
        return MutationResult(edits=tuple(edits), skipped=tuple(skipped))

    def _apply_site(
        self,
        file_path: str,
        site: EditSite,
        buffer: LineBuffer,
        *,
        files_remaining: int,
    ) -> AppliedEdit | SkippedSite:
        lines: list[str] = buffer.lines
        index: int = site.line - 1

        if index < 0 or index >= len(lines):
            logger.warning(
                "%s:%d: line out of range (file has %d lines), skipping",
                file_path,
                site.line,
                len(lines),
            )
            return SkippedSite(line=site.line, reason=SkipReason.OUT_OF_RANGE)

        if self.is_suppressed(lines, index):
            logger.debug("%s:%d: already suppressed", file_path, site.line)
            return SkippedSite(line=site.line, reason=SkipReason.ALREADY_SUPPRESSED)

        target: str = lines[index]
        block: list[str] = self.formatter.format_site(
            file_path,
            site,
            lines,
            leading_spaces(target),
            files_remaining=files_remaining,
        )
        if not block:
            logger.debug("%s:%d: declined", file_path, site.line)
            return SkippedSite(line=site.line, reason=SkipReason.DECLINED)

        lines[index:index] = block
        logger.trace("%s:%d: inserted %d line(s)", file_path, site.line, len(block))
        return AppliedEdit(line=site.line, block=tuple(block), target=target)
