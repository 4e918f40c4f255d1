# topmark:header:start
#
#   project      : TsMark
#   file         : grouper.py
#   file_relpath : src/tsmark/pipeline/grouper.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Build per-file edit plans from diagnostics.

Inserting lines above a target shifts every line below it. Sites are therefore
ordered by **descending** line number: once the highest target has been handled,
every remaining (lower) line number still addresses the same source line, and no
index has to be recomputed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from tsmark.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable

    from tsmark.config.logging import TsmarkLogger
    from tsmark.diagnostic.model import Diagnostic

logger: TsmarkLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class EditSite:
    """One insertion site: a 1-based target line and the messages reported on it."""

    line: int
    messages: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class FileEditPlan:
    """Insertion sites of one file, ordered by descending line number.

    Attributes:
        file_path (str): Path as written in the report.
        sites (tuple[EditSite, ...]): Sites with distinct lines, highest line first.
    """

    file_path: str
    sites: tuple[EditSite, ...]

    @property
    def n_messages(self) -> int:
        """Return the number of diagnostic messages covered by this plan."""
        return sum(len(site.messages) for site in self.sites)


def group_diagnostics(diagnostics: Iterable[Diagnostic]) -> list[FileEditPlan]:
    """Partition diagnostics by file, then by line.

    Args:
        diagnostics (Iterable[Diagnostic]): Parsed (and possibly sampled) diagnostics.

    Returns:
        list[FileEditPlan]: One plan per file, in first-seen file order. Within a plan,
        diagnostics sharing a line are merged (messages kept in encounter order) and
        sites are sorted by descending line.
    """
    # dicts preserve insertion order: files and messages keep their first-seen order
    by_file: dict[str, dict[int, list[str]]] = {}
    for diag in diagnostics:
        by_line: dict[int, list[str]] = by_file.setdefault(diag.file_path, {})
        by_line.setdefault(diag.line, []).append(diag.message)

    plans: list[FileEditPlan] = []
    for file_path, by_line in by_file.items():
        sites: tuple[EditSite, ...] = tuple(
            EditSite(line=line, messages=tuple(messages))
            for line, messages in sorted(by_line.items(), key=lambda kv: kv[0], reverse=True)
        )
        plans.append(FileEditPlan(file_path=file_path, sites=sites))
        logger.trace("Plan for %s: lines %s", file_path, [s.line for s in sites])

    logger.debug("Grouped diagnostics into %d file plan(s)", len(plans))
    return plans
