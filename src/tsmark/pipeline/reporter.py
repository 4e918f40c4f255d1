# topmark:header:start
#
#   project      : TsMark
#   file         : reporter.py
#   file_relpath : src/tsmark/pipeline/reporter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pipeline events and the reporter protocol.

Components never print. They hand events to an explicit `Reporter` passed in by the
caller; the CLI renders them (`tsmark.cli.reporter.ConsoleReporter`), tests record them
(`RecordingReporter`) and API users may ignore them (`NullReporter`).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol, TypeVar, Union

if TYPE_CHECKING:
    from pathlib import Path

    from tsmark.pipeline.mutator import AppliedEdit, SkippedSite
    from tsmark.pipeline.runner import FileOutcome
    from tsmark.pipeline.status import IoOperation


@dataclass(frozen=True, slots=True)
class IoEvent:
    """A file was read or written (``ok``) or the operation failed (``error``)."""

    operation: IoOperation
    path: Path
    ok: bool
    error: BaseException | None = None


@dataclass(frozen=True, slots=True)
class EditEvent:
    """An insertion block was spliced into a buffer.

    ``preview`` is True when the run is dry and the edit will not be persisted.
    """

    file_path: str
    edit: AppliedEdit
    preview: bool = False


@dataclass(frozen=True, slots=True)
class SkipEvent:
    """A site produced no edit."""

    file_path: str
    site: SkippedSite


@dataclass(frozen=True, slots=True)
class FileEvent:
    """All sites of a file were processed (and the file persisted, unless dry)."""

    outcome: FileOutcome


Event = Union[IoEvent, EditEvent, SkipEvent, FileEvent]

E = TypeVar("E", IoEvent, EditEvent, SkipEvent, FileEvent)


class Reporter(Protocol):
    """Receiver of pipeline events."""

    def report(self, event: Event) -> None:
        """Handle one event."""
        ...


class NullReporter:
    """Reporter discarding every event."""

    def report(self, event: Event) -> None:
        """Ignore ``event``."""
        return None


@dataclass
class RecordingReporter:
    """Reporter keeping every event in order (useful in tests and API callers)."""

    events: list[Event] = field(default_factory=lambda: [])

    def report(self, event: Event) -> None:
        """Append ``event``."""
        self.events.append(event)

    def of_type(self, kind: type[E]) -> list[E]:
        """Return the recorded events of type ``kind``, in order."""
        return [e for e in self.events if isinstance(e, kind)]
