# topmark:header:start
#
#   project      : TsMark
#   file         : reporter.py
#   file_relpath : src/tsmark/cli/reporter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render pipeline events on the console.

Output rules:

* failed reads/writes are always shown (``[INFO] Reading <path>...FAILED!``);
  successful ones only in verbose mode;
* every insertion is shown as a pseudo-diff in dry (preview) or verbose mode: the
  inserted lines with their new line numbers, followed by the shifted target line;
* skipped sites are shown in verbose mode;
* with ``--diff``, a unified diff is shown for every changed file.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tsmark.pipeline.reporter import EditEvent, FileEvent, IoEvent, SkipEvent
from tsmark.utils.diff import render_patch, unified_diff

if TYPE_CHECKING:
    from tsmark.cli_shared.console_api import ConsoleLike
    from tsmark.pipeline.reporter import Event
    from tsmark.pipeline.status import SkipReason


class ConsoleReporter:
    """Reporter printing events through a `ConsoleLike`.

    Args:
        console (ConsoleLike): Output sink.
        verbose (bool): Trace successful I/O, every insertion and every skip.
        show_diff (bool): Print a unified diff per changed file.
    """

    def __init__(self, console: ConsoleLike, *, verbose: bool = False, show_diff: bool = False):
        self.console = console
        self.verbose = verbose
        self.show_diff = show_diff

    def report(self, event: Event) -> None:
        """Render ``event`` according to the output rules."""
        if isinstance(event, IoEvent):
            self._io(event)
        elif isinstance(event, EditEvent):
            if event.preview or self.verbose:
                self._edit(event)
        elif isinstance(event, SkipEvent):
            if self.verbose:
                self._skip(event)
        elif isinstance(event, FileEvent):
            if self.show_diff and event.outcome.changed:
                self._diff(event)

    def _io(self, event: IoEvent) -> None:
        c = self.console
        head = f"[INFO] {event.operation.value} {event.path}..."
        if not event.ok:
            c.print(f"{head}{c.styled('FAILED!', fg='red')} {event.error}")
        elif self.verbose:
            c.print(f"{head}{c.styled('OK', fg='green')}")

    def _edit(self, event: EditEvent) -> None:
        c = self.console
        edit = event.edit
        c.print(c.styled(event.file_path, fg="magenta"))
        for idx, line in enumerate(edit.block):
            c.print(f" {edit.line + idx}: {c.styled(line, fg='green')}")
        c.print(f" {edit.shifted_line}: {c.styled(edit.target, fg='yellow')}")
        c.print()

    def _reason(self, reason: SkipReason) -> str:
        return reason.styled() if self.console.enable_color else reason.value

    def _skip(self, event: SkipEvent) -> None:
        self.console.print(
            f" {event.file_path}:{event.site.line}: skipped ({self._reason(event.site.reason)})"
        )

    def _diff(self, event: FileEvent) -> None:
        outcome = event.outcome
        diff: list[str] = unified_diff(
            outcome.original_lines, outcome.updated_lines, outcome.file_path
        )
        if self.console.enable_color:
            self.console.print(render_patch(diff), nl=False)
        else:
            for line in diff:
                self.console.print(line)
