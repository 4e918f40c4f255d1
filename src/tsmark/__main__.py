# topmark:header:start
#
#   project      : TsMark
#   file         : __main__.py
#   file_relpath : src/tsmark/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running TsMark via ``python -m tsmark``.

It delegates directly to :func:`tsmark.cli.main.cli`, ensuring a single,
authoritative CLI entry point regardless of how TsMark is launched.

Examples:
    Checkpoint the errors listed in a report::

        python -m tsmark apply tsc-errors.txt
"""

from __future__ import annotations

from tsmark.cli.main import cli

if __name__ == "__main__":
    # We call the Click group directly
    cli()
