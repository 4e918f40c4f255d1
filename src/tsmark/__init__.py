# topmark:header:start
#
#   project      : TsMark
#   file         : __init__.py
#   file_relpath : src/tsmark/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TsMark package.

TsMark checkpoints the current set of TypeScript type errors of a code base: it reads a
``tsc`` diagnostic report and inserts a ``@ts-expect-error`` directive (tagged with a TODO
note) above every reported line, so that stricter checking can be enabled before every
violation is fixed.
"""

from __future__ import annotations
