# topmark:header:start
#
#   project      : TsMark
#   file         : __init__.py
#   file_relpath : src/tsmark/pipeline/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The diagnostic-to-edit pipeline.

report → parse → (sample) → group → per file: read → mutate → write (or preview).

The public entry points are `run_report` and `run_plans`; the building blocks are
importable from their own modules for finer-grained use.
"""

from __future__ import annotations

from tsmark.pipeline.formatter import FixedDecision, SiteContext, SiteFormatter
from tsmark.pipeline.grouper import EditSite, FileEditPlan, group_diagnostics
from tsmark.pipeline.mutator import AppliedEdit, FileMutator, SkippedSite
from tsmark.pipeline.processors.types import CommentSyntax
from tsmark.pipeline.runner import FileOutcome, RunResult, run_plans, run_report
from tsmark.pipeline.sampler import SamplingError, sample
from tsmark.pipeline.status import SkipReason

__all__ = [
    "AppliedEdit",
    "CommentSyntax",
    "EditSite",
    "FileEditPlan",
    "FileMutator",
    "FileOutcome",
    "FixedDecision",
    "RunResult",
    "SamplingError",
    "SiteContext",
    "SiteFormatter",
    "SkipReason",
    "SkippedSite",
    "group_diagnostics",
    "run_plans",
    "run_report",
    "sample",
]
