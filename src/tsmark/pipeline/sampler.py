# topmark:header:start
#
#   project      : TsMark
#   file         : sampler.py
#   file_relpath : src/tsmark/pipeline/sampler.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Uniform sampling without replacement.

Used to checkpoint a random subset of a large diagnostic report (e.g. to review the
tool's output on a handful of sites before running it on everything).
"""

from __future__ import annotations

import random
from typing import TYPE_CHECKING, TypeVar

from tsmark.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

    from tsmark.config.logging import TsmarkLogger

logger: TsmarkLogger = get_logger(__name__)

T = TypeVar("T")


class SamplingError(ValueError):
    """Raised when a sample size is outside ``0 <= n <= len(items)``."""


def sample(items: Sequence[T], n: int, *, rng: random.Random | None = None) -> list[T]:
    """Return ``n`` distinct elements drawn uniformly at random from ``items``.

    Elements are distinct by position: equal values present twice in ``items`` may
    both be selected. The order of the result is unrelated to the input order.

    Args:
        items (Sequence[T]): Population to draw from.
        n (int): Sample size.
        rng (random.Random | None): Entropy source; a fresh unseeded generator when None.

    Returns:
        list[T]: The sampled elements.

    Raises:
        SamplingError: If ``n`` is negative or larger than the population.
    """
    if n < 0 or n > len(items):
        raise SamplingError(f"Cannot sample {n} item(s) from a population of {len(items)}")

    picked: list[T] = (rng or random.Random()).sample(list(items), n)
    logger.debug("Sampled %d of %d item(s)", n, len(items))
    return picked
