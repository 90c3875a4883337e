"""Divergence measures between discrete probability distributions."""

from __future__ import annotations

import math
from collections.abc import Sequence

# Machine epsilon of a 32-bit float, guarding against log of zero.
EPSILON = 1.1920929e-07


def similarity(p: Sequence[float], q: Sequence[float]) -> float:
    """Kullback-Leibler divergence of ``p`` from ``q`` in bits.

    Raises ValueError if the distributions differ in length.
    """
    return sum(
        a * math.log2((a + EPSILON) / (b + EPSILON))
        for a, b in zip(p, q, strict=True)
    )


def symmetric_similarity(p: Sequence[float], q: Sequence[float]) -> float:
    """Jensen-Shannon divergence of ``p`` and ``q`` in bits."""
    mix = [(a + b) * 0.5 for a, b in zip(p, q, strict=True)]
    return (similarity(p, mix) + similarity(q, mix)) * 0.5