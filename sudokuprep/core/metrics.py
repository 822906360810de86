"""Search-space size helpers."""

from __future__ import annotations

import math
from typing import Iterable


def search_space_bits(domain_sizes: Iterable[int]) -> float:
    """log2 of the number of candidate assignments left for the search."""
    bits = 0.0
    for size in domain_sizes:
        if size == 0:
            return -math.inf
        bits += math.log2(size)
    return bits


def pruning_gain(preprocessor, side_length: int) -> float:
    """Bits removed from the naive search space by propagation.

    The naive space lets each initially empty cell take any of ``side_length``
    values; an infeasible result has no assignments left and gains ``inf``.
    """
    prior = preprocessor.initial_undetermined * math.log2(side_length)
    post = search_space_bits(len(preprocessor.domain_of(i)) for i in preprocessor.undetermined_cells())
    return prior - post
