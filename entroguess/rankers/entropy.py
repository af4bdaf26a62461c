"""
Entropy Ranker (expected information gain), bucketed.

Main idea:
  - For a guess g, every candidate c produces exactly one pattern
    compute(c, g). Grouping candidates by that pattern gives the same counts
    as enumerating all 3**N patterns and testing each candidate against each,
    at a fraction of the cost.
  - Shannon entropy H over the bucket counts is the score.

Known prefix:
  - With the first k letters known, only patterns whose first k symbols are
    CORRECT are counted. Buckets outside that set are dropped while the
    denominator stays |candidates|, which keeps the result identical to the
    pinned enumeration in `enumerative.py`.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from .base import BaseRanker, register
from entroguess.engine import pattern_code


def entropy_from_counts(counts: np.ndarray, total: int) -> float:
    """Shannon entropy (bits) of bucket counts over `total` outcomes."""
    counts = counts[counts > 0]
    if total <= 0 or counts.size == 0:
        return 0.0
    probs = counts / total
    # + 0.0 turns -0.0 (single bucket) into 0.0
    return float(-np.sum(probs * np.log2(probs))) + 0.0


def pattern_codes(guess: str, candidates: Sequence[str]) -> np.ndarray:
    """Base-3 pattern code of `guess` against each candidate."""
    return np.fromiter((pattern_code(c, guess) for c in candidates),
                       dtype=np.int64, count=len(candidates))


@register
class EntropyRanker(BaseRanker):
    id = "entropy"
    name = "Entropy (bucketed)"
    version = "1.0.0"

    def score(self, guess: str, candidates: Sequence[str], fixed: int = 0) -> float:
        n = len(candidates)
        if n == 0:
            return 0.0

        codes = pattern_codes(guess, candidates)
        if fixed:
            # Leading `fixed` digits all CORRECT (2) <=> high part == 3**fixed - 1
            tail = 3 ** (len(guess) - fixed)
            codes = codes[codes // tail == 3 ** fixed - 1]

        _, counts = np.unique(codes, return_counts=True)
        return entropy_from_counts(counts, n)
