"""
Entropy Ranker, literal enumeration.

For each possible pattern p (3**N, or 3**(N-k) with the first k symbols
pinned to CORRECT), count the candidates c for which GuessRecord(g, p)
matches c, skip empty buckets, and accumulate -P*log2(P).

Cost is O(3**N * |candidates|) per guess, so this is the reference the
bucketed ranker is checked against rather than the default.
"""

from __future__ import annotations

from math import log2
from typing import Sequence

from .base import BaseRanker, register
from entroguess.engine import GuessRecord, all_patterns, matches


@register
class EnumerativeRanker(BaseRanker):
    id = "enumerative"
    name = "Entropy (pattern enumeration)"
    version = "1.0.0"

    def score(self, guess: str, candidates: Sequence[str], fixed: int = 0) -> float:
        total = len(candidates)
        if total == 0:
            return 0.0

        H = 0.0
        for p in all_patterns(len(guess), fixed):
            record = GuessRecord(guess, p)
            n_p = sum(1 for c in candidates if matches(record, c))
            if n_p == 0:
                continue  # zero-probability bucket carries no weight
            P = n_p / total
            H += -(P * log2(P))
        return H + 0.0
