"""
Candidate filtering given game history.

Given:
  - a dictionary of words
  - the word length N (and optionally a known prefix, e.g. the first letter)
  - a history of GuessRecord(word, pattern) pairs

Return:
  - the words that are consistent with ALL feedback seen so far.

This is the core step that turns feedback into a shrinking candidate set.
A candidate is consistent with a record when, treated as the hidden target,
it reproduces the recorded pattern exactly for the recorded guess.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List

from .errors import MaskDecodeError
from .masks import format_mask, parse_mask
from .scoring import Pattern, compute


@dataclass(frozen=True)
class GuessRecord:
    """A played (or hypothesised) guess and the pattern it received."""
    word: str
    pattern: Pattern

    def __post_init__(self):
        if len(self.word) != len(self.pattern):
            raise MaskDecodeError(
                f"guess {self.word!r} has length {len(self.word)} "
                f"but its pattern has length {len(self.pattern)}")

    @classmethod
    def parse(cls, word: str, mask: str) -> "GuessRecord":
        """Build a record from a word and its textual mask."""
        word = word.strip()
        return cls(word, parse_mask(mask, len(word)))

    def __str__(self) -> str:
        return f"{self.word} {format_mask(self.pattern)}"


def matches(record: GuessRecord, candidate: str) -> bool:
    """
    True iff guessing `record.word` against `candidate` reproduces
    `record.pattern` position by position.
    """
    if len(candidate) != len(record.word):
        return False
    return compute(candidate, record.word) == record.pattern


def eligible(words: Iterable[str], N: int, prefix: str = "") -> List[str]:
    """
    Keep words of length N that start with `prefix`, each once, in
    first-occurrence order.

    `prefix` is the known leading letter(s); "" means unconstrained.
    """
    return list(dict.fromkeys(w for w in words if len(w) == N and w.startswith(prefix)))


def narrow(candidates: Iterable[str], record: GuessRecord) -> List[str]:
    """One filtering step: keep candidates consistent with `record`."""
    return [w for w in candidates if matches(record, w)]


def filter_candidates(words: Iterable[str], history: Iterable[GuessRecord], N: int,
                      prefix: str = "") -> List[str]:
    """
    Keep only eligible words that would produce exactly the recorded
    pattern for every record in `history`.

    Args:
      words   : iterable of dictionary words (already normalised)
      history : iterable of GuessRecord seen so far
      N       : expected word length
      prefix  : known leading letter(s), "" if none

    Returns:
      List[str] of consistent candidates (order preserved as in `words`).
    """
    out = eligible(words, N, prefix)
    for record in history:
        out = narrow(out, record)
    return out
