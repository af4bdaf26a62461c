"""
Correctness pattern for a single (target, guess) pair.

Conventions:
  - Correctness.CORRECT   ('C') : right letter, right position
  - Correctness.MISPLACED ('M') : letter present elsewhere and still unconsumed
  - Correctness.ABSENT    ('A') : letter not usable at that position

This implementation is:
  - length-aware (any word length)
  - duplicate-safe (each target letter satisfies at most one guess position)
  - deterministic (same inputs -> same outputs)

Algorithm (two-pass):
  1) First pass marks every exact match CORRECT and consumes that target slot.
  2) Second pass, for each remaining guess position, scans the target left to
     right and consumes the FIRST unconsumed slot holding the same letter
     (MISPLACED), then stops. No such slot -> ABSENT.

Patterns are tuples of Correctness. For bucketing they also have an integer
code in base 3 (first position most significant, ABSENT=0, MISPLACED=1,
CORRECT=2).
"""

from __future__ import annotations

from enum import Enum
from functools import lru_cache
from itertools import product
from typing import Iterator, Tuple


class Correctness(Enum):
    CORRECT = "C"
    MISPLACED = "M"
    ABSENT = "A"


Pattern = Tuple[Correctness, ...]

# Digit of each symbol in the base-3 pattern code
_DIGIT = {Correctness.ABSENT: 0, Correctness.MISPLACED: 1, Correctness.CORRECT: 2}

# Enumeration order used by all_patterns()
SYMBOLS = (Correctness.CORRECT, Correctness.MISPLACED, Correctness.ABSENT)


def compute(target: str, guess: str) -> Pattern:
    """
    Compute the correctness pattern for `guess` played against `target`.

    Preconditions:
      - len(target) == len(guess)

    Examples:
      compute("abba", "baab")   -> (M, M, M, M)
      compute("allow", "llama") -> (M, C, M, A, A)
    """
    if len(target) != len(guess):
        raise ValueError(f"length mismatch: target={target!r} guess={guess!r}")

    n = len(guess)
    pattern = [Correctness.ABSENT] * n
    consumed = [False] * n

    # Pass 1: exact matches consume their own target slot
    for i in range(n):
        if guess[i] == target[i]:
            pattern[i] = Correctness.CORRECT
            consumed[i] = True

    # Pass 2: first unconsumed occurrence, consume and stop
    for i in range(n):
        if pattern[i] is Correctness.CORRECT:
            continue
        for j in range(n):
            if not consumed[j] and target[j] == guess[i]:
                consumed[j] = True
                pattern[i] = Correctness.MISPLACED
                break

    return tuple(pattern)


def encode(pattern: Pattern) -> int:
    """Pattern -> base-3 integer code."""
    code = 0
    for c in pattern:
        code = code * 3 + _DIGIT[c]
    return code


@lru_cache(maxsize=1 << 20)
def pattern_code(target: str, guess: str) -> int:
    """Integer code of compute(target, guess); memoised across rounds."""
    return encode(compute(target, guess))


def all_patterns(n: int, fixed: int = 0) -> Iterator[Pattern]:
    """
    Yield every pattern of length n (3**n of them).

    With fixed=k the first k symbols are pinned to CORRECT and only the
    remaining 3**(n-k) combinations are enumerated.
    """
    if not 0 <= fixed <= n:
        raise ValueError(f"fixed must be in [0, {n}]; got {fixed}")
    head = (Correctness.CORRECT,) * fixed
    for tail in product(SYMBOLS, repeat=n - fixed):
        yield head + tail


def is_solved(pattern: Pattern) -> bool:
    return all(c is Correctness.CORRECT for c in pattern)
