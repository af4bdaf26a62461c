"""
Feedback mask codec.

A mask is the textual form of a pattern: one character per position,
'C' (correct), 'M' (misplaced) or 'A' (absent). Parsing is case-insensitive
and ignores surrounding whitespace; anything else is rejected, never defaulted.
"""

from __future__ import annotations

from .errors import MaskDecodeError
from .scoring import Correctness, Pattern

_BY_CHAR = {c.value: c for c in Correctness}


def parse_mask(text: str, n: int | None = None) -> Pattern:
    """
    Parse a mask such as "CMAAC" into a pattern.

    Raises:
      MaskDecodeError if a character is not one of C/M/A, or if `n` is given
      and the mask does not have exactly n characters.
    """
    s = text.strip().upper()
    if n is not None and len(s) != n:
        raise MaskDecodeError(f"mask {text.strip()!r} has length {len(s)}, expected {n}")
    try:
        return tuple(_BY_CHAR[ch] for ch in s)
    except KeyError as e:
        raise MaskDecodeError(
            f"mask {text.strip()!r} contains {e.args[0]!r}; use only C, M or A") from e


def format_mask(pattern: Pattern) -> str:
    """Inverse of parse_mask: (CORRECT, ABSENT) -> "CA"."""
    return "".join(c.value for c in pattern)
