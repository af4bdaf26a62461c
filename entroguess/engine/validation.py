"""
Lightweight guess validation.

This module answers the question: "Can this word be recorded as a guess?"
A played word is acceptable iff:
  - it is a string
  - it has exact length N
  - it starts with the known prefix (if any)

The played word does not have to be in the dictionary: the player may have
typed anything the game accepted. Only its shape has to fit the session.
"""

from __future__ import annotations

from .errors import MaskDecodeError


def validate_guess(word: str, N: int, prefix: str = "") -> bool:
    """Return True if `word` can be recorded as a guess of length N."""
    if not isinstance(word, str):
        return False
    w = word.strip()
    return len(w) == N and w.startswith(prefix)


def require_guess(word: str, N: int, prefix: str = "") -> str:
    """Strip `word` and return it, or raise MaskDecodeError if it does not fit."""
    if not validate_guess(word, N, prefix):
        hint = f" starting with {prefix!r}" if prefix else ""
        raise MaskDecodeError(f"guess {word!r} is not a {N}-letter word{hint}")
    return word.strip()
