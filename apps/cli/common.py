# apps/cli/common.py
"""
Argument and setup helpers shared by the CLI entry points.

Every CLI reports configuration and input errors once on stderr and exits
with a non-zero status; see `fail`.
"""

from __future__ import annotations

import argparse
import sys
from typing import List, NoReturn

from entroguess.config import DEFAULT_TOP, DEFAULT_WORD_LENGTH, POOL_CHOICES, SolverConfig
from entroguess.datasets import load_words
from entroguess.engine import ConfigError
from entroguess.rankers import DEFAULT_RANKER, get_ranker_ids

DEFAULT_DICT = "data/dict.txt"

# Exit statuses
EXIT_INTERRUPTED = 1
EXIT_BAD_INPUT = 2
EXIT_CONTRADICTION = 3


def fail(msg: str, status: int = EXIT_BAD_INPUT) -> NoReturn:
    sys.stderr.write(f"error: {msg}\n")
    sys.exit(status)


def _first_letter(value: str) -> str:
    v = value.strip().lower()
    if len(v) != 1 or not v.isalpha():
        raise argparse.ArgumentTypeError(f"first letter must be a single letter; got {value!r}")
    return v


def positive_int(value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected a positive integer; got {value!r}") from None
    if n < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer; got {value!r}")
    return n


def add_common_args(ap: argparse.ArgumentParser, *, length_positional: bool = True) -> None:
    """Dictionary, length, prefix and ranker options used by every CLI."""
    if length_positional:
        ap.add_argument("N", type=positive_int, help="word length")
    else:
        ap.add_argument("--N", type=positive_int, default=DEFAULT_WORD_LENGTH,
                        help=f"word length (default {DEFAULT_WORD_LENGTH})")
    ap.add_argument("--first-letter", type=_first_letter, default=None,
                    help="known first letter; only words starting with it are considered")
    ap.add_argument("--dict", default=DEFAULT_DICT,
                    help=f"newline-separated dictionary (default {DEFAULT_DICT})")
    ap.add_argument("--ranker", default=DEFAULT_RANKER, choices=get_ranker_ids(),
                    help=f"entropy ranker (default {DEFAULT_RANKER})")
    ap.add_argument("--workers", type=positive_int, default=1,
                    help="processes used to score guesses (default 1)")


def add_ranking_args(ap: argparse.ArgumentParser) -> None:
    ap.add_argument("--top", type=positive_int, default=DEFAULT_TOP,
                    help=f"suggestions shown per round (default {DEFAULT_TOP})")
    ap.add_argument("--pool", choices=POOL_CHOICES, default="eligible",
                    help="rank every eligible word, or only remaining candidates")


def build_config(args: argparse.Namespace) -> SolverConfig:
    return SolverConfig(
        word_length=args.N,
        prefix=args.first_letter or "",
        top=getattr(args, "top", None),
        pool=getattr(args, "pool", "eligible"),
        workers=args.workers,
    )


def load_dictionary(path: str) -> List[str]:
    """Load and lowercase the dictionary; exit with a message on failure."""
    try:
        return load_words(path)
    except ConfigError as e:
        fail(str(e))


def progress_mode(requested: str) -> str:
    """Resolve --progress auto to bar (interactive stderr) or plain."""
    if requested == "auto":
        return "bar" if sys.stderr.isatty() else "plain"
    return requested
