# apps/cli/play.py
"""
Interactive solver.

Usage:
    python -m apps.cli.play 5 crane AMACA --first-letter s

The first guess and its mask seed the candidate set. Each round then prints:
  1) the ranked (word, entropy) suggestions,
  2) the number of remaining candidates,
  3) the candidates themselves,
and reads two lines from stdin: the word actually played and its mask
(C = correct, M = misplaced, A = absent). The loop ends when one candidate
is left.

Exit status: 0 solved, 1 input closed/interrupted, 2 bad configuration or
input, 3 feedback contradicts the dictionary.
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional, TextIO

from apps.cli.common import (
    EXIT_CONTRADICTION, EXIT_INTERRUPTED, add_common_args, add_ranking_args,
    build_config, fail, load_dictionary,
)
from entroguess.engine import ConfigError, GuessRecord, MaskDecodeError, eligible, require_guess
from entroguess.harness import RoundReport, Session, SolverState, matching_words
from entroguess.rankers import create_ranker


class ConsoleFeedback:
    """Feedback source reading `word` then `mask` lines from a text stream."""

    def __init__(self, stream: Optional[TextIO] = None, prompt: Optional[TextIO] = None):
        self.stream = stream if stream is not None else sys.stdin
        self.prompt = prompt if prompt is not None else sys.stderr

    def _read(self, label: str) -> str:
        self.prompt.write(f"{label}> ")
        self.prompt.flush()
        line = self.stream.readline()
        if not line:
            raise EOFError(f"input closed while waiting for {label}")
        return line.strip()

    def __call__(self) -> GuessRecord:
        word = self._read("guess").lower()
        mask = self._read("mask")
        return GuessRecord.parse(word, mask)


def print_round(report: RoundReport, out: Optional[TextIO] = None) -> None:
    out = out if out is not None else sys.stdout
    out.write(f"--- round {report.round} ---\n")
    for i, s in enumerate(report.suggestions, 1):
        out.write(f"{i:>3}. {s.word}  {s.entropy:.4f} bits\n")
    out.write(f"{len(report.candidates)} candidates\n")
    out.write(" ".join(report.candidates) + "\n")
    out.flush()


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="entroguess: interactive entropy solver")
    add_common_args(ap)
    add_ranking_args(ap)
    ap.add_argument("guess", help="first word played")
    ap.add_argument("mask", help="feedback for the first word, e.g. CAMAA")
    ap.add_argument("--list-only", action="store_true",
                    help="print the words matching the first guess and exit")
    args = ap.parse_args(argv)

    try:
        config = build_config(args)
        first = GuessRecord.parse(args.guess.lower(), args.mask)
        require_guess(first.word, config.word_length)
    except (ConfigError, MaskDecodeError) as e:
        fail(str(e))

    words = load_dictionary(args.dict)
    if not eligible(words, config.word_length, config.prefix):
        fail(f"{args.dict}: no words of length {config.word_length}"
             + (f" starting with {config.prefix!r}" if config.prefix else ""))

    if args.list_only:
        for w in matching_words(words, config, first):
            print(w)
        return 0

    session = Session(words, config=config, ranker=create_ranker(args.ranker),
                      feedback=ConsoleFeedback(), on_round=print_round)
    try:
        result = session.run(first)
    except MaskDecodeError as e:
        fail(str(e))
    except (EOFError, KeyboardInterrupt) as e:
        fail(str(e) or "interrupted", EXIT_INTERRUPTED)

    if result.state is SolverState.CONTRADICTION:
        fail("no dictionary word is consistent with the feedback given", EXIT_CONTRADICTION)

    print(f"answer: {result.answer}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
