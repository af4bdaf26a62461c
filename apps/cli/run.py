# apps/cli/run.py
"""
CLI entry point for self-play benchmarks.

This script:
  1) Validates the dictionary (prints counts + SHA).
  2) Loads the words and instantiates the requested ranker.
  3) Plays one game per answer: the fixed first guess, then the top
     suggestion each round, with feedback computed from the hidden answer.
  4) Writes, with a live progress indicator:
       - CSV:  per-case results + guess/mask history columns
       - JSON: manifest with config, dictionary hash, git commit, etc.
"""

from __future__ import annotations

import argparse
import random
import sys
import time
from pathlib import Path
from typing import List, Optional

from tqdm import tqdm

from apps.cli.common import (
    add_common_args, add_ranking_args, build_config, fail, load_dictionary, positive_int,
    progress_mode,
)
from entroguess.datasets import validate_dictionary, pretty_summary
from entroguess.engine import ConfigError, eligible, require_guess, MaskDecodeError
from entroguess.harness import run_case
from entroguess.harness.core import DEFAULT_MAX_ROUNDS
from entroguess.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown
from entroguess.rankers import create_ranker


def main(argv: Optional[List[str]] = None) -> int:
    """
    Parse CLI args, validate the dictionary, run the batch with progress, and write outputs.
    """
    ap = argparse.ArgumentParser(description="entroguess: self-play benchmark")
    add_common_args(ap, length_positional=False)
    add_ranking_args(ap)
    ap.add_argument("--first-guess", required=True, help="opening word used in every game")
    ap.add_argument("--answers",
                    help="path to the hidden-answer list (default: the dictionary itself)")
    ap.add_argument("--sample", type=int,
                    help="run only a subset of answers (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="RNG seed for --sample")
    ap.add_argument("--max-rounds", type=positive_int, default=DEFAULT_MAX_ROUNDS,
                    help=f"give up after this many rounds (default {DEFAULT_MAX_ROUNDS})")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar on a terminal, else plain text)."
    )
    args = ap.parse_args(argv)

    try:
        config = build_config(args)
        first_guess = require_guess(args.first_guess.lower(), config.word_length)
    except (ConfigError, MaskDecodeError) as e:
        fail(str(e))

    # 1) Validate the dictionary and print a one-liner summary
    rep = validate_dictionary(config.word_length, args.dict, config.prefix)
    print(pretty_summary(rep))
    if not rep["passed"]:
        fail("; ".join(rep["issues"]))

    # 2) Load lists into memory (lowercased, no blanks)
    words = load_dictionary(args.dict)
    answers = load_dictionary(args.answers) if args.answers else words
    ranker = create_ranker(args.ranker)

    # 3) Choose cases (deterministic sample by seed)
    cases = eligible(answers, config.word_length, config.prefix)
    if args.sample and args.sample < len(cases):
        rng = random.Random(args.seed)
        rng.shuffle(cases)
        cases = cases[: args.sample]
    total = len(cases)

    mode = progress_mode(args.progress)
    iterator = tqdm(cases, ncols=80, desc="Running", unit="game") if mode == "bar" else cases

    results = []
    start = time.time()
    last_print = 0.0

    # 4) Run batch with live progress
    for idx, ans in enumerate(iterator, 1):
        r = run_case(ans, words, config=config, ranker=ranker,
                     first_guess=first_guess, max_rounds=args.max_rounds)
        r["ranker_id"] = ranker.id  # stamp id for downstream tools
        results.append(r)

        if mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                elapsed = now - start
                rate = (idx / elapsed) if elapsed > 0 else 0.0
                remaining = (total - idx) / rate if rate > 0 else 0.0
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(
                    f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s | ETA {remaining:5.1f}s"
                )
                sys.stderr.flush()
                last_print = now

    if mode == "plain":
        sys.stderr.write("\n"); sys.stderr.flush()

    solved = sum(1 for r in results if r["success"])
    if solved:
        mean = sum(r["guesses"] for r in results if r["success"]) / solved
        print(f"Solved {solved}/{total} (mean {mean:.3f} guesses)")
    else:
        print(f"Solved 0/{total}")

    # 5) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path), max_rounds=args.max_rounds, N=config.word_length)
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "dictionary": rep,
        "num_cases": len(results),
        "ranker_id": ranker.id,
    }
    write_manifest(manifest, str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
