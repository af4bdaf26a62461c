# apps/cli/report.py
"""
Batch entropy report for a dictionary.

This script:
  1) Validates the dictionary for the requested length (prints a one-line
     summary with counts + SHA to stderr).
  2) Scores every eligible word against the full eligible set.
  3) Writes `word, entropy` lines (with header) to stdout, or to --out
     together with a JSON manifest.

Usage:
    python -m apps.cli.report 5 --dict data/dict.txt --out reports/entropy_5.txt
"""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path
from typing import List, Optional

from tqdm import tqdm

from apps.cli.common import add_common_args, build_config, fail, load_dictionary, progress_mode
from entroguess.datasets import validate_dictionary, pretty_summary
from entroguess.engine import ConfigError, eligible
from entroguess.harness import iter_entropy_report, format_report_lines
from entroguess.harness.io import write_report, write_manifest, timestamp_id, git_commit_or_unknown
from entroguess.rankers import create_ranker


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="entroguess: per-word entropy report")
    add_common_args(ap)
    ap.add_argument("--out", help="write the report here instead of stdout")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show scoring progress on stderr (auto=bar on a terminal, else plain)."
    )
    args = ap.parse_args(argv)

    try:
        config = build_config(args)
    except ConfigError as e:
        fail(str(e))

    # 1) Validate and summarise the dictionary
    rep = validate_dictionary(config.word_length, args.dict, config.prefix)
    sys.stderr.write(pretty_summary(rep) + "\n")
    if not rep["passed"]:
        fail("; ".join(rep["issues"]))

    words = load_dictionary(args.dict)
    total = len(eligible(words, config.word_length, config.prefix))
    rows = iter_entropy_report(words, config, create_ranker(args.ranker))

    # 2) Score with progress
    mode = progress_mode(args.progress)
    if mode == "bar":
        rows = tqdm(rows, total=total, ncols=80, desc="Scoring", unit="word", file=sys.stderr)

    collected = []
    start = time.time()
    last_print = 0.0
    for idx, row in enumerate(rows, 1):
        collected.append(row)
        if mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                elapsed = now - start
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s")
                sys.stderr.flush()
                last_print = now
    if mode == "plain" and total:
        sys.stderr.write("\n"); sys.stderr.flush()

    # 3) Output
    if not args.out:
        for line in format_report_lines(collected):
            print(line)
        return 0

    out_path = write_report(collected, args.out)
    manifest_path = str(Path(out_path).with_suffix(".manifest.json"))
    write_manifest({
        "run_id": timestamp_id(),
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "dictionary": rep,
        "num_rows": len(collected),
        "ranker_id": args.ranker,
    }, manifest_path)
    sys.stderr.write(f"Wrote: {out_path}\nWrote: {manifest_path}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
