"""
I/O utilities for report and benchmark runs.

Responsibilities:
- write_report:   the `word, entropy` dictionary report as a text file.
- write_csv:      flatten self-play results into a tidy CSV (one row per game).
- write_manifest: dump a JSON manifest with config, hashes, and metadata.
- timestamp_id:   stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable, List
import csv
import json
import subprocess
import datetime as dt

from entroguess.rankers import Scored
from .report import format_report_lines


def write_report(rows: Iterable[Scored], path: str) -> str:
    """Write the `word, entropy` report (header included). Returns the path."""
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        for line in format_report_lines(rows):
            f.write(line + "\n")
    return str(p)


def write_csv(results: List[Dict], path: str, max_rounds: int, N: int) -> str:
    """
    Serialize a batch of self-play results to CSV.

    Schema (columns):
      ranker, N, answer, success, state, guesses, time_ms,
      guess_1, mask_1, ..., guess_<max_rounds+1>, mask_<max_rounds+1>

    The history holds the seeding record plus one record per round, hence
    max_rounds + 1 guess columns.
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    slots = max_rounds + 1

    fields = ["ranker", "N", "answer", "success", "state", "guesses", "time_ms"]
    for i in range(1, slots + 1):
        fields += [f"guess_{i}", f"mask_{i}"]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()

        for r in results:
            row = {
                "ranker": r.get("ranker_id", "?"),
                "N": N,
                "answer": r["answer"],
                "success": r["success"],
                "state": r["state"],
                "guesses": r["guesses"],
                "time_ms": round(float(r["time_ms"]), 3),
            }

            # Expand history into fixed columns
            hist = r.get("history", [])
            for i in range(1, slots + 1):
                if i <= len(hist):
                    g, mask = hist[i - 1]
                    row[f"guess_{i}"] = g
                    row[f"mask_{i}"] = mask
                else:
                    row[f"guess_{i}"] = ""
                    row[f"mask_{i}"] = ""

            w.writerow(row)

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest with run configuration and dictionary summary.

    Typical keys:
      - run_id, git_commit
      - config: CLI args
      - dictionary: output of datasets.validate_dictionary(...)
      - num_cases / num_rows
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
