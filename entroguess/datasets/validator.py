"""
Dictionary validator.

What this module does:
- Summarise a dictionary file for a given word length N (and optional prefix).
- Count eligible words, other-length lines, non-alphabetic lines and blanks.
- Detect duplicates among eligible words; compute SHA-256 of the raw file.
- Return a machine-readable dict (for manifests) and a pretty one-line summary.

Unlike strict word-list pipelines, words of other lengths are expected in a
general dictionary and are not a failure. A report passes when the file
exists and holds at least one eligible word.

Typical use:
    from entroguess.datasets import validate_dictionary, pretty_summary
    rep = validate_dictionary(5, "data/dict.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List
import hashlib


@dataclass
class DictionaryReport:
    """Diagnostics and metadata for one dictionary file."""
    N: int
    prefix: str
    path: str
    exists: bool
    sha256: str             # SHA-256 of raw file bytes (empty string if missing)
    lines: int              # total lines read
    eligible: int           # words of length N with the prefix
    unique_eligible: int    # eligible words after dedupe
    other_length: int       # words of a different length (ignored, not an error)
    non_alpha: int          # words with non-letter characters (any length)
    blank: int              # empty/whitespace-only lines
    passed: bool = False
    issues: List[str] = field(default_factory=list)


def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def validate_dictionary(N: int, path: str, prefix: str = "") -> Dict:
    """
    Validate a dictionary file for words of length N starting with `prefix`.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see DictionaryReport) with counts,
        SHA-256, `passed` and a list of `issues`.
    """
    p = Path(path)
    prefix = prefix.lower()
    if not p.is_file():
        return asdict(DictionaryReport(
            N=N, prefix=prefix, path=path, exists=False, sha256="", lines=0,
            eligible=0, unique_eligible=0, other_length=0, non_alpha=0, blank=0,
            passed=False, issues=[f"dictionary file not found: {path}"],
        ))

    lines = 0
    blank = 0
    non_alpha = 0
    other_length = 0
    eligible: List[str] = []

    with p.open("r", encoding="utf-8") as f:
        for raw in f:
            lines += 1
            w = raw.strip().lower()
            if not w:
                blank += 1
                continue
            # flagged only; the engine compares characters, not letters
            if not w.isalpha():
                non_alpha += 1
            if len(w) != N:
                other_length += 1
            elif w.startswith(prefix):
                eligible.append(w)

    unique = len(set(eligible))
    issues: List[str] = []
    if not eligible:
        hint = f" starting with {prefix!r}" if prefix else ""
        issues.append(f"no {N}-letter words{hint}")
    if unique != len(eligible):
        issues.append(f"{len(eligible) - unique} duplicate eligible word(s)")
    if non_alpha:
        issues.append(f"{non_alpha} non-alphabetic line(s)")

    rep = DictionaryReport(
        N=N, prefix=prefix, path=str(p), exists=True, sha256=_sha256_file(p),
        lines=lines, eligible=len(eligible), unique_eligible=unique,
        other_length=other_length, non_alpha=non_alpha, blank=blank,
        passed=bool(eligible), issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        N=5 | eligible=2315 (uniq=2315) | lines=10657 | sha=abc123def456 | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    prefix = f" prefix={report['prefix']!r}" if report["prefix"] else ""
    sha = (report.get("sha256") or "")[:12]
    return (
        f"N={report['N']}{prefix} | eligible={report['eligible']} "
        f"(uniq={report['unique_eligible']}) | lines={report['lines']} "
        f"| sha={sha} | {status}"
    )
