from __future__ import annotations
from pathlib import Path
from typing import List

from entroguess.engine.errors import ConfigError


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises ConfigError if the path doesn't exist or can't be read.
    """
    p = Path(p)
    if not p.is_file():
        raise ConfigError(f"dictionary file not found: {p}")
    try:
        text = p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"cannot read dictionary {p}: {e}") from e
    return [ln.rstrip("\r\n") for ln in text.splitlines()]


def load_words(p: Path | str) -> List[str]:
    """
    Read a newline-separated dictionary, normalize to lowercase, drop blanks.
    Order is kept; duplicates are left for the candidate filter to collapse.
    """
    return [w.strip().lower() for w in read_lines(p) if w.strip()]
