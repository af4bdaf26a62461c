"""
Dictionary analysis without the interactive loop.

- iter_entropy_report: every eligible word scored against the full eligible set.
- format_report_lines: the `word, entropy` text form of that report.
- matching_words:      eligible words consistent with a single record.
"""

from __future__ import annotations

from typing import Iterable, Iterator, List, Sequence

from entroguess.config import SolverConfig
from entroguess.engine import GuessRecord, eligible, narrow
from entroguess.rankers import BaseRanker, Scored

REPORT_HEADER = "word, entropy"


def iter_entropy_report(words: Sequence[str], config: SolverConfig,
                        ranker: BaseRanker) -> Iterator[Scored]:
    """
    Score each eligible word as a guess against all eligible words.

    Rows are yielded in dictionary order (not sorted), one per eligible word,
    as soon as they are computed.
    """
    pool = eligible(words, config.word_length, config.prefix)
    scores = ranker.iter_scores(pool, pool, fixed=config.fixed, workers=config.workers)
    for w, h in zip(pool, scores):
        yield Scored(w, h)


def entropy_report(words: Sequence[str], config: SolverConfig,
                   ranker: BaseRanker) -> List[Scored]:
    return list(iter_entropy_report(words, config, ranker))


def format_report_lines(rows: Iterable[Scored]) -> Iterator[str]:
    yield REPORT_HEADER
    for row in rows:
        yield f"{row.word}, {row.entropy!r}"


def matching_words(words: Sequence[str], config: SolverConfig,
                   record: GuessRecord) -> List[str]:
    return narrow(eligible(words, config.word_length, config.prefix), record)
