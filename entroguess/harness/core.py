"""
Solver loop and self-play primitives.

- Session:   the interactive state machine. Ranks the current candidates,
             asks a feedback source for the word actually played and its
             pattern, filters, repeats until one candidate (or none) is left.
- run_case:  self-play one game against a known answer (the feedback source
             plays the top suggestion and scores it with the engine).
- run_batch: run many self-play games in sequence.

These are UI-agnostic: the console, a test script or the benchmark CLI all
plug in through the feedback callable and the on_round callback.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, Iterable, List, Optional, Sequence

from entroguess.config import SolverConfig
from entroguess.engine import (
    ContradictionError, GuessRecord, compute, eligible, format_mask, is_solved, narrow,
    require_guess,
)
from entroguess.rankers import BaseRanker, Scored

# Round cap for self-play; interactive sessions are uncapped.
DEFAULT_MAX_ROUNDS = 12


class SolverState(Enum):
    RANKING = "ranking"
    AWAITING_FEEDBACK = "awaiting_feedback"
    FILTERING = "filtering"
    CONVERGED = "converged"
    CONTRADICTION = "contradiction"


TERMINAL_STATES = frozenset({SolverState.CONVERGED, SolverState.CONTRADICTION})

_TRANSITIONS = {
    SolverState.RANKING: {SolverState.AWAITING_FEEDBACK},
    SolverState.AWAITING_FEEDBACK: {SolverState.FILTERING},
    SolverState.FILTERING: {SolverState.RANKING, SolverState.CONVERGED,
                            SolverState.CONTRADICTION},
    SolverState.CONVERGED: set(),
    SolverState.CONTRADICTION: set(),
}

FeedbackSource = Callable[[], GuessRecord]


@dataclass(frozen=True)
class RoundReport:
    """What the loop shows the player before asking for feedback."""
    round: int
    suggestions: List[Scored]
    candidates: List[str]


@dataclass
class SessionResult:
    state: SolverState
    rounds: int
    history: List[GuessRecord] = field(default_factory=list)
    candidates: List[str] = field(default_factory=list)

    @property
    def answer(self) -> Optional[str]:
        return self.candidates[0] if self.state is SolverState.CONVERGED else None

    def raise_for_state(self) -> "SessionResult":
        """Raise ContradictionError if the session ended in CONTRADICTION."""
        if self.state is SolverState.CONTRADICTION:
            last = self.history[-1] if self.history else None
            raise ContradictionError(f"no word is consistent with the feedback (last: {last})")
        return self


class ScriptedFeedback:
    """Feedback source that replays a fixed list of records (tests, replays)."""

    def __init__(self, records: Iterable[GuessRecord]):
        self._records = iter(list(records))

    def __call__(self) -> GuessRecord:
        try:
            return next(self._records)
        except StopIteration:
            raise EOFError("scripted feedback exhausted") from None


class OracleFeedback:
    """
    Feedback source for self-play: plays the best suggestion of the latest
    round against a known answer. Bind it to a session with `observe` as the
    session's on_round callback.
    """

    def __init__(self, answer: str):
        self.answer = answer
        self._next: Optional[str] = None

    def observe(self, report: RoundReport) -> None:
        if report.suggestions:
            self._next = report.suggestions[0].word
        else:
            self._next = report.candidates[0]

    def __call__(self) -> GuessRecord:
        if self._next is None:
            raise RuntimeError("OracleFeedback called before any round was observed")
        guess, self._next = self._next, None
        return GuessRecord(guess, compute(self.answer, guess))


class Session:
    """
    One solving session over a dictionary.

    The candidate set is owned by the session: it starts as the eligible
    words, is narrowed once per record, and is never shared or re-grown.
    """

    def __init__(
            self,
            words: Sequence[str],
            *,
            config: SolverConfig,
            ranker: BaseRanker,
            feedback: FeedbackSource,
            on_round: Optional[Callable[[RoundReport], None]] = None,
            max_rounds: Optional[int] = None,
    ):
        self.config = config
        self.ranker = ranker
        self.feedback = feedback
        self.on_round = on_round
        self.max_rounds = max_rounds

        self.eligible: List[str] = eligible(words, config.word_length, config.prefix)
        self.candidates: List[str] = list(self.eligible)
        self.history: List[GuessRecord] = []
        self.rounds = 0
        self.state = SolverState.FILTERING

    # -- state machine --------------------------------------------------

    def _move(self, new: SolverState) -> None:
        if new not in _TRANSITIONS[self.state]:
            raise RuntimeError(f"illegal transition {self.state.value} -> {new.value}")
        self.state = new

    def _filter(self, record: GuessRecord) -> None:
        require_guess(record.word, self.config.word_length)
        self.history.append(record)
        self.candidates = narrow(self.candidates, record)

        n = len(self.candidates)
        if n == 1:
            self._move(SolverState.CONVERGED)
        elif n == 0:
            self._move(SolverState.CONTRADICTION)
        else:
            self._move(SolverState.RANKING)

    def suggest(self) -> List[Scored]:
        """Rank the guess pool against the current candidates."""
        pool = self.eligible if self.config.pool == "eligible" else self.candidates
        return self.ranker.rank(pool, self.candidates, fixed=self.config.fixed,
                                top=self.config.top, workers=self.config.workers)

    def step(self) -> SolverState:
        """Run one RANKING -> AWAITING_FEEDBACK -> FILTERING round."""
        if self.state is not SolverState.RANKING:
            raise RuntimeError(f"step() needs state ranking; got {self.state.value}")

        self.rounds += 1
        report = RoundReport(self.rounds, self.suggest(), list(self.candidates))
        if self.on_round is not None:
            self.on_round(report)
        self._move(SolverState.AWAITING_FEEDBACK)

        record = self.feedback()
        self._move(SolverState.FILTERING)
        self._filter(record)
        return self.state

    def run(self, first: GuessRecord) -> SessionResult:
        """
        Seed the candidates with the externally supplied first record, then
        loop until CONVERGED or CONTRADICTION (or max_rounds, if set).
        """
        if self.state is not SolverState.FILTERING or self.history:
            raise RuntimeError("a Session can only be run once")

        self._filter(first)
        while self.state not in TERMINAL_STATES:
            if self.max_rounds is not None and self.rounds >= self.max_rounds:
                break
            self.step()

        return SessionResult(self.state, self.rounds, list(self.history), list(self.candidates))


def run_case(
        answer: str,
        words: Sequence[str],
        *,
        config: SolverConfig,
        ranker: BaseRanker,
        first_guess: str,
        max_rounds: int = DEFAULT_MAX_ROUNDS,
) -> Dict:
    """
    Self-play one game: the first guess is fixed, later guesses are the top
    suggestion of each round, all scored against `answer`.

    Returns:
        dict with keys:
            answer (str), success (bool), guesses (int), time_ms (float),
            history (list[(guess, mask)]), state (str)
    """
    oracle = OracleFeedback(answer)
    session = Session(words, config=config, ranker=ranker, feedback=oracle,
                      on_round=oracle.observe, max_rounds=max_rounds)

    t0 = time.time()
    result = session.run(GuessRecord(first_guess, compute(answer, first_guess)))
    dt = (time.time() - t0) * 1000.0

    history = [(r.word, format_mask(r.pattern)) for r in result.history]
    success = result.answer == answer
    # Converging on the answer still costs one more guess unless it was just played
    guesses = len(history)
    if success and not is_solved(result.history[-1].pattern):
        guesses += 1
    return {
        "answer": answer,
        "success": success,
        "guesses": guesses,
        "time_ms": dt,
        "history": history,
        "state": result.state.value,
    }


def run_batch(
        answers: Iterable[str],
        words: Sequence[str],
        *,
        config: SolverConfig,
        ranker: BaseRanker,
        first_guess: str,
        max_rounds: int = DEFAULT_MAX_ROUNDS,
        sample: int | None = None,
) -> List[Dict]:
    """
    Run many cases back-to-back. If 'sample' is provided, only the first K
    answers (after filtering to the configured length and prefix) are used.
    """
    pool = eligible(answers, config.word_length, config.prefix)
    if sample is not None:
        pool = pool[:sample]

    return [
        run_case(ans, words, config=config, ranker=ranker,
                 first_guess=first_guess, max_rounds=max_rounds)
        for ans in pool
    ]
