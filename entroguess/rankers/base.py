from __future__ import annotations

import multiprocessing as mp
from typing import Dict, Iterator, List, NamedTuple, Sequence, Type

# ---- Global ranker registry ----
REGISTRY: Dict[str, Type["BaseRanker"]] = {}

# Per-process state for pool workers (set by the initializer)
_WORKER_STATE: Dict[str, object] = {}

# Guesses handed to a worker per task
CHUNK_SIZE = 64


class Scored(NamedTuple):
    word: str
    entropy: float


def register(cls: Type["BaseRanker"]) -> Type["BaseRanker"]:
    """
    Decorator: @register on a ranker class adds it to REGISTRY by its `id`.
    """
    rid = getattr(cls, "id", None)
    if not rid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if rid in REGISTRY:
        raise ValueError(f"Duplicate ranker id: {rid}")
    REGISTRY[rid] = cls
    return cls


def _init_worker(ranker_id: str, candidates: List[str], fixed: int) -> None:
    _WORKER_STATE["ranker"] = REGISTRY[ranker_id]()
    _WORKER_STATE["candidates"] = candidates
    _WORKER_STATE["fixed"] = fixed


def _score_chunk(chunk: List[str]) -> List[float]:
    ranker = _WORKER_STATE["ranker"]
    candidates = _WORKER_STATE["candidates"]
    fixed = _WORKER_STATE["fixed"]
    return [ranker.score(g, candidates, fixed) for g in chunk]


# ---- Base class that rankers inherit ----
class BaseRanker:
    id = "base"
    name = "Base"
    version = "0.0.0"

    def score(self, guess: str, candidates: Sequence[str], fixed: int = 0) -> float:
        """Entropy in bits of the partition `guess` induces on `candidates`."""
        raise NotImplementedError("Override in subclass")

    def iter_scores(self, pool: Sequence[str], candidates: Sequence[str], *,
                    fixed: int = 0, workers: int = 1) -> Iterator[float]:
        """
        Yield the score of every guess in `pool`, in pool order.

        With workers > 1 the pool is split into chunks scored by separate
        processes. Each guess is independent, so the output is the same as
        the serial one.
        """
        pool = list(pool)
        if workers <= 1 or len(pool) <= CHUNK_SIZE:
            for g in pool:
                yield self.score(g, candidates, fixed)
            return

        chunks = [pool[i:i + CHUNK_SIZE] for i in range(0, len(pool), CHUNK_SIZE)]
        start_method = "fork" if "fork" in mp.get_all_start_methods() else "spawn"
        ctx = mp.get_context(start_method)
        with ctx.Pool(processes=workers, initializer=_init_worker,
                      initargs=(self.id, list(candidates), fixed)) as workers_pool:
            # imap keeps chunk order, so slots line up with `pool`
            for scores in workers_pool.imap(_score_chunk, chunks):
                yield from scores

    def score_all(self, pool: Sequence[str], candidates: Sequence[str], *,
                  fixed: int = 0, workers: int = 1) -> List[float]:
        """Score every guess in `pool`; result[i] belongs to pool[i]."""
        return list(self.iter_scores(pool, candidates, fixed=fixed, workers=workers))

    def rank(self, pool: Sequence[str], candidates: Sequence[str], *, fixed: int = 0,
             top: int | None = None, workers: int = 1) -> List[Scored]:
        """
        Score `pool` against `candidates` and sort by descending entropy.

        Ties keep their order in `pool`. `top` truncates the result.
        """
        scores = self.score_all(pool, candidates, fixed=fixed, workers=workers)
        ranked = sorted((Scored(w, h) for w, h in zip(pool, scores)),
                        key=lambda s: s.entropy, reverse=True)
        return ranked if top is None else ranked[:top]
