from __future__ import annotations
from typing import List
from .base import BaseRanker, Scored, REGISTRY, register

from . import entropy  # noqa: F401
from . import enumerative  # noqa: F401

DEFAULT_RANKER = "entropy"


def create_ranker(ranker_id: str = DEFAULT_RANKER) -> BaseRanker:
    """
    Factory: instantiate a registered ranker by id.
    """
    try:
        cls = REGISTRY[ranker_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown ranker id: {ranker_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls()


def get_ranker_ids() -> List[str]:
    """
    Return all registered ranker ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())
