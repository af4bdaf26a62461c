"""
Run configuration shared by the solver loop, the report and the CLIs.

The CLIs build a SolverConfig from argparse values; everything downstream
takes the config object instead of loose keyword arguments.
"""

from __future__ import annotations

from dataclasses import dataclass

from entroguess.engine.errors import ConfigError

DEFAULT_WORD_LENGTH = 5
DEFAULT_TOP = 10

# Which words are ranked each round: every eligible word, or only the
# words that are still possible answers.
POOL_CHOICES = ("eligible", "candidates")


@dataclass(frozen=True)
class SolverConfig:
    word_length: int = DEFAULT_WORD_LENGTH
    prefix: str = ""          # known leading letter(s); "" = unconstrained
    top: int | None = DEFAULT_TOP
    pool: str = "eligible"
    workers: int = 1

    def __post_init__(self):
        if not isinstance(self.word_length, int) or self.word_length < 1:
            raise ConfigError(f"word length must be a positive integer; got {self.word_length!r}")
        if len(self.prefix) > self.word_length:
            raise ConfigError(
                f"prefix {self.prefix!r} is longer than the word length {self.word_length}")
        if not all(ch.isalpha() for ch in self.prefix):
            raise ConfigError(f"prefix must be letters only; got {self.prefix!r}")
        if self.top is not None and self.top < 1:
            raise ConfigError(f"top must be >= 1; got {self.top}")
        if self.pool not in POOL_CHOICES:
            raise ConfigError(f"pool must be one of {POOL_CHOICES}; got {self.pool!r}")
        if self.workers < 1:
            raise ConfigError(f"workers must be >= 1; got {self.workers}")

    @property
    def fixed(self) -> int:
        """Number of leading pattern positions known to be CORRECT."""
        return len(self.prefix)
