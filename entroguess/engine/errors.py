"""
Exception types shared by the engine, the harness and the CLIs.

Each one subclasses a built-in so callers can still catch broadly
(`except ValueError`) when they don't care about the distinction.
"""


class ConfigError(ValueError):
    """Bad run configuration: unreadable dictionary, bad length or prefix."""


class MaskDecodeError(ValueError):
    """A feedback mask (or played word) that cannot be turned into a record."""


class ContradictionError(RuntimeError):
    """The candidate set emptied: the supplied feedback is inconsistent."""
