from .scoring import Correctness, Pattern, compute, pattern_code, all_patterns, is_solved
from .masks import parse_mask, format_mask
from .constraints import GuessRecord, matches, eligible, narrow, filter_candidates
from .validation import validate_guess, require_guess
from .errors import ConfigError, MaskDecodeError, ContradictionError

__all__ = [
    "Correctness", "Pattern", "compute", "pattern_code", "all_patterns", "is_solved",
    "parse_mask", "format_mask",
    "GuessRecord", "matches", "eligible", "narrow", "filter_candidates",
    "validate_guess", "require_guess",
    "ConfigError", "MaskDecodeError", "ContradictionError",
]
