from .core import (
    Session, SessionResult, SolverState, RoundReport,
    ScriptedFeedback, OracleFeedback, run_case, run_batch,
)
from .report import entropy_report, iter_entropy_report, format_report_lines, matching_words
from .io import write_report, write_csv, write_manifest

__all__ = [
    "Session", "SessionResult", "SolverState", "RoundReport",
    "ScriptedFeedback", "OracleFeedback", "run_case", "run_batch",
    "entropy_report", "iter_entropy_report", "format_report_lines", "matching_words",
    "write_report", "write_csv", "write_manifest",
]
