"""
Grading component - Grade calculator.

Averages, letter-grade band mapping and per-grade advice.
"""

from .component import (
    advice_for,
    average,
    evaluate_score,
    format_average,
    letter_grade,
    run_evaluate,
    run_summarize,
    summarize_scores,
    validate_score,
)
from .models import (
    EvaluateScoreInput,
    GradeReport,
    ScoreError,
    ScoreSummary,
    SummarizeScoresInput,
)

__all__ = [
    # Entry points
    "run_evaluate",
    "run_summarize",
    # Pure functions
    "advice_for",
    "average",
    "evaluate_score",
    "format_average",
    "letter_grade",
    "summarize_scores",
    "validate_score",
    # Models
    "EvaluateScoreInput",
    "GradeReport",
    "ScoreError",
    "ScoreSummary",
    "SummarizeScoresInput",
]
