"""
Grading component - Averages, letter grades and the grade calculator.

Invariants:
- Average of an empty sequence is 0.0
- Bands are closed at the lower bound and open at the upper bound,
  except the top band which is closed on both ends
- Scores outside [min_score, max_score] are rejected, never clamped
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from src.domain import Err, Ok, Result
from src.rules.models import GradingRules

from .models import (
    EvaluateScoreInput,
    GradeReport,
    ScoreError,
    ScoreSummary,
    SummarizeScoresInput,
)

logger = logging.getLogger(__name__)

DEFAULT_RULES = GradingRules()


# --- Pure Functions (Functional Core) ---


def validate_score(score: int, rules: GradingRules = DEFAULT_RULES) -> Result[int, ScoreError]:
    """Accept a score inside the configured range."""
    if rules.min_score <= score <= rules.max_score:
        return Ok(score)
    return Err(ScoreError.OUT_OF_RANGE)


def average(scores: Sequence[float]) -> float:
    """Arithmetic mean; 0.0 for no scores."""
    if not scores:
        return 0.0
    return sum(scores) / len(scores)


def letter_grade(value: float, rules: GradingRules = DEFAULT_RULES) -> str:
    """Map a score or average to its letter band."""
    for index, band in enumerate(rules.bands):
        if band.min <= value < band.max:
            return band.letter
        if index == 0 and value == band.max:
            return band.letter
    return rules.fallback_letter


def format_average(value: float, places: int = 1) -> str:
    """Render an average with a fixed number of decimal places."""
    return f"{value:.{places}f}"


def advice_for(letter: str, rules: GradingRules = DEFAULT_RULES) -> str:
    return rules.advice.get(letter, "")


def evaluate_score(
    score: int, rules: GradingRules = DEFAULT_RULES
) -> Result[GradeReport, ScoreError]:
    """
    Grade calculator.

    Valid scores yield their letter grade and advice; invalid scores are
    reported as a failure.
    """
    checked = validate_score(score, rules)
    if isinstance(checked, Err):
        logger.info("Rejected score %s", score)
        return checked

    letter = letter_grade(score, rules)
    return Ok(GradeReport(value=float(score), letter=letter, advice=advice_for(letter, rules)))


def summarize_scores(
    scores: Sequence[int], rules: GradingRules = DEFAULT_RULES
) -> ScoreSummary:
    mean = average(scores)
    return ScoreSummary(
        count=len(scores),
        average=mean,
        display_average=format_average(mean, rules.display_places),
        letter=letter_grade(mean, rules),
    )


# --- Shell Layer Functions ---


def run_evaluate(
    input_data: EvaluateScoreInput, rules: GradingRules = DEFAULT_RULES
) -> Result[GradeReport, ScoreError]:
    """Evaluate a single score."""
    return evaluate_score(input_data.score, rules)


def run_summarize(
    input_data: SummarizeScoresInput, rules: GradingRules = DEFAULT_RULES
) -> ScoreSummary:
    """Summarise a list of scores."""
    return summarize_scores(input_data.scores, rules)
