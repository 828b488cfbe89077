"""
Grading component - Data models.

Records for the grade calculator: inputs, and the report produced for a
single score or a list of scores.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.domain.errors import ScoreError

# --- Input Models ---


@dataclass(frozen=True)
class EvaluateScoreInput:
    """Input for the grade calculator."""

    score: int


@dataclass(frozen=True)
class SummarizeScoresInput:
    """Input for summarising a list of scores."""

    scores: tuple[int, ...]


# --- Output Models ---


@dataclass(frozen=True)
class GradeReport:
    """Letter grade and advice for one score."""

    value: float
    letter: str
    advice: str


@dataclass(frozen=True)
class ScoreSummary:
    """Average of a list of scores, ready for display."""

    count: int
    average: float
    display_average: str
    letter: str


__all__ = [
    "EvaluateScoreInput",
    "GradeReport",
    "ScoreError",
    "ScoreSummary",
    "SummarizeScoresInput",
]
