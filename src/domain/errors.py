"""Rejection reasons shared by the components that accept scores."""

from __future__ import annotations

from enum import Enum


class ScoreError(Enum):
    """Reasons a score is rejected."""

    OUT_OF_RANGE = "out_of_range"

    def describe(self, score: int, low: int = 0, high: int = 100) -> str:
        return f"Invalid grade: {score} (must be between {low} and {high})"
