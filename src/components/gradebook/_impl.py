"""
GradeBook - Insertion-ordered store of grade entries.

The grade book is the only owner of its entries. Queries are read-only
projections and never change the stored sequence.
"""

from __future__ import annotations

import logging

from src.domain import ABSENT, Err, Ok, Option, Present, Result, ScoreError
from src.rules.models import GradingRules

from .models import ClassStats, GradeEntry

logger = logging.getLogger(__name__)


class GradeBook:
    """
    Grade book.

    Scores are validated on insertion; rejected scores are never stored.
    """

    def __init__(self, rules: GradingRules | None = None) -> None:
        self._rules = rules or GradingRules()
        self._entries: list[GradeEntry] = []

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def entries(self) -> tuple[GradeEntry, ...]:
        """Read-only view in insertion order."""
        return tuple(self._entries)

    def add_grade(self, name: str, subject: str, score: int) -> Result[GradeEntry, ScoreError]:
        """Record a score, or reject it and leave the book unchanged."""
        if not self._rules.min_score <= score <= self._rules.max_score:
            logger.info("Rejected score %s for %s in %s", score, name, subject)
            return Err(ScoreError.OUT_OF_RANGE)

        entry = GradeEntry(name=name, subject=subject, score=score)
        self._entries.append(entry)
        logger.debug("Recorded %s", entry)
        return Ok(entry)

    def average_for(self, student: str) -> Option[float]:
        """Average score for a student; absent if the student has no grades."""
        scores = [e.score for e in self._entries if e.name == student]
        if not scores:
            return ABSENT
        return Present(sum(scores) / len(scores))

    def grade_for(self, student: str, subject: str) -> Option[int]:
        """First recorded score for the student in the subject."""
        for entry in self._entries:
            if entry.name == student and entry.subject == subject:
                return Present(entry.score)
        return ABSENT

    def class_stats(self, subject: str) -> Option[ClassStats]:
        """Average, highest and lowest score for a subject."""
        scores = [e.score for e in self._entries if e.subject == subject]
        if not scores:
            return ABSENT

        return Present(
            ClassStats(
                subject=subject,
                average=sum(scores) / len(scores),
                highest=max(scores),
                lowest=min(scores),
                count=len(scores),
            )
        )

    def subjects(self) -> list[str]:
        """Distinct subjects in first-seen order."""
        return list(dict.fromkeys(e.subject for e in self._entries))

    def students(self) -> list[str]:
        """Distinct students in first-seen order."""
        return list(dict.fromkeys(e.name for e in self._entries))
