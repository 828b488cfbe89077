"""
Gradebook component - Entry points over a caller-owned GradeBook.

Shell Layer - wraps GradeBook calls in input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.domain import Err, ScoreError

from ._impl import GradeBook
from .models import AddGradeInput, GradeEntry


@dataclass(frozen=True)
class AddGradeOutput:
    """Output from recording a score."""

    entry: GradeEntry | None
    error: ScoreError | None
    size: int
    success: bool


def run_add(input_data: AddGradeInput, book: GradeBook) -> AddGradeOutput:
    """Record a score in ``book``."""
    result = book.add_grade(input_data.name, input_data.subject, input_data.score)

    if isinstance(result, Err):
        return AddGradeOutput(entry=None, error=result.error, size=len(book), success=False)

    return AddGradeOutput(entry=result.value, error=None, size=len(book), success=True)


def run_add_many(inputs: list[AddGradeInput], book: GradeBook) -> list[AddGradeOutput]:
    """Record several scores in order; each is accepted or rejected on its own."""
    return [run_add(item, book) for item in inputs]
