"""
Tuples component - Functions that return several values at once.

Every multi-value return is a small frozen dataclass rather than a
positional tuple. Functions that cannot produce a value return ``Absent``.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from src.domain import ABSENT, Option, Present, truncating_divmod

from .models import Coordinate, DivisionResult, MinMax, RankedStudent, StudentGrade


def divide_with_remainder(a: int, b: int) -> Option[DivisionResult]:
    """Quotient and remainder truncated toward zero; absent when ``b`` is zero."""
    if b == 0:
        return ABSENT
    quotient, remainder = truncating_divmod(a, b)
    return Present(DivisionResult(quotient=quotient, remainder=remainder))


def find_min_max(numbers: Sequence[int]) -> Option[MinMax]:
    if not numbers:
        return ABSENT
    return Present(MinMax(min=min(numbers), max=max(numbers)))


def rank_students(students: Iterable[StudentGrade]) -> list[RankedStudent]:
    """Highest grade first; equal grades ordered by name."""
    ordered = sorted(students, key=lambda s: (-s.grade, s.name))
    return [
        RankedStudent(rank=position, name=s.name, grade=s.grade)
        for position, s in enumerate(ordered, start=1)
    ]


def sort_points(points: Iterable[Coordinate]) -> list[Coordinate]:
    """Lexicographic order: by x, then by y."""
    return sorted(points)
