"""
Functions component - Data models.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

BinaryOperation = Callable[[int, int], int]


@dataclass
class Student:
    """
    Student with a running list of grades.

    The caller owns the record; ``add_grade`` mutates it in place and only
    when the grade is accepted.
    """

    name: str
    grades: list[int] = field(default_factory=list)


@dataclass(frozen=True)
class NameAndAge:
    """Two values returned together."""

    name: str
    age: int
