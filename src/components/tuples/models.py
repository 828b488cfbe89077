"""
Tuples component - Named records for multi-value returns.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DivisionResult:
    quotient: int
    remainder: int


@dataclass(frozen=True)
class MinMax:
    min: int
    max: int


@dataclass(frozen=True, order=True)
class Coordinate:
    """Point compared by x, then by y."""

    x: int
    y: int

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


@dataclass(frozen=True)
class StudentGrade:
    name: str
    grade: int


@dataclass(frozen=True)
class RankedStudent:
    """Student with their 1-based position after ranking."""

    rank: int
    name: str
    grade: int
