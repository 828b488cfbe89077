"""
Control flow component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, order=True)
class Person:
    """Person ordered by age only."""

    age: int
    name: str = field(compare=False)


@dataclass(frozen=True)
class Point:
    x: int
    y: int


@dataclass(frozen=True)
class Circle:
    radius: float


@dataclass(frozen=True)
class Rectangle:
    width: float
    height: float


Shape = Circle | Rectangle
