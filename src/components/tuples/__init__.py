"""
Tuples component - Grouped return values.
"""

from .component import divide_with_remainder, find_min_max, rank_students, sort_points
from .models import Coordinate, DivisionResult, MinMax, RankedStudent, StudentGrade

__all__ = [
    "divide_with_remainder",
    "find_min_max",
    "rank_students",
    "sort_points",
    "Coordinate",
    "DivisionResult",
    "MinMax",
    "RankedStudent",
    "StudentGrade",
]
