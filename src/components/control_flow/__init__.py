"""
Control flow component - If/else, switch-style matching and comparisons.
"""

from .component import (
    age_status,
    can_drive,
    classify_axis,
    classify_diagonal,
    classify_parity,
    classify_quadrant,
    coalesce,
    compare,
    describe_shape,
    greeting_for,
    sort_people,
)
from .models import Circle, Person, Point, Rectangle, Shape

__all__ = [
    "age_status",
    "can_drive",
    "classify_axis",
    "classify_diagonal",
    "classify_parity",
    "classify_quadrant",
    "coalesce",
    "compare",
    "describe_shape",
    "greeting_for",
    "sort_people",
    "Circle",
    "Person",
    "Point",
    "Rectangle",
    "Shape",
]
