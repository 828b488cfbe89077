"""
Control flow component - Comparisons, branching and pattern matching.

Each function is one small decision: parity, quadrant, diagonal, shape
description, adult/minor status and fallback chains.
"""

from __future__ import annotations

from collections.abc import Iterable

from src.domain import Option, Present
from src.rules.models import ControlFlowRules

from .models import Circle, Person, Point, Rectangle, Shape

DEFAULT_RULES = ControlFlowRules()


def compare(a: int, b: int) -> dict[str, bool]:
    """Results of the comparison operators applied to ``a`` and ``b``."""
    return {
        "==": a == b,
        "!=": a != b,
        "<": a < b,
        "<=": a <= b,
        ">": a > b,
        ">=": a >= b,
    }


def classify_parity(n: int) -> str:
    if n % 2 == 0:
        return f"{n} is even"
    return f"{n} is odd"


def classify_quadrant(point: Point, limit: int = DEFAULT_RULES.grid_limit) -> str:
    """
    Quadrant of ``point`` on a grid of ``-limit..limit`` per axis.

    Axes belong to more than one quadrant; the first match in the order
    I, II, III, IV wins.
    """
    inside_x = -limit <= point.x <= limit
    inside_y = -limit <= point.y <= limit
    if not (inside_x and inside_y):
        return "Outside our grid"

    if point.x >= 0 and point.y >= 0:
        return "In first quadrant"
    if point.x <= 0 and point.y >= 0:
        return "In second quadrant"
    if point.x <= 0 and point.y <= 0:
        return "In third quadrant"
    return "In fourth quadrant"


def classify_axis(point: Point) -> str:
    match (point.x, point.y):
        case (0, 0):
            return "Origin"
        case (_, 0):
            return "On X-axis"
        case (0, _):
            return "On Y-axis"
        case (x, y):
            return f"Point at ({x}, {y})"


def classify_diagonal(point: Point) -> str:
    match point:
        case Point(x=x, y=y) if x == y:
            return "Point is diagonal"
        case Point(x=x, y=y) if x == -y:
            return "Point is anti-diagonal"
        case _:
            return "Point is elsewhere"


def describe_shape(shape: Shape) -> str:
    match shape:
        case Circle(radius=radius):
            return f"Circle with radius {radius}"
        case Rectangle(width=width, height=height):
            return f"Rectangle {width}x{height}"
    raise TypeError(f"Unknown shape: {shape!r}")


def age_status(age: int, adult_age: int = DEFAULT_RULES.adult_age) -> str:
    return "Adult" if age >= adult_age else "Minor"


def can_drive(age: int, has_license: bool, minimum_age: int = 16) -> bool:
    return age >= minimum_age and has_license


def coalesce(*candidates: Option[str], default: str) -> str:
    """First present candidate, else ``default``."""
    for candidate in candidates:
        if isinstance(candidate, Present):
            return candidate.value
    return default


def greeting_for(name: Option[str]) -> str:
    if not isinstance(name, Present):
        return "No name provided"
    return f"Hello, {name.value}"


def sort_people(people: Iterable[Person]) -> list[Person]:
    """Youngest first."""
    return sorted(people)
