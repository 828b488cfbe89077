"""
Functions component - Plain functions, higher-order functions and closures.

Also hosts the student grade manager, whose ``add_grade`` is the one
in-place update in the bootcamp: the caller owns the ``Student`` and the
record only changes when the grade is accepted.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from src.domain import Err, Ok, Result, ScoreError
from src.rules.models import GradingRules

from .models import BinaryOperation, NameAndAge, Student

logger = logging.getLogger(__name__)


def greeting(name: str, salutation: str = "Hello") -> str:
    return f"{salutation}, {name}"


def name_and_age() -> NameAndAge:
    return NameAndAge(name="John", age=25)


def sum_all(*numbers: int) -> int:
    """Variadic sum."""
    total = 0
    for number in numbers:
        total += number
    return total


def process_number(number: int) -> int:
    """Double the number, then add five."""

    def double(value: int) -> int:
        return value * 2

    def add_five(value: int) -> int:
        return value + 5

    return add_five(double(number))


def add(a: int, b: int) -> int:
    return a + b


def multiply(a: int, b: int) -> int:
    return a * b


OPERATIONS: dict[str, BinaryOperation] = {
    "add": add,
    "multiply": multiply,
}


def calculate(a: int, b: int, operation: BinaryOperation) -> int:
    return operation(a, b)


def make_adder(amount: int) -> Callable[[int], int]:
    # Closure over ``amount``
    def add_amount(number: int) -> int:
        return number + amount

    return add_amount


# --- Student grade manager ---


def add_grade(
    student: Student, grade: int, rules: GradingRules | None = None
) -> Result[str, ScoreError]:
    """
    Append ``grade`` to ``student`` if it is in range.

    Returns a confirmation message on success. On failure the student is
    left untouched.
    """
    rules = rules or GradingRules()
    if not rules.min_score <= grade <= rules.max_score:
        logger.info("Rejected grade %s for %s", grade, student.name)
        return Err(ScoreError.OUT_OF_RANGE)

    student.grades.append(grade)
    logger.debug("Added grade %s for %s", grade, student.name)
    return Ok(f"Added grade {grade} for {student.name}")
