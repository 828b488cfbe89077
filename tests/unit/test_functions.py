"""
Unit tests for the functions component and the student grade manager.
"""

from __future__ import annotations

import pytest

from src.components.functions import (
    OPERATIONS,
    Student,
    add,
    add_grade,
    calculate,
    greeting,
    make_adder,
    multiply,
    name_and_age,
    process_number,
    sum_all,
)
from src.domain import Err, Ok, ScoreError
from src.rules.models import GradingRules


def test_greeting():
    assert greeting("Vamsi") == "Hello, Vamsi"
    assert greeting("Raghu", salutation="Hi") == "Hi, Raghu"


def test_name_and_age():
    pair = name_and_age()

    assert (pair.name, pair.age) == ("John", 25)


def test_sum_all():
    assert sum_all(1, 2, 3) == 6
    assert sum_all() == 0


def test_process_number():
    assert process_number(11) == 27
    assert process_number(0) == 5


def test_calculate_with_operations():
    assert calculate(2, 3, add) == 5
    assert calculate(2, 3, multiply) == 6
    assert calculate(2, 3, OPERATIONS["multiply"]) == 6
    assert calculate(7, 2, lambda a, b: a - b) == 5


def test_make_adder_captures_amount():
    add_five = make_adder(5)
    add_ten = make_adder(10)

    assert add_five(10) == 15
    assert add_ten(10) == 20


# --- Student grade manager ---


def test_add_grade_mutates_student():
    student = Student(name="Alice")

    result = add_grade(student, 95)

    assert result == Ok("Added grade 95 for Alice")
    assert student.grades == [95]


@pytest.mark.parametrize("grade", [-1, 101])
def test_add_grade_rejects_and_leaves_student(grade):
    student = Student(name="Bob", grades=[78])

    result = add_grade(student, grade)

    assert result == Err(ScoreError.OUT_OF_RANGE)
    assert student.grades == [78]


@pytest.mark.parametrize("grade", [0, 100])
def test_add_grade_accepts_bounds(grade):
    student = Student(name="Bob")

    assert isinstance(add_grade(student, grade), Ok)
    assert len(student.grades) == 1


def test_add_grade_custom_rules():
    student = Student(name="Bob")

    rules = GradingRules(min_score=0, max_score=10, bands=[])

    assert isinstance(add_grade(student, 11, rules), Err)
    assert student.grades == []


def test_students_do_not_share_grades():
    first = Student(name="A")
    second = Student(name="B")

    add_grade(first, 90)

    assert second.grades == []
