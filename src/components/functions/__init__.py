"""
Functions component - Functions, closures and the student grade manager.
"""

from .component import (
    OPERATIONS,
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
from .models import BinaryOperation, NameAndAge, Student

__all__ = [
    "OPERATIONS",
    "add",
    "add_grade",
    "calculate",
    "greeting",
    "make_adder",
    "multiply",
    "name_and_age",
    "process_number",
    "sum_all",
    "BinaryOperation",
    "NameAndAge",
    "Student",
]
