"""
Gradebook component - Per-student and per-subject grade queries.
"""

from ._impl import GradeBook
from .component import AddGradeOutput, run_add, run_add_many
from .models import AddGradeInput, ClassStats, GradeEntry

__all__ = [
    # Entry points
    "run_add",
    "run_add_many",
    # Service
    "GradeBook",
    # Models
    "AddGradeInput",
    "AddGradeOutput",
    "ClassStats",
    "GradeEntry",
]
