"""Shared value wrappers used by every exercise component."""

from .arithmetic import truncating_divmod
from .errors import ScoreError
from .option import ABSENT, Absent, Option, Present, compact, first_present, from_nullable
from .result import Err, Ok, Result

__all__ = [
    "ABSENT",
    "Absent",
    "Option",
    "Present",
    "compact",
    "first_present",
    "from_nullable",
    "Err",
    "Ok",
    "Result",
    "ScoreError",
    "truncating_divmod",
]
