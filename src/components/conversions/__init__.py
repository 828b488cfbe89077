"""
Conversions component - Basic types, strings and the data analysis helper.
"""

from .component import (
    check_values,
    describe_arithmetic,
    int_to_float,
    int_to_text,
    is_numeric,
    parse_int,
    parse_numeric,
    round_to_places,
    string_facts,
    truncate_to_int,
)
from .models import ArithmeticSummary, NumericCheck, StringFacts

__all__ = [
    "check_values",
    "describe_arithmetic",
    "int_to_float",
    "int_to_text",
    "is_numeric",
    "parse_int",
    "parse_numeric",
    "round_to_places",
    "string_facts",
    "truncate_to_int",
    "ArithmeticSummary",
    "NumericCheck",
    "StringFacts",
]
