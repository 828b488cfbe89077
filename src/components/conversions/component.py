"""
Conversions component - Type conversion, strings and arithmetic.

Includes the data analysis helper: a numeric check, a numeric parser that
reports failure as an absent value, and rounding to a number of places.

Invariants:
- Nothing here raises for malformed input; failures are ``Absent``
- Integer division and remainder truncate toward zero
"""

from __future__ import annotations

import math
import re
from collections.abc import Iterable

from src.domain import ABSENT, Option, Present, truncating_divmod

from .models import ArithmeticSummary, NumericCheck, StringFacts

# --- Numeric Text Patterns (ASCII digits, no digit-group underscores) ---
INT_PATTERN = re.compile(r"[+-]?\d+", re.ASCII)
NUMERIC_PATTERN = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?", re.ASCII)

# --- Conversions ---


def int_to_text(value: int) -> str:
    return str(value)


def parse_int(text: str) -> Option[int]:
    """Integer parse; absent when ``text`` is not a whole number."""
    candidate = text.strip()
    if not INT_PATTERN.fullmatch(candidate):
        return ABSENT
    return Present(int(candidate))


def parse_numeric(text: str) -> Option[float]:
    """Float parse; absent for empty, non-numeric or non-finite input."""
    candidate = text.strip()
    if not NUMERIC_PATTERN.fullmatch(candidate):
        return ABSENT
    value = float(candidate)
    # Overflowing exponents such as "1e999"
    if not math.isfinite(value):
        return ABSENT
    return Present(value)


def is_numeric(text: str) -> bool:
    return parse_numeric(text).is_present


def truncate_to_int(value: float) -> int:
    """Drop the fractional part (toward zero)."""
    return int(value)


def int_to_float(value: int) -> float:
    return float(value)


def round_to_places(value: float, places: int) -> float:
    """Round half away from zero to ``places`` decimal places."""
    factor = 10.0**places
    scaled = abs(value) * factor
    rounded = math.floor(scaled + 0.5) / factor
    return math.copysign(rounded, value)


# --- Strings ---


def string_facts(text: str, term: str) -> StringFacts:
    return StringFacts(
        text=text,
        length=len(text),
        upper=text.upper(),
        lower=text.lower(),
        term=term,
        contains_term=term in text,
    )


# --- Arithmetic ---


def describe_arithmetic(a: int, b: int) -> ArithmeticSummary:
    """Apply each basic operation; division by zero leaves the quotients empty."""
    quotient: Option[int] = ABSENT
    remainder: Option[int] = ABSENT
    true_quotient: Option[float] = ABSENT
    if b != 0:
        q, r = truncating_divmod(a, b)
        quotient, remainder = Present(q), Present(r)
        true_quotient = Present(a / b)

    return ArithmeticSummary(
        a=a,
        b=b,
        total=a + b,
        difference=a - b,
        product=a * b,
        quotient=quotient,
        true_quotient=true_quotient,
        remainder=remainder,
    )


# --- Analysis helper ---


def check_values(values: Iterable[str], places: int = 2) -> list[NumericCheck]:
    """Run the analysis helper over raw strings."""
    checks = []
    for raw in values:
        parsed = parse_numeric(raw)
        checks.append(
            NumericCheck(
                raw=raw,
                is_numeric=parsed.is_present,
                parsed=parsed,
                rounded=parsed.map(lambda v: round_to_places(v, places)),
            )
        )
    return checks
