"""
Conversions component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.domain import Option


@dataclass(frozen=True)
class ArithmeticSummary:
    """Every basic operation applied to one pair of integers."""

    a: int
    b: int
    total: int
    difference: int
    product: int
    quotient: Option[int]
    true_quotient: Option[float]
    remainder: Option[int]


@dataclass(frozen=True)
class StringFacts:
    """Facts about a piece of text and a search term."""

    text: str
    length: int
    upper: str
    lower: str
    term: str
    contains_term: bool


@dataclass(frozen=True)
class NumericCheck:
    """Outcome of checking one raw value with the analysis helper."""

    raw: str
    is_numeric: bool
    parsed: Option[float]
    rounded: Option[float]
