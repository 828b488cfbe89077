"""
Gradebook component - Data models.

Invariants:
- Every stored entry has a score inside the configured range
- Entries keep insertion order
"""

from __future__ import annotations

from dataclasses import dataclass

# --- Entity ---


@dataclass(frozen=True)
class GradeEntry:
    """One recorded score."""

    name: str
    subject: str
    score: int


# --- Input Models ---


@dataclass(frozen=True)
class AddGradeInput:
    """Input for recording a score."""

    name: str
    subject: str
    score: int


# --- Output Models ---


@dataclass(frozen=True)
class ClassStats:
    """Per-subject statistics."""

    subject: str
    average: float
    highest: int
    lowest: int
    count: int
