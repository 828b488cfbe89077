"""
Unit tests for GradeBook.

Insertion is validated; queries never change the stored entries.
"""

from __future__ import annotations

import pytest

from src.components.gradebook import (
    AddGradeInput,
    ClassStats,
    GradeBook,
    GradeEntry,
    run_add,
    run_add_many,
)
from src.domain import ABSENT, Err, Ok, Present, ScoreError
from src.rules.models import GradingRules


@pytest.fixture
def book() -> GradeBook:
    """Empty grade book with default rules."""
    return GradeBook()


@pytest.fixture
def filled(book: GradeBook) -> GradeBook:
    """Grade book with a few entries."""
    book.add_grade("Alice", "Math", 95)
    book.add_grade("Alice", "Science", 88)
    book.add_grade("Bob", "Math", 72)
    book.add_grade("Charlie", "Math", 84)
    return book


# --- Insertion ---


@pytest.mark.parametrize("score", [0, 1, 59, 60, 99, 100])
def test_add_valid_score_grows_by_one(book: GradeBook, score: int):
    before = len(book)

    result = book.add_grade("Alice", "Math", score)

    assert result == Ok(GradeEntry("Alice", "Math", score))
    assert len(book) == before + 1


@pytest.mark.parametrize("score", [-1, -100, 101, 150])
def test_add_invalid_score_leaves_book_unchanged(filled: GradeBook, score: int):
    before = filled.entries

    result = filled.add_grade("Alice", "Math", score)

    assert result == Err(ScoreError.OUT_OF_RANGE)
    assert filled.entries == before


def test_entries_keep_insertion_order(filled: GradeBook):
    assert [e.name for e in filled.entries] == ["Alice", "Alice", "Bob", "Charlie"]


def test_entries_view_is_a_copy(filled: GradeBook):
    view = filled.entries

    filled.add_grade("Diana", "Art", 70)

    assert len(view) == 4
    assert len(filled.entries) == 5


def test_custom_range():
    book = GradeBook(GradingRules(min_score=1, max_score=10, bands=[]))

    assert isinstance(book.add_grade("Alice", "Quiz", 10), Ok)
    assert isinstance(book.add_grade("Alice", "Quiz", 0), Err)
    assert len(book) == 1


# --- Queries ---


def test_average_for_student(filled: GradeBook):
    assert filled.average_for("Alice") == Present(91.5)


def test_average_for_unknown_student_is_absent(filled: GradeBook):
    assert filled.average_for("Diana") is ABSENT


def test_grade_for_subject(filled: GradeBook):
    assert filled.grade_for("Alice", "Science") == Present(88)
    assert filled.grade_for("Bob", "Science") is ABSENT


def test_grade_for_returns_first_match(book: GradeBook):
    book.add_grade("Alice", "Math", 70)
    book.add_grade("Alice", "Math", 90)

    assert book.grade_for("Alice", "Math") == Present(70)


def test_class_stats(filled: GradeBook):
    stats = filled.class_stats("Math")

    assert isinstance(stats, Present)
    assert stats.value == ClassStats(
        subject="Math",
        average=pytest.approx(83.6667, rel=1e-4),
        highest=95,
        lowest=72,
        count=3,
    )


def test_class_stats_single_entry(filled: GradeBook):
    stats = filled.class_stats("Science").unwrap()

    assert stats.average == 88
    assert stats.highest == stats.lowest == 88


def test_class_stats_unknown_subject(filled: GradeBook):
    assert filled.class_stats("History") is ABSENT


def test_queries_do_not_mutate(filled: GradeBook):
    before = filled.entries

    filled.average_for("Alice")
    filled.grade_for("Bob", "Math")
    filled.class_stats("Math")

    assert filled.entries == before


def test_students_and_subjects(filled: GradeBook):
    assert filled.students() == ["Alice", "Bob", "Charlie"]
    assert filled.subjects() == ["Math", "Science"]


# --- Entry points ---


def test_run_add_success(book: GradeBook):
    out = run_add(AddGradeInput("Alice", "Math", 95), book)

    assert out.success
    assert out.entry == GradeEntry("Alice", "Math", 95)
    assert out.error is None
    assert out.size == 1


def test_run_add_failure(book: GradeBook):
    out = run_add(AddGradeInput("Alice", "Math", 101), book)

    assert not out.success
    assert out.entry is None
    assert out.error == ScoreError.OUT_OF_RANGE
    assert out.size == 0


def test_run_add_many_handles_each_item(book: GradeBook):
    outs = run_add_many(
        [
            AddGradeInput("Alice", "Math", 95),
            AddGradeInput("Bob", "Math", 150),
            AddGradeInput("Charlie", "Math", 84),
        ],
        book,
    )

    assert [o.success for o in outs] == [True, False, True]
    assert len(book) == 2
