"""
Unit tests for the shared integer arithmetic helpers.
"""

from __future__ import annotations

import pytest

from src.domain import truncating_divmod


@pytest.mark.parametrize(
    ("a", "b", "expected"),
    [
        (17, 5, (3, 2)),
        (-17, 5, (-3, -2)),
        (17, -5, (-3, 2)),
        (-17, -5, (3, -2)),
        (4, 2, (2, 0)),
        (0, 3, (0, 0)),
    ],
)
def test_truncating_divmod(a, b, expected):
    assert truncating_divmod(a, b) == expected


def test_truncating_divmod_recombines():
    quotient, remainder = truncating_divmod(-7, 2)

    assert quotient * 2 + remainder == -7
