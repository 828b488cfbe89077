"""Integer arithmetic shared by the exercise components."""

from __future__ import annotations


def truncating_divmod(a: int, b: int) -> tuple[int, int]:
    """Quotient and remainder with the quotient truncated toward zero."""
    quotient = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        quotient = -quotient
    return quotient, a - quotient * b
