"""
Unit tests for the optional and result wrappers.
"""

from __future__ import annotations

import pytest

from src.domain import (
    ABSENT,
    Absent,
    Err,
    Ok,
    Present,
    compact,
    first_present,
    from_nullable,
)


class TestOption:
    def test_present_unwraps(self) -> None:
        assert Present(3).unwrap() == 3
        assert Present(3).unwrap_or(0) == 3
        assert Present(3).is_present

    def test_absent_uses_default(self) -> None:
        assert ABSENT.unwrap_or("Unknown") == "Unknown"
        assert not ABSENT.is_present

    def test_absent_unwrap_raises(self) -> None:
        with pytest.raises(ValueError):
            ABSENT.unwrap()

    def test_map_and_chain(self) -> None:
        assert Present(2).map(lambda v: v * 10) == Present(20)
        assert ABSENT.map(lambda v: v * 10) is ABSENT
        assert Present(2).and_then(lambda v: ABSENT) is ABSENT

    def test_absent_instances_are_equal(self) -> None:
        assert Absent() == ABSENT

    def test_from_nullable(self) -> None:
        assert from_nullable(None) is ABSENT
        assert from_nullable(0) == Present(0)

    def test_first_present(self) -> None:
        assert first_present(ABSENT, Present("b"), Present("c")) == Present("b")
        assert first_present(ABSENT, ABSENT) is ABSENT

    def test_compact_keeps_order(self) -> None:
        assert compact([Present(1), ABSENT, Present(3), ABSENT, Present(5)]) == [1, 3, 5]


class TestResult:
    def test_ok(self) -> None:
        result = Ok("value")
        assert result.is_ok
        assert result.unwrap_or("other") == "value"

    def test_err(self) -> None:
        result = Err("reason")
        assert not result.is_ok
        assert result.error == "reason"
        assert result.unwrap_or("other") == "other"

    def test_map_skips_errors(self) -> None:
        assert Ok(2).map(lambda v: v + 1) == Ok(3)
        assert Err("bad").map(lambda v: v + 1) == Err("bad")

    def test_and_then_short_circuits(self) -> None:
        assert Ok(2).and_then(lambda v: Err("too small")) == Err("too small")
        assert Err("first").and_then(lambda v: Ok(v)) == Err("first")
