"""
Rules loading tests.

Verifies the YAML loader, the built-in defaults and band validation.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from src.rules.loader import load_rules, load_rules_or_default, parse_rules
from src.rules.models import GradingRules, Rules


class TestDefaults:
    def test_defaults_are_valid(self, rules: Rules) -> None:
        assert rules.grading.min_score == 0
        assert rules.grading.max_score == 100
        assert rules.profiles.min_age == 13
        assert rules.profiles.default_city == "Unknown"
        assert rules.control_flow.adult_age == 18

    def test_bands_sorted_highest_first(self, rules: Rules) -> None:
        assert [b.letter for b in rules.grading.bands] == ["A", "B", "C", "D"]

    def test_project_rules_match_defaults(self, project_rules: Rules, rules: Rules) -> None:
        """The shipped rules.yaml restates the defaults."""
        assert project_rules.model_dump() == rules.model_dump()


class TestParseRules:
    def test_empty_document_uses_defaults(self) -> None:
        assert parse_rules("") == Rules()

    def test_partial_document_keeps_other_defaults(self) -> None:
        rules = parse_rules("profiles:\n  min_age: 16\n")

        assert rules.profiles.min_age == 16
        assert rules.profiles.email_required_char == "@"
        assert rules.grading == GradingRules()

    def test_fenced_yaml_block(self) -> None:
        content = "# Rules\n\n```yaml\ncontrol_flow:\n  adult_age: 21\n```\n\nTrailing notes.\n"

        rules = parse_rules(content)

        assert rules.control_flow.adult_age == 21

    def test_bands_given_out_of_order_are_sorted(self) -> None:
        content = """
grading:
  bands:
    - {letter: Pass, min: 50, max: 85}
    - {letter: Honours, min: 85, max: 100}
"""
        rules = parse_rules(content)

        assert [b.letter for b in rules.grading.bands] == ["Honours", "Pass"]

    def test_invalid_yaml_raises(self) -> None:
        with pytest.raises(ValueError, match="Invalid YAML"):
            parse_rules("grading: [unclosed")

    def test_schema_violation_raises(self) -> None:
        with pytest.raises(ValueError, match="Rules validation failed"):
            parse_rules("control_flow:\n  grid_limit: 0\n")

    def test_overlapping_bands_rejected(self) -> None:
        content = """
grading:
  bands:
    - {letter: A, min: 85, max: 100}
    - {letter: B, min: 80, max: 90}
"""
        with pytest.raises(ValueError, match="overlap"):
            parse_rules(content)

    def test_empty_band_rejected(self) -> None:
        content = """
grading:
  bands:
    - {letter: A, min: 90, max: 90}
"""
        with pytest.raises(ValueError, match="empty"):
            parse_rules(content)

    def test_min_above_max_rejected(self) -> None:
        with pytest.raises(ValueError):
            parse_rules("grading:\n  min_score: 10\n  max_score: 5\n")


class TestLoadRules:
    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_rules(tmp_path / "missing.yaml")

    def test_load_from_file(self, tmp_path: Path) -> None:
        path = tmp_path / "rules.yaml"
        path.write_text("profiles:\n  default_city: Nowhere\n")

        rules = load_rules(path)

        assert rules.profiles.default_city == "Nowhere"

    def test_missing_file_falls_back_to_defaults(self, tmp_path: Path) -> None:
        assert load_rules_or_default(tmp_path / "missing.yaml") == Rules()
