from pathlib import Path

import pytest

from src.rules.loader import load_rules
from src.rules.models import Rules

PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture
def rules() -> Rules:
    """Built-in default rules."""
    return Rules()


@pytest.fixture
def project_rules() -> Rules:
    """Rules loaded from the rules.yaml shipped at the project root."""
    return load_rules(PROJECT_ROOT / "rules.yaml")
