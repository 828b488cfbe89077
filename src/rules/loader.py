import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from src.rules.models import Rules

logger = logging.getLogger(__name__)

DEFAULT_RULES_PATH = Path("rules.yaml")


def parse_rules(content: str) -> Rules:
    """
    Parse rules from YAML text.
    Accepts either a bare YAML document or one wrapped in a ```yaml fence.
    Raises ValueError on bad syntax or schema violations.
    """
    lines = content.splitlines()
    yaml_lines = []
    in_block = False
    found_block = False

    for line in lines:
        s_line = line.strip()
        if s_line.startswith("```yaml"):
            in_block = True
            found_block = True
            continue
        if in_block and s_line.startswith("```"):
            break

        if in_block:
            yaml_lines.append(line)

    clean_content = "\n".join(yaml_lines) if found_block else content

    try:
        data = yaml.safe_load(clean_content)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in rules file: {e}") from e

    # An empty document means "use every default"
    if data is None:
        data = {}

    try:
        return Rules.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Rules validation failed:\n{e}") from e


def load_rules(path: Path) -> Rules:
    """
    Load and validate the rules file.
    Raises FileNotFoundError if file missing.
    Raises ValueError if syntax or schema invalid.
    """
    if not path.exists():
        raise FileNotFoundError(f"Rules file not found at: {path}")

    rules = parse_rules(path.read_text())
    logger.debug("Loaded rules from %s", path)
    return rules


def load_rules_or_default(path: Path | None = None) -> Rules:
    """Load rules from ``path`` (default ``rules.yaml``), falling back to built-in defaults."""
    target = path or DEFAULT_RULES_PATH
    if not target.exists():
        logger.info("No rules file at %s, using built-in defaults", target)
        return Rules()
    return load_rules(target)
