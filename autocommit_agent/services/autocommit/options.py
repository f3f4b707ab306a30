"""
Agent option defaults, validation and loading.
"""

import re
from typing import Any, Dict, List

import yaml

from autocommit_agent.schemas.agent_options import boolify

REQUIRED_FIELDS = (
    "repository",
    "version",
    "commit_message",
    "committer_name",
    "committer_email",
    "token",
)

BOOLEAN_FIELDS = ("add_release_details", "debug", "emit_events")


class OptionsValidationError(ValueError):
    """Raised when options cannot activate the agent."""

    def __init__(self, errors: List[str]):
        self.errors = errors
        super().__init__("; ".join(errors))


def default_options() -> Dict[str, Any]:
    """Options a freshly created agent starts with."""
    return {
        "repository": "",
        "version": "",
        "commit_message": "",
        "committer_name": "",
        "committer_email": "",
        "emit_events": "true",
        "expected_receive_period_in_days": "2",
        "token": "",
        "rules": '[{name: "", owner: "", my_repository: "", pattern: "", file: "" }',
    }


def _present(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    if isinstance(value, (list, dict)):
        return bool(value)
    return True


def _leading_int(value: Any) -> int:
    """Integer prefix of a value, 0 when there is none ("2 days" -> 2)."""
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    match = re.match(r"\s*([+-]?\d+)", str(value))
    return int(match.group(1)) if match else 0


def validate_options(options: Dict[str, Any]) -> List[str]:
    """
    Collect every problem with `options`.

    Returns:
        List of error messages; empty when the options are valid.
    """
    errors = []

    for field in REQUIRED_FIELDS:
        if not _present(options.get(field)):
            errors.append(f"{field} is a required field")

    for field in BOOLEAN_FIELDS:
        if field in options and boolify(options[field]) is None:
            errors.append(f"if provided, {field} must be true or false")

    # An unquoted YAML `3.10` arrives as the float 3.1
    version = options.get("version")
    if version is not None and not isinstance(version, str):
        errors.append("version must be a string (quote it in YAML)")

    period = options.get("expected_receive_period_in_days")
    if not (_present(period) and _leading_int(period) > 0):
        errors.append(
            "Please provide 'expected_receive_period_in_days' to indicate how many "
            "days can pass before this Agent is considered to be not working"
        )

    return errors


def load_options(options_path: str) -> Dict[str, Any]:
    """
    Load agent options from a YAML file, layered over the defaults.

    Args:
        options_path: Path to the options YAML file.

    Returns:
        Dictionary of validated options.

    Raises:
        OptionsValidationError: if the merged options are invalid.
    """
    with open(options_path, "r", encoding="utf-8") as f:
        loaded = yaml.safe_load(f) or {}

    if not isinstance(loaded, dict):
        raise OptionsValidationError([f"{options_path} must contain a mapping"])

    options = {**default_options(), **loaded}
    errors = validate_options(options)
    if errors:
        raise OptionsValidationError(errors)
    return options


def expected_receive_period(options: Dict[str, Any]) -> int:
    """Days that may pass without an event before the agent is not working."""
    return _leading_int(options.get("expected_receive_period_in_days"))
