"""
Rule parsing and resolution.
"""

import json
from typing import Any, Callable, Dict, List, Union

from autocommit_agent.schemas import Rule


def parse_rules(raw: Union[str, List[Dict[str, Any]]]) -> List[Rule]:
    """
    Parse the `rules` option.

    Args:
        raw: JSON string or an already decoded list of mappings.

    Returns:
        List of Rule objects.

    Raises:
        ValueError: if the string is not valid JSON or does not hold a list.
    """
    if isinstance(raw, str):
        try:
            raw = json.loads(raw)
        except json.JSONDecodeError as e:
            raise ValueError(f"rules is not valid JSON: {e}") from e

    if not isinstance(raw, list):
        raise ValueError("rules must be a list of objects")

    return [Rule(**entry) for entry in raw]


def resolve_rule(
    rules: List[Rule],
    repository: str,
    log: Callable[[str], None],
    debug: bool = False,
) -> Rule:
    """
    Return the first rule whose name equals `repository`.

    Falls back to an empty Rule when nothing matches; callers do not guard
    against it and the following fetch targets an incomplete URL.
    """
    found = None
    for rule in rules:
        if found is None and rule.name == repository:
            found = rule
            if debug:
                log("found")
        elif debug:
            log("skipped" if rule.name == repository else "not found")

    return found if found is not None else Rule()
