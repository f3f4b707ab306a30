"""
Agent options DTO.

Options arrive as a loose mapping (strings from a form or a YAML file, with
event fields already interpolated). This model is the typed view the agent
works with during one run.
"""

from typing import Any, Dict, List, Optional, Union

from pydantic import field_validator
from sqlmodel import SQLModel, Field


def boolify(value: Any) -> Optional[bool]:
    """
    Interpret a boolean option.

    Returns True for `True`/"true", False for `False`/"false", None otherwise.
    """
    if value is True or value == "true":
        return True
    if value is False or value == "false":
        return False
    return None


class AgentOptions(SQLModel):
    """
    Typed options for a single run.

    Attributes:
        repository: Logical repository name, matched against `Rule.name`.
        version: Target version written into the version line.
        rules: JSON string or decoded list of rule mappings.
        emit_events: Boolean or "true"/"false".
        debug: Boolean or "true"/"false".
    """

    repository: str = ""
    version: str = ""
    commit_message: str = ""
    committer_name: str = ""
    committer_email: str = ""
    token: str = ""
    rules: Union[str, List[Dict[str, Any]]] = "[]"
    emit_events: Any = "true"
    debug: Any = "false"
    expected_receive_period_in_days: Any = "2"
    add_release_details: Optional[Any] = Field(default=None)

    @field_validator(
        "repository",
        "version",
        "commit_message",
        "committer_name",
        "committer_email",
        "token",
        mode="before",
    )
    @classmethod
    def _stringify(cls, value: Any) -> Any:
        # YAML turns `version: 3.0` into a float
        if value is None:
            return ""
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @property
    def emit_events_enabled(self) -> bool:
        return boolify(self.emit_events) is True

    @property
    def debug_enabled(self) -> bool:
        return boolify(self.debug) is True
