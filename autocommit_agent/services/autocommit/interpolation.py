"""
Option interpolation against inbound event payloads.

String options are templates (`{{ field }}`); each inbound event renders them
with its own payload before the run.
"""

from typing import Any, Dict, Optional

from jinja2 import ChainableUndefined
from jinja2.sandbox import SandboxedEnvironment

# Missing fields, nested ones included, render as empty strings.
_env = SandboxedEnvironment(
    autoescape=False, keep_trailing_newline=True, undefined=ChainableUndefined
)


def interpolate_string(template: str, payload: Dict[str, Any]) -> str:
    if "{{" not in template and "{%" not in template:
        return template
    return _env.from_string(template).render(payload)


def interpolate_value(value: Any, payload: Dict[str, Any]) -> Any:
    if isinstance(value, str):
        return interpolate_string(value, payload)
    if isinstance(value, list):
        return [interpolate_value(item, payload) for item in value]
    if isinstance(value, dict):
        return {key: interpolate_value(item, payload) for key, item in value.items()}
    return value


def interpolate_options(
    options: Dict[str, Any], payload: Optional[Dict[str, Any]] = None
) -> Dict[str, Any]:
    """
    Render every string option with the event payload.

    Undefined variables render as empty strings. Non-string values pass
    through unchanged.
    """
    payload = payload or {}
    return {key: interpolate_value(value, payload) for key, value in options.items()}
