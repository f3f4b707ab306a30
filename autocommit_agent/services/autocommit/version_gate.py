"""
Version gate: decide whether the version line of a file must be rewritten.

Versions are compared as plain strings, so "9" is considered newer than "10".
"""

import re
from typing import Optional

from autocommit_agent.schemas import RemoteFile

NO_REPLACEMENT_MESSAGE = (
    "The current version is already greater than or equal to the given version. "
    "No replacement necessary."
)

# Keeps arbitrary bytes intact through decode/encode.
_ENCODING = "utf-8"
_ERRORS = "surrogateescape"


def current_version(text: str, pattern: str) -> Optional[str]:
    """Return the value of the first `ENV {pattern} ...` line, or None."""
    match = re.search(rf"^ENV {pattern} (.*)", text, flags=re.MULTILINE)
    return match.group(1) if match else None


def needs_update(current: Optional[str], target: str) -> bool:
    """A file without a version line is always rewritten."""
    return current is None or not current >= target


def rewrite(text: str, pattern: str, target: str) -> str:
    """Replace every `ENV {pattern}...` line with `ENV {pattern} {target}`."""
    replacement = f"ENV {pattern} {target}"
    return re.sub(
        rf"^ENV {pattern}.*",
        lambda _match: replacement,
        text,
        flags=re.MULTILINE,
    )


def plan_update(remote_file: RemoteFile, pattern: str, target: str) -> Optional[bytes]:
    """
    Compute the new file content.

    Returns:
        None when the file is already at or above `target`, otherwise the
        rewritten content.
    """
    text = remote_file.content.decode(_ENCODING, _ERRORS)

    if not needs_update(current_version(text, pattern), target):
        return None

    return rewrite(text, pattern, target).encode(_ENCODING, _ERRORS)
