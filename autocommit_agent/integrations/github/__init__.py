"""
GitHub integration package.
"""

from autocommit_agent.integrations.github.client import (
    GitHubContentsClient,
    GitHubContentsError,
    decode_remote_file,
)

__all__ = [
    "GitHubContentsClient",
    "GitHubContentsError",
    "decode_remote_file",
]
