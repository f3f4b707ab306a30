"""
Schema and DTO package.
"""

from autocommit_agent.schemas.agent_options import AgentOptions
from autocommit_agent.schemas.commit_request import CommitRequest
from autocommit_agent.schemas.remote_file import RemoteFile
from autocommit_agent.schemas.rule import Rule

__all__ = [
    "AgentOptions",
    "CommitRequest",
    "RemoteFile",
    "Rule",
]
