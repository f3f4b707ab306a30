"""
GitHub autocommit agent package.
"""

from autocommit_agent.services.autocommit.agent import GithubAutocommitAgent
from autocommit_agent.services.autocommit.context import Ctx, RunRecorder
from autocommit_agent.services.autocommit.runner import AgentRunner
from autocommit_agent.services.autocommit.store import AgentStore

__all__ = [
    "AgentRunner",
    "AgentStore",
    "Ctx",
    "GithubAutocommitAgent",
    "RunRecorder",
]
