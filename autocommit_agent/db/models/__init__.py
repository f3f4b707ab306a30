"""
Database models package.
"""

from autocommit_agent.db.models.agent_event import AgentEvent
from autocommit_agent.db.models.agent_log import AgentLog, LogLevel

__all__ = [
    "AgentEvent",
    "AgentLog",
    "LogLevel",
]
