"""
Agent Log Model and Levels

Stores the log lines an agent run produced, so the host can tell whether
the agent is working.
"""

from datetime import datetime, timezone
from enum import IntEnum
from typing import Optional

from sqlmodel import SQLModel, Field
from sqlalchemy import Column, DateTime


class LogLevel(IntEnum):
    """Agent log levels."""

    INFO = 3
    ERROR = 4


class AgentLog(SQLModel, table=True):
    """
    Agent Log table.
    """

    __tablename__ = "agent_log"

    id: Optional[int] = Field(default=None, primary_key=True)
    message: str = Field(description="Log line as written by the agent.")
    level: int = Field(default=LogLevel.INFO, index=True)
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        sa_column=Column(DateTime(timezone=True), nullable=False, index=True),
    )
