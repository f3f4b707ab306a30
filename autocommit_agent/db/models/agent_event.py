"""
Agent Event Model

Stores the events emitted by the agent (commit responses).
"""

from datetime import datetime, timezone
from typing import Any, Optional

from sqlmodel import SQLModel, Field
from sqlalchemy import Column, DateTime, JSON


class AgentEvent(SQLModel, table=True):
    """
    Agent Event table.

    `payload` holds the Contents API response body of a commit.
    """

    __tablename__ = "agent_event"

    id: Optional[int] = Field(default=None, primary_key=True)
    payload: Any = Field(default=None, sa_column=Column(JSON, nullable=True))
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        sa_column=Column(DateTime(timezone=True), nullable=False, index=True),
    )
