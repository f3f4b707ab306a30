"""
Autocommit Agent Dependencies
"""

from typing import AsyncGenerator
from fastapi import Request
from sqlmodel.ext.asyncio.session import AsyncSession
from autocommit_agent.db.session import AsyncSessionLocal
from autocommit_agent.services.autocommit import AgentRunner


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Get database session"""
    async with AsyncSessionLocal() as session:
        yield session


def get_runner(request: Request) -> AgentRunner:
    """Get the agent runner created at startup"""
    return request.app.state.runner
