from typing import Annotated
from fastapi import APIRouter, Depends
from sqlmodel.ext.asyncio.session import AsyncSession

from autocommit_agent.dependencies.database import get_db, get_runner
from autocommit_agent.services.autocommit import AgentRunner, AgentStore
from autocommit_agent.services.autocommit.options import expected_receive_period

router = APIRouter()


@router.get("")
async def health_check(
    session: Annotated[AsyncSession, Depends(get_db)],
    runner: Annotated[AgentRunner, Depends(get_runner)],
):
    """
    Check the health of the API and whether the agent is working.
    """
    days = expected_receive_period(runner.options)
    working = await AgentStore(session).is_working(days)
    return {"status": "ok", "working": working}
