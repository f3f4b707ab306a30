from typing import Annotated, Optional
from fastapi import APIRouter, Depends, Header, Query, Request
from sqlmodel.ext.asyncio.session import AsyncSession

from autocommit_agent.core.config import settings
from autocommit_agent.dependencies.database import get_db, get_runner
from autocommit_agent.services.autocommit import AgentRunner, AgentStore
from autocommit_agent.services.autocommit.inbound import handle_inbound_events

router = APIRouter()

SessionDep = Annotated[AsyncSession, Depends(get_db)]
RunnerDep = Annotated[AgentRunner, Depends(get_runner)]


@router.post("")
async def receive_events(
    request: Request,
    runner: RunnerDep,
    x_hub_signature_256: Optional[str] = Header(None),
):
    """
    Receive inbound events; each one triggers a run with its payload
    interpolated into the options.
    """
    raw_body = await request.body()
    return await handle_inbound_events(
        runner, raw_body, x_hub_signature_256, settings.INBOUND_EVENT_SECRET
    )


@router.get("")
async def list_events(
    session: SessionDep,
    skip: int = Query(0, ge=0),
    limit: int = Query(20, ge=1, le=100),
):
    """List emitted events, newest first."""
    events = await AgentStore(session).get_events(skip=skip, limit=limit)
    return [
        {"id": event.id, "payload": event.payload, "created_at": event.created_at}
        for event in events
    ]
