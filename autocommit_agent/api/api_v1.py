from fastapi import APIRouter
from autocommit_agent.api.endpoints import agent_router, events_router, health_router

router = APIRouter(prefix="/api/v1")

router.include_router(events_router, prefix="/events", tags=["events"])
router.include_router(agent_router, prefix="/agent", tags=["agent"])
router.include_router(health_router, prefix="/health", tags=["health"])
