from .agent import router as agent_router
from .events import router as events_router
from .health import router as health_router

__all__ = ["agent_router", "events_router", "health_router"]
