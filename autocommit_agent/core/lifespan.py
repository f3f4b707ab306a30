import asyncio
from contextlib import asynccontextmanager
from fastapi import FastAPI

from autocommit_agent.core.config import settings
from autocommit_agent.core.logging import setup_logging
from autocommit_agent.core.scheduler import scheduler_task
from autocommit_agent.db.session import AsyncSessionLocal, engine
from autocommit_agent.services.autocommit import AgentRunner
from autocommit_agent.services.autocommit.options import load_options


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan function for the FastAPI application.
    Handles startup and shutdown of the agent runner and its scheduler.
    """
    # 1. Logging
    setup_logging(settings.LOG_LEVEL)

    # 2. Load and validate options (invalid options block startup)
    options = load_options(settings.AGENT_OPTIONS_PATH)
    app.state.runner = AgentRunner(options, AsyncSessionLocal)

    # 3. Start scheduler
    schedule_task = asyncio.create_task(
        scheduler_task(app.state.runner, settings.SCHEDULE_INTERVAL_SECONDS)
    )

    yield

    # 4. Stop scheduler
    schedule_task.cancel()
    try:
        await schedule_task
    except asyncio.CancelledError:
        pass

    # 5. Dispose Database Engine
    await engine.dispose()
