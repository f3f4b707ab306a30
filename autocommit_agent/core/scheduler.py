"""
Background task that runs the agent on a fixed interval.
"""

import asyncio
import logging

from autocommit_agent.services.autocommit import AgentRunner

logger = logging.getLogger(__name__)


async def scheduler_task(runner: AgentRunner, interval_seconds: float) -> None:
    """
    Run a scheduled check every *interval_seconds*.

    A failed check is already stored as an agent error log by the runner;
    the loop keeps going.
    """
    logger.info("Scheduler started (every %ss)", interval_seconds)

    while True:
        await asyncio.sleep(interval_seconds)
        try:
            events = await runner.run_check()
            logger.info("Scheduled check done, %d event(s) emitted", len(events))
        except Exception as e:
            logger.error("Scheduled check failed: %s", e, exc_info=True)
