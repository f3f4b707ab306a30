"""
Persistence of agent events and logs, and the liveness check built on them.
"""

from datetime import datetime, timedelta, timezone
from typing import List, Optional

from sqlmodel import select, func
from sqlalchemy import desc
from sqlalchemy.ext.asyncio import AsyncSession

from autocommit_agent.core.logging import get_logger
from autocommit_agent.db.models import AgentEvent, AgentLog, LogLevel
from autocommit_agent.services.autocommit.context import RunRecorder

logger = get_logger(__name__)

# An error logged shortly before the last event still counts as recent.
ERROR_GRACE = timedelta(minutes=2)


def _aware(value: Optional[datetime]) -> Optional[datetime]:
    # SQLite hands back naive datetimes
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class AgentStore:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def persist(self, recorder: RunRecorder) -> None:
        """
        Write the logs and events of one run.
        """
        for record in recorder.logs:
            self.session.add(
                AgentLog(
                    message=record.message,
                    level=record.level,
                    created_at=record.created_at,
                )
            )
        for payload in recorder.events:
            self.session.add(AgentEvent(payload=payload))

        await self.session.commit()
        if recorder.events:
            logger.info("Stored %d event(s)", len(recorder.events))

    async def get_events(self, skip: int = 0, limit: int = 10) -> List[AgentEvent]:
        """
        Fetch emitted events, newest first.
        """
        statement = (
            select(AgentEvent)
            .order_by(desc(AgentEvent.created_at), desc(AgentEvent.id))
            .offset(skip)
            .limit(limit)
        )
        result = await self.session.execute(statement)
        return result.scalars().all()

    async def last_event_at(self) -> Optional[datetime]:
        # pylint: disable-next=not-callable
        result = await self.session.execute(select(func.max(AgentEvent.created_at)))
        return _aware(result.scalar())

    async def last_error_log_at(self) -> Optional[datetime]:
        # pylint: disable-next=not-callable
        result = await self.session.execute(
            select(func.max(AgentLog.created_at)).where(
                AgentLog.level >= LogLevel.ERROR
            )
        )
        return _aware(result.scalar())

    async def is_working(
        self, expected_receive_period_in_days: int, now: Optional[datetime] = None
    ) -> bool:
        """
        The agent is working when it emitted an event within the expected
        period and has not logged an error since shortly before that event.
        """
        now = now or datetime.now(timezone.utc)
        last_event_at = await self.last_event_at()
        if last_event_at is None:
            return False

        if last_event_at <= now - timedelta(days=expected_receive_period_in_days):
            return False

        last_error_log_at = await self.last_error_log_at()
        recent_errors = (
            last_error_log_at is not None
            and last_error_log_at > last_event_at - ERROR_GRACE
        )
        return not recent_errors
