"""
Runtime context for the autocommit agent.

Everything the agent needs from its host is passed in explicitly: the
options, the GitHub client factory and a recorder that collects log lines
and emitted events for the host to persist.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List

from autocommit_agent.core.logging import get_logger
from autocommit_agent.db.models import LogLevel
from autocommit_agent.integrations.github import GitHubContentsClient

logger = get_logger("autocommit_agent.agent")


@dataclass
class LogRecord:
    message: str
    level: int
    created_at: datetime


@dataclass
class RunRecorder:
    """Collects what one run logged and emitted.

    Attributes:
        logs: Log lines in the order they were written.
        events: Payloads of the events the run created.
    """

    logs: List[LogRecord] = field(default_factory=list)
    events: List[Any] = field(default_factory=list)

    def log(self, message: Any) -> None:
        message = str(message)
        logger.info(message)
        self.logs.append(
            LogRecord(message, LogLevel.INFO, datetime.now(timezone.utc))
        )

    def error(self, message: Any) -> None:
        message = str(message)
        logger.error(message)
        self.logs.append(
            LogRecord(message, LogLevel.ERROR, datetime.now(timezone.utc))
        )

    def create_event(self, payload: Any) -> None:
        self.events.append(payload)


@dataclass
class Ctx:
    """Runtime context for one agent invocation.

    Attributes:
        options: Raw (not yet interpolated) agent options.
        recorder: Sink for log lines and events.
        client_factory: Builds a Contents API client from a token.
    """

    options: Dict[str, Any]
    recorder: RunRecorder = field(default_factory=RunRecorder)
    client_factory: Callable[[str], GitHubContentsClient] = GitHubContentsClient
