"""
Host-side runner for the autocommit agent.

Builds the context for each invocation, runs the agent and persists what it
logged and emitted. Failures are recorded as agent error logs before being
re-raised (fail-fast, like any other host job).
"""

from typing import Any, Callable, Dict, List, Optional

from sqlalchemy.ext.asyncio import async_sessionmaker, AsyncSession

from autocommit_agent.core.config import settings
from autocommit_agent.core.logging import get_logger
from autocommit_agent.integrations.github import GitHubContentsClient
from autocommit_agent.services.autocommit.agent import GithubAutocommitAgent
from autocommit_agent.services.autocommit.context import Ctx, RunRecorder
from autocommit_agent.services.autocommit.store import AgentStore

logger = get_logger(__name__)


def default_client_factory(token: str) -> GitHubContentsClient:
    """Contents API client for the configured GitHub API root."""
    return GitHubContentsClient(token, base_url=settings.GITHUB_API_URL)


class AgentRunner:
    def __init__(
        self,
        options: Dict[str, Any],
        session_factory: async_sessionmaker[AsyncSession],
        client_factory: Callable[[str], GitHubContentsClient] = default_client_factory,
    ):
        self.options = options
        self.session_factory = session_factory
        self.client_factory = client_factory

    def _context(self, options: Optional[Dict[str, Any]] = None) -> Ctx:
        return Ctx(
            options=self.options if options is None else options,
            recorder=RunRecorder(),
            client_factory=self.client_factory,
        )

    async def run_check(self) -> List[Any]:
        """
        Run one scheduled tick.

        Returns:
            Payloads of the emitted events.
        """
        ctx = self._context()
        try:
            await GithubAutocommitAgent(ctx).check()
        except Exception as e:
            ctx.recorder.error(f"Check failed: {e}")
            raise
        finally:
            await self._persist(ctx.recorder)
        return ctx.recorder.events

    async def run_receive(self, events: List[Dict[str, Any]]) -> List[Any]:
        """
        Process inbound events, one run per event.

        Returns:
            Payloads of the emitted events.
        """
        ctx = self._context()
        try:
            await GithubAutocommitAgent(ctx).receive(events)
        except Exception as e:
            ctx.recorder.error(f"Receive failed: {e}")
            raise
        finally:
            await self._persist(ctx.recorder)
        return ctx.recorder.events

    async def dry_run(self, options: Dict[str, Any]) -> RunRecorder:
        """
        Run once with `options` without storing anything.

        GitHub is still called; only events and logs stay in memory.
        """
        ctx = self._context(options)
        try:
            await GithubAutocommitAgent(ctx).check()
        except Exception as e:
            ctx.recorder.error(f"Dry run failed: {e}")
        return ctx.recorder

    async def _persist(self, recorder: RunRecorder) -> None:
        async with self.session_factory() as session:
            await AgentStore(session).persist(recorder)
