"""
GitHub autocommit agent.

Keeps a version line of a file in a GitHub repository up to date:

1. Pick the rule matching the configured repository
2. Fetch the file and its blob sha from the Contents API
3. Compare the `ENV <pattern> <version>` line with the target version
4. Commit the rewritten file, or log that nothing had to change

Runs once per scheduled tick (`check`) or once per inbound event (`receive`).
"""

from typing import Any, Dict, List, Optional

import httpx

from autocommit_agent.integrations.github import decode_remote_file
from autocommit_agent.schemas import AgentOptions, CommitRequest, RemoteFile, Rule
from autocommit_agent.services.autocommit.context import Ctx
from autocommit_agent.services.autocommit.interpolation import interpolate_options
from autocommit_agent.services.autocommit.rules import parse_rules, resolve_rule
from autocommit_agent.services.autocommit.version_gate import (
    NO_REPLACEMENT_MESSAGE,
    plan_update,
)


class GithubAutocommitAgent:
    def __init__(self, ctx: Ctx):
        self.ctx = ctx

    @property
    def recorder(self):
        return self.ctx.recorder

    async def check(self) -> Optional[Any]:
        """Scheduled tick: run once with the stored options."""
        return await self.commit(interpolate_options(self.ctx.options))

    async def receive(self, events: List[Dict[str, Any]]) -> List[Any]:
        """
        Run once per inbound event, with the options interpolated against the
        event payload.

        Returns:
            Payloads of the events emitted while processing.
        """
        emitted = []
        for event in events:
            options = interpolate_options(self.ctx.options, event)
            self.recorder.log(event)
            payload = await self.commit(options)
            if payload is not None:
                emitted.append(payload)
        return emitted

    @staticmethod
    def plan(
        options: AgentOptions, rule: Rule, remote_file: RemoteFile
    ) -> Optional[CommitRequest]:
        """
        Decide which commit to make, without any I/O.

        Returns:
            The PUT to issue, or None when the file is already up to date.
        """
        content = plan_update(remote_file, rule.pattern, options.version)
        if content is None:
            return None

        return CommitRequest(
            owner=rule.owner,
            repository=rule.my_repository,
            path=rule.file,
            message=options.commit_message,
            committer_name=options.committer_name,
            committer_email=options.committer_email,
            content=content,
            sha=remote_file.sha,
        )

    async def commit(self, raw_options: Dict[str, Any]) -> Optional[Any]:
        """
        Full run for already interpolated options.

        Returns:
            The emitted event payload, or None when nothing was emitted.

        Raises:
            httpx.HTTPError: if fetching the file fails.
            GitHubContentsError: if the fetched body is not a file.
            ValueError: if `rules` cannot be parsed.
        """
        options = AgentOptions(**raw_options)
        rule = resolve_rule(
            parse_rules(options.rules),
            options.repository,
            self.recorder.log,
            debug=options.debug_enabled,
        )

        client = self.ctx.client_factory(options.token)
        response = await client.get_contents(rule.owner, rule.my_repository, rule.file)
        self._log_response(response, options)
        response.raise_for_status()

        remote_file = decode_remote_file(response.json())

        request = self.plan(options, rule, remote_file)
        if request is None:
            self.recorder.log(NO_REPLACEMENT_MESSAGE)
            return None

        return await self._update_content(client, request, options)

    async def _update_content(
        self, client, request: CommitRequest, options: AgentOptions
    ) -> Optional[Any]:
        response = await client.put_contents(request)
        self._log_response(response, options)

        if not options.emit_events_enabled:
            return None

        payload = self._response_payload(response)
        self.recorder.create_event(payload)
        return payload

    def _log_response(self, response: httpx.Response, options: AgentOptions) -> None:
        self.recorder.log(f"request status : {response.status_code}")

        if options.debug_enabled:
            self.recorder.log("body")
            self.recorder.log(response.text)

    @staticmethod
    def _response_payload(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError:
            return response.text
