"""
GitHub Contents API client.

Reads and writes a single repository file through
`/repos/{owner}/{repo}/contents/{path}`. The client only performs the HTTP
exchange; logging the outcome and deciding what to do with a failed response
is left to the caller.
"""

import base64
from typing import Any, Dict, Optional

import httpx

from autocommit_agent.schemas import CommitRequest, RemoteFile

GITHUB_API_URL = "https://api.github.com"
GITHUB_API_VERSION = "2022-11-28"


class GitHubContentsError(Exception):
    """Raised when a Contents API response does not describe a file."""


class GitHubContentsClient:
    """Client for the GitHub Contents API."""

    def __init__(
        self,
        token: str,
        base_url: str = GITHUB_API_URL,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the client.

        Args:
            token: GitHub Personal Access Token
            base_url: API root, overridable for GitHub Enterprise
            transport: Optional httpx transport (used by tests)
        """
        self.token = token
        self.base_url = base_url.rstrip("/")
        self.transport = transport
        self.headers = {
            "Accept": "application/vnd.github+json",
            "Authorization": f"token {token}",
            "X-Github-Api-Version": GITHUB_API_VERSION,
        }

    def contents_url(self, owner: str, repo: str, path: str) -> str:
        # Empty coordinates are not rejected; GitHub answers with an error.
        return f"{self.base_url}/repos/{owner}/{repo}/contents/{path}"

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=self.transport)

    async def get_contents(self, owner: str, repo: str, path: str) -> httpx.Response:
        """
        GET the file metadata and base64 content.

        Returns:
            The raw response; status is not checked here.
        """
        url = self.contents_url(owner, repo, path)

        async with self._client() as client:
            return await client.get(url, headers=self.headers)

    async def put_contents(self, request: CommitRequest) -> httpx.Response:
        """
        PUT new content for a file, guarded by the blob sha of the last fetch.

        Returns:
            The raw response; a stale sha shows up as a 409 like any other
            non-2xx status.
        """
        url = self.contents_url(request.owner, request.repository, request.path)
        headers = {**self.headers, "Content-Type": "application/json"}

        async with self._client() as client:
            return await client.put(url, headers=headers, json=request.body())


def decode_remote_file(data: Dict[str, Any]) -> RemoteFile:
    """
    Build a RemoteFile from a Contents API JSON body.

    GitHub wraps the base64 content every 60 characters; the line breaks are
    discarded while decoding.

    Raises:
        GitHubContentsError: if `content` or `sha` is missing.
    """
    if not isinstance(data, dict):
        raise GitHubContentsError(f"Expected a file object, got {type(data).__name__}")

    content = data.get("content")
    sha = data.get("sha")
    if content is None or sha is None:
        raise GitHubContentsError(
            f"Response has no file content: {data.get('message', 'unknown error')}"
        )

    return RemoteFile(content=base64.b64decode(content), sha=sha)
