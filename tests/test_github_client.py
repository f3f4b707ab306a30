"""
Tests for the Contents API client.
"""

import base64
import json

import httpx
import pytest

from autocommit_agent.integrations.github import (
    GitHubContentsClient,
    GitHubContentsError,
    decode_remote_file,
)
from autocommit_agent.schemas import CommitRequest


def recording_client(responses):
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return responses(request)

    return GitHubContentsClient("t0k3n", transport=httpx.MockTransport(handler)), seen


def commit_request(**overrides) -> CommitRequest:
    fields = {
        "owner": "o",
        "repository": "r",
        "path": "docker/Dockerfile",
        "message": "bump",
        "committer_name": "Bot",
        "committer_email": "bot@example.com",
        "content": b"ENV VER 3.0\n",
        "sha": "abc123",
    }
    fields.update(overrides)
    return CommitRequest(**fields)


class TestGitHubContentsClient:
    def test_contents_url(self):
        client = GitHubContentsClient("t")

        assert (
            client.contents_url("o", "r", "docker/Dockerfile")
            == "https://api.github.com/repos/o/r/contents/docker/Dockerfile"
        )

    def test_empty_coordinates_are_not_rejected(self):
        assert GitHubContentsClient("t").contents_url("", "", "") == (
            "https://api.github.com/repos///contents/"
        )

    def test_custom_base_url(self):
        client = GitHubContentsClient("t", base_url="https://ghe.example.com/api/v3/")

        assert client.contents_url("o", "r", "f").startswith(
            "https://ghe.example.com/api/v3/repos/"
        )

    @pytest.mark.asyncio
    async def test_get_sends_auth_headers(self):
        client, seen = recording_client(lambda r: httpx.Response(200, json={}))

        await client.get_contents("o", "r", "Dockerfile")

        request = seen[0]
        assert request.method == "GET"
        assert request.url.path == "/repos/o/r/contents/Dockerfile"
        assert request.headers["Authorization"] == "token t0k3n"
        assert request.headers["Accept"] == "application/vnd.github+json"
        assert request.headers["X-Github-Api-Version"] == "2022-11-28"

    @pytest.mark.asyncio
    async def test_get_does_not_raise_on_error_status(self):
        client, _ = recording_client(
            lambda r: httpx.Response(404, json={"message": "Not Found"})
        )

        response = await client.get_contents("o", "r", "missing")

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_put_sends_commit_body(self):
        client, seen = recording_client(lambda r: httpx.Response(201, json={}))

        await client.put_contents(commit_request())

        request = seen[0]
        body = json.loads(request.content)
        assert request.method == "PUT"
        assert request.url.path == "/repos/o/r/contents/docker/Dockerfile"
        assert request.headers["Content-Type"] == "application/json"
        assert request.headers["Authorization"] == "token t0k3n"
        assert body == {
            "message": "bump",
            "committer": {"name": "Bot", "email": "bot@example.com"},
            "content": base64.b64encode(b"ENV VER 3.0\n").decode("ascii"),
            "sha": "abc123",
        }


class TestCommitRequest:
    def test_encoding_has_no_line_breaks(self):
        request = commit_request(content=b"x" * 500)

        assert "\n" not in request.encoded_content()

    def test_encoding_round_trips_bytes(self):
        content = bytes(range(256))

        assert base64.b64decode(commit_request(content=content).encoded_content()) == content


class TestDecodeRemoteFile:
    def test_decodes_wrapped_base64(self):
        content = b"FROM debian\n" * 20
        data = {"content": base64.encodebytes(content).decode("ascii"), "sha": "s1"}

        remote = decode_remote_file(data)

        assert remote.content == content
        assert remote.sha == "s1"

    def test_missing_content_raises(self):
        with pytest.raises(GitHubContentsError, match="Not Found"):
            decode_remote_file({"message": "Not Found"})

    def test_directory_listing_raises(self):
        with pytest.raises(GitHubContentsError):
            decode_remote_file([{"name": "Dockerfile"}])
