"""
Pytest configuration for the autocommit agent.

- Puts the repository root on `sys.path` so `import autocommit_agent...` works
  without installing the package.
- Provides a fake GitHub Contents API (served through `httpx.MockTransport`)
  and an in-memory database.
"""

import base64
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import httpx
import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

PROJECT_ROOT = Path(__file__).resolve().parent.parent

if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from autocommit_agent.db import models  # noqa: E402,F401
from autocommit_agent.integrations.github import GitHubContentsClient  # noqa: E402


class FakeGitHub:
    """
    Minimal Contents API double.

    Serves one file per path and records every request it receives.
    """

    def __init__(self):
        self.files: Dict[str, Dict[str, Any]] = {}
        self.requests: List[httpx.Request] = []
        self.get_status = 200
        self.put_status = 201

    def add_file(
        self, owner: str, repo: str, file: str, content: bytes, sha: str
    ) -> None:
        self.files[f"/repos/{owner}/{repo}/contents/{file}"] = {
            "content": content,
            "sha": sha,
        }

    @property
    def puts(self) -> List[httpx.Request]:
        return [r for r in self.requests if r.method == "PUT"]

    @property
    def gets(self) -> List[httpx.Request]:
        return [r for r in self.requests if r.method == "GET"]

    def put_body(self, index: int = -1) -> Dict[str, Any]:
        return json.loads(self.puts[index].content)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path

        if request.method == "GET":
            stored = self.files.get(path)
            if stored is None or self.get_status != 200:
                return httpx.Response(
                    self.get_status if stored else 404, json={"message": "Not Found"}
                )
            encoded = base64.encodebytes(stored["content"]).decode("ascii")
            return httpx.Response(
                200,
                json={
                    "name": path.rsplit("/", 1)[-1],
                    "content": encoded,
                    "encoding": "base64",
                    "sha": stored["sha"],
                },
            )

        if request.method == "PUT":
            body = json.loads(request.content)
            if self.put_status >= 300:
                return httpx.Response(
                    self.put_status, json={"message": "sha does not match"}
                )
            new_sha = f"{body['sha']}-next"
            if path in self.files:
                self.files[path] = {
                    "content": base64.b64decode(body["content"]),
                    "sha": new_sha,
                }
            return httpx.Response(
                self.put_status,
                json={
                    "content": {"path": path, "sha": new_sha},
                    "commit": {"sha": "c0ffee", "message": body["message"]},
                },
            )

        return httpx.Response(405)


@pytest.fixture
def github() -> FakeGitHub:
    return FakeGitHub()


@pytest.fixture
def client_factory(github):
    def factory(token: str) -> GitHubContentsClient:
        return GitHubContentsClient(token, transport=httpx.MockTransport(github))

    return factory


def make_options(**overrides: Any) -> Dict[str, Any]:
    options = {
        "repository": "app",
        "version": "3.0",
        "commit_message": "bump version",
        "committer_name": "Bot",
        "committer_email": "bot@example.com",
        "token": "secret-token",
        "rules": json.dumps(
            [
                {
                    "name": "app",
                    "owner": "o",
                    "my_repository": "r",
                    "pattern": "VER",
                    "file": "Dockerfile",
                }
            ]
        ),
        "emit_events": "true",
        "debug": "false",
        "expected_receive_period_in_days": "2",
    }
    options.update(overrides)
    return options


@pytest.fixture
def options() -> Dict[str, Any]:
    return make_options()


@pytest_asyncio.fixture
async def session_factory():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)

    await engine.dispose()


def put_content(github: FakeGitHub, index: int = -1) -> Optional[bytes]:
    if not github.puts:
        return None
    return base64.b64decode(github.put_body(index)["content"])
