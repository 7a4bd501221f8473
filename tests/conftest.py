"""Shared fixtures for the GitHub profile exporter tests."""

import base64
from typing import Any, Callable, Dict, Optional

import httpx
import pytest

from tools.github_profile.client import GitHubProfileClient


def make_user(**overrides: Any) -> Dict[str, Any]:
    """A /users/{username} payload."""
    data = {
        "login": "alice",
        "id": 1001,
        "avatar_url": "https://avatars.githubusercontent.com/u/1001",
        "html_url": "https://github.com/alice",
        "name": "Alice A",
        "company": None,
        "blog": "",
        "location": None,
        "email": None,
        "bio": None,
        "public_repos": 2,
        "followers": 5,
        "following": 1,
        "site_admin": False,
    }
    data.update(overrides)
    return data


def make_repo(**overrides: Any) -> Dict[str, Any]:
    """One element of a /users/{username}/repos payload."""
    data = {
        "id": 2002,
        "name": "proj",
        "full_name": "alice/proj",
        "private": False,
        "html_url": "https://github.com/alice/proj",
        "description": None,
        "fork": False,
        "created_at": "2020-01-01T00:00:00Z",
        "updated_at": "2021-01-01T00:00:00Z",
        "pushed_at": "2021-01-02T00:00:00Z",
        "language": None,
        "stargazers_count": 3,
        "watchers_count": 3,
        "forks_count": 1,
        "default_branch": "main",
    }
    data.update(overrides)
    return data


def readme_payload(text: str) -> Dict[str, Any]:
    """A contents API payload, base64 wrapped at 60 columns like GitHub does."""
    encoded = base64.b64encode(text.encode("utf-8")).decode("ascii")
    wrapped = "\n".join(encoded[i:i + 60] for i in range(0, len(encoded), 60)) + "\n"
    return {"name": "README.md", "encoding": "base64", "content": wrapped}


class FakeGitHub:
    """Routes requests to canned responses and records what was asked."""

    def __init__(self) -> None:
        self.routes: Dict[str, Dict[str, Any]] = {}
        self.requests: list = []

    def add(
        self,
        path: str,
        json: Any = None,
        status_code: int = 200,
        headers: Optional[Dict[str, str]] = None,
        content: Optional[bytes] = None,
    ) -> None:
        body = {"content": content} if content is not None else {"json": json}
        self.routes[path] = {"status_code": status_code, "headers": headers, **body}

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get(request.url.path)
        if route is None:
            return httpx.Response(404, json={"message": "Not Found"})
        return httpx.Response(**route)

    @property
    def paths(self) -> list:
        return [r.url.path for r in self.requests]


@pytest.fixture
def github() -> FakeGitHub:
    return FakeGitHub()


@pytest.fixture
def client_factory(github: FakeGitHub) -> Callable[..., GitHubProfileClient]:
    """Build clients wired to the fake GitHub."""

    def factory(token: Optional[str] = None) -> GitHubProfileClient:
        return GitHubProfileClient(token=token, transport=httpx.MockTransport(github.handler))

    return factory


@pytest.fixture
def client(client_factory) -> GitHubProfileClient:
    c = client_factory()
    yield c
    c.close()
