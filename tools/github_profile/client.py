"""GitHub REST client for fetching and exporting a user's public profile."""

import base64
import binascii
import json
import re
from dataclasses import replace
from pathlib import Path
from typing import Any, List, Optional, Union

import httpx

from shared.logger import get_logger

from .errors import (
    ConfigError,
    HttpError,
    IoError,
    JsonDecodeError,
    RateLimitError,
    TransportError,
)
from .models import Repository, UserDataBundle, UserProfile, parse_repositories
from .report import render_markdown

logger = get_logger(__name__)

API_URL = "https://api.github.com"
USER_AGENT = "github-api-client"

# Visible ASCII plus space and tab, as allowed in an HTTP field value
_HEADER_VALUE = re.compile(r"^[\x20-\x7e\t]*$")


class GitHubProfileClient:
    """
    Fetch a GitHub user's profile and repositories.

    Uses GitHub API v3 (REST). One ``httpx.Client`` is created per instance
    and reused for every request. Repository listings are not paginated:
    only the first page returned by the API is used.
    """

    def __init__(
        self,
        token: Optional[str] = None,
        base_url: str = API_URL,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """
        Initialize the client.

        Args:
            token: GitHub personal access token (optional but recommended)
            base_url: API root URL
            transport: httpx transport override (mainly for tests)

        Raises:
            ConfigError: token cannot be sent as a header value
        """
        self.base_url = base_url.rstrip("/")

        self.headers = {"User-Agent": USER_AGENT}

        if token:
            value = f"Bearer {token}"
            if not _HEADER_VALUE.match(value):
                raise ConfigError("Invalid token format: token contains characters not allowed in a header")
            self.headers["Authorization"] = value
            logger.debug("Using authenticated GitHub API")
        else:
            logger.warning("No GitHub token found. Rate limits: 60 req/hour (vs 5000 with token)")

        try:
            self._client = httpx.Client(
                base_url=self.base_url,
                headers=self.headers,
                transport=transport,
            )
        except (UnicodeEncodeError, ValueError) as e:
            raise ConfigError(f"Invalid client configuration: {e}") from e

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self._client.close()

    def __enter__(self) -> "GitHubProfileClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def _get(self, path: str) -> httpx.Response:
        try:
            return self._client.get(path)
        except httpx.RequestError as e:
            raise TransportError(f"Network error while requesting {path}: {e}") from e

    @staticmethod
    def _check_status(response: httpx.Response, what: str) -> None:
        if response.status_code == 403:
            remaining = response.headers.get("x-ratelimit-remaining", "unknown")
            raise RateLimitError(remaining)

        if not response.is_success:
            raise HttpError(response.status_code, what)

    @staticmethod
    def _json(response: httpx.Response, what: str) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise JsonDecodeError(f"Invalid JSON in {what} response: {e}") from e

    def fetch_user(self, username: str) -> UserProfile:
        """
        Fetch a user's profile, including their profile README if they have one.

        Args:
            username: GitHub login

        Returns:
            UserProfile

        Raises:
            RateLimitError: GitHub answered 403
            HttpError: any other non-success status
            JsonDecodeError: unexpected response body
            TransportError: the request failed
        """
        logger.info(f"Fetching user {username}")

        response = self._get(f"/users/{username}")
        self._check_status(response, "user data")
        user = UserProfile.from_api(self._json(response, "user"))

        try:
            readme = self.fetch_profile_readme(username)
        except (HttpError, RateLimitError, JsonDecodeError, TransportError) as e:
            logger.debug(f"No profile README for {username}: {e}")
            readme = None

        return user if readme is None else replace(user, profile_readme=readme)

    def fetch_repositories(self, username: str) -> List[Repository]:
        """
        Fetch the first page of a user's public repositories.

        Args:
            username: GitHub login

        Returns:
            Repositories in the order GitHub returned them
        """
        logger.info(f"Fetching repositories for {username}")

        response = self._get(f"/users/{username}/repos")
        self._check_status(response, "repositories")
        return parse_repositories(self._json(response, "repositories"))

    def fetch_profile_readme(self, username: str) -> str:
        """
        Fetch the README of the ``{username}/{username}`` profile repository.

        Raises:
            HttpError: README not found or other non-success status
            JsonDecodeError: content missing or not valid base64 / UTF-8
        """
        logger.debug(f"Fetching profile README for {username}")

        response = self._get(f"/repos/{username}/{username}/contents/README.md")
        if not response.is_success:
            raise HttpError(response.status_code, "profile README")

        body = self._json(response, "README")
        encoded = body.get("content") if isinstance(body, dict) else None
        if not isinstance(encoded, str):
            raise JsonDecodeError("Invalid README response: missing 'content'")

        try:
            raw = base64.b64decode(encoded.replace("\n", ""), validate=True)
            return raw.decode("utf-8")
        except (binascii.Error, UnicodeDecodeError) as e:
            raise JsonDecodeError(f"Could not decode README content: {e}") from e

    def fetch_all_data(
        self,
        username: str,
        output_dir: Optional[Union[str, Path]] = None,
    ) -> UserDataBundle:
        """
        Fetch a user's profile and repositories and write the export files.

        Writes ``{username}.json`` and ``{username}.md`` to ``output_dir``
        (current directory by default), overwriting existing files. Nothing
        is written unless both fetches succeed.

        Args:
            username: GitHub login
            output_dir: Directory for the output files

        Returns:
            UserDataBundle

        Raises:
            IoError: an output file could not be written
        """
        user = self.fetch_user(username)
        repositories = self.fetch_repositories(username)
        data = UserDataBundle(user=user, repositories=repositories)

        directory = Path(output_dir) if output_dir is not None else Path(".")
        json_path = directory / f"{username}.json"
        md_path = directory / f"{username}.md"

        _write_text(json_path, json.dumps(data.to_dict(), indent=2, ensure_ascii=False))
        _write_text(md_path, render_markdown(data))

        return data


def _write_text(path: Path, content: str) -> None:
    try:
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise IoError(f"Failed to write {path}: {e}", path=str(path)) from e
    logger.info(f"Wrote {path}")
