"""Exceptions raised while exporting a GitHub profile."""

from typing import Optional


class GitHubProfileError(Exception):
    """Base class for all profile export failures."""


class ConfigError(GitHubProfileError):
    """The client could not be configured (e.g. unusable token)."""


class RateLimitError(GitHubProfileError):
    """GitHub refused the request because the rate limit was hit."""

    def __init__(self, remaining: str = "unknown"):
        self.remaining = remaining
        super().__init__(f"Rate limit exceeded. Remaining requests: {remaining}")


class HttpError(GitHubProfileError):
    """GitHub answered with a non-success status other than 403."""

    def __init__(self, status_code: int, what: str = "resource"):
        self.status_code = status_code
        self.what = what
        super().__init__(f"Failed to fetch {what}: {status_code}")


class JsonDecodeError(GitHubProfileError):
    """A response body was not JSON or did not have the expected shape."""


class TransportError(GitHubProfileError):
    """The request never got a response (DNS, connection, timeout...)."""


class IoError(GitHubProfileError):
    """An output file could not be written."""

    def __init__(self, message: str, path: Optional[str] = None):
        self.path = path
        super().__init__(message)
