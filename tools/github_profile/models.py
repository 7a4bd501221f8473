"""Record types for GitHub user profiles and repositories."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from .errors import JsonDecodeError


def _require(data: Dict[str, Any], key: str, kind: type, record: str) -> Any:
    """Return data[key], failing unless it is present and of the given type."""
    if key not in data:
        raise JsonDecodeError(f"Invalid {record} response: missing field '{key}'")

    value = data[key]
    # bool is an int subclass, never accept it for numeric fields
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise JsonDecodeError(
            f"Invalid {record} response: field '{key}' should be {kind.__name__}, "
            f"got {type(value).__name__}"
        )
    return value


def _optional(data: Dict[str, Any], key: str, record: str) -> Optional[str]:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise JsonDecodeError(
            f"Invalid {record} response: field '{key}' should be str or null, "
            f"got {type(value).__name__}"
        )
    return value


@dataclass(frozen=True)
class UserProfile:
    """Public profile of a GitHub user."""

    login: str
    id: int
    avatar_url: str
    html_url: str
    public_repos: int
    followers: int
    following: int
    name: Optional[str] = None
    company: Optional[str] = None
    blog: Optional[str] = None
    location: Optional[str] = None
    email: Optional[str] = None
    bio: Optional[str] = None
    profile_readme: Optional[str] = None

    @classmethod
    def from_api(cls, data: Any) -> "UserProfile":
        """
        Build a profile from a ``GET /users/{username}`` response body.

        Unknown keys are ignored.

        Raises:
            JsonDecodeError: body is not an object or a required field is
                missing or has the wrong type
        """
        if not isinstance(data, dict):
            raise JsonDecodeError("Invalid user response: expected a JSON object")

        login = _require(data, "login", str, "user")
        if not login:
            raise JsonDecodeError("Invalid user response: empty login")

        return cls(
            login=login,
            id=_require(data, "id", int, "user"),
            avatar_url=_require(data, "avatar_url", str, "user"),
            html_url=_require(data, "html_url", str, "user"),
            public_repos=_require(data, "public_repos", int, "user"),
            followers=_require(data, "followers", int, "user"),
            following=_require(data, "following", int, "user"),
            name=_optional(data, "name", "user"),
            company=_optional(data, "company", "user"),
            blog=_optional(data, "blog", "user"),
            location=_optional(data, "location", "user"),
            email=_optional(data, "email", "user"),
            bio=_optional(data, "bio", "user"),
        )

    @property
    def display_name(self) -> str:
        return self.name or self.login

    def to_dict(self) -> Dict[str, Any]:
        """Serialize using the API's field names; profile_readme only when set."""
        data: Dict[str, Any] = {
            "login": self.login,
            "id": self.id,
            "avatar_url": self.avatar_url,
            "html_url": self.html_url,
            "name": self.name,
            "company": self.company,
            "blog": self.blog,
            "location": self.location,
            "email": self.email,
            "bio": self.bio,
            "public_repos": self.public_repos,
            "followers": self.followers,
            "following": self.following,
        }
        if self.profile_readme is not None:
            data["profile_readme"] = self.profile_readme
        return data


@dataclass(frozen=True)
class Repository:
    """A repository as listed by ``GET /users/{username}/repos``."""

    id: int
    name: str
    full_name: str
    private: bool
    html_url: str
    fork: bool
    created_at: str  # ISO-8601, kept as returned
    updated_at: str
    pushed_at: str
    stargazers_count: int
    watchers_count: int
    forks_count: int
    description: Optional[str] = None
    language: Optional[str] = None
    readme_content: Optional[str] = None

    @classmethod
    def from_api(cls, data: Any) -> "Repository":
        """Build a repository from one element of the repos listing."""
        if not isinstance(data, dict):
            raise JsonDecodeError("Invalid repository response: expected a JSON object")

        return cls(
            id=_require(data, "id", int, "repository"),
            name=_require(data, "name", str, "repository"),
            full_name=_require(data, "full_name", str, "repository"),
            private=_require(data, "private", bool, "repository"),
            html_url=_require(data, "html_url", str, "repository"),
            fork=_require(data, "fork", bool, "repository"),
            created_at=_require(data, "created_at", str, "repository"),
            updated_at=_require(data, "updated_at", str, "repository"),
            pushed_at=_require(data, "pushed_at", str, "repository"),
            stargazers_count=_require(data, "stargazers_count", int, "repository"),
            watchers_count=_require(data, "watchers_count", int, "repository"),
            forks_count=_require(data, "forks_count", int, "repository"),
            description=_optional(data, "description", "repository"),
            language=_optional(data, "language", "repository"),
        )

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "full_name": self.full_name,
            "private": self.private,
            "html_url": self.html_url,
            "description": self.description,
            "fork": self.fork,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
            "pushed_at": self.pushed_at,
            "language": self.language,
            "stargazers_count": self.stargazers_count,
            "watchers_count": self.watchers_count,
            "forks_count": self.forks_count,
        }
        if self.readme_content is not None:
            data["readme_content"] = self.readme_content
        return data


@dataclass(frozen=True)
class UserDataBundle:
    """A user's profile together with their repositories, in API order."""

    user: UserProfile
    repositories: Tuple[Repository, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # accept any sequence, store an immutable one
        object.__setattr__(self, "repositories", tuple(self.repositories))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "user": self.user.to_dict(),
            "repositories": [repo.to_dict() for repo in self.repositories],
        }


def parse_repositories(data: Any) -> List[Repository]:
    """Decode the repos listing body, preserving server order."""
    if not isinstance(data, list):
        raise JsonDecodeError("Invalid repositories response: expected a JSON array")
    return [Repository.from_api(item) for item in data]
