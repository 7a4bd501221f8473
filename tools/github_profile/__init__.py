"""GitHub Profile Exporter - Save a user's profile and repositories as JSON and Markdown."""

from .client import GitHubProfileClient
from .models import Repository, UserDataBundle, UserProfile
from .report import render_markdown

__all__ = [
    "GitHubProfileClient",
    "Repository",
    "UserDataBundle",
    "UserProfile",
    "render_markdown",
]
