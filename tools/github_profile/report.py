"""Markdown report rendering."""

from typing import List

from .models import Repository, UserDataBundle


def _repository_section(repo: Repository) -> List[str]:
    lines = [f"### {repo.name}\n"]
    if repo.description is not None:
        lines.append(f"> {repo.description}\n\n")

    lines.append(f"- **Stars:** {repo.stargazers_count}\n")
    lines.append(f"- **Forks:** {repo.forks_count}\n")
    if repo.language is not None:
        lines.append(f"- **Language:** {repo.language}\n")
    lines.append(f"- **Created:** {repo.created_at}\n")
    lines.append(f"- **Last Updated:** {repo.updated_at}\n\n")
    return lines


def render_markdown(data: UserDataBundle) -> str:
    """
    Render a user's profile and repositories as a Markdown report.

    Optional fields are rendered only when present. The profile README is
    inserted as-is (not fenced) so its own Markdown renders.

    Args:
        data: Bundle to render

    Returns:
        Markdown text
    """
    user = data.user
    lines = [f"# {user.display_name} Profile\n\n"]

    if user.bio is not None:
        lines.append(f"> {user.bio}\n\n")

    lines.append("## Overview\n\n")
    lines.append(f"- **Username:** {user.login}\n")
    lines.append(f"- **Public Repositories:** {user.public_repos}\n")
    lines.append(f"- **Followers:** {user.followers}\n")
    lines.append(f"- **Following:** {user.following}\n")

    if user.location is not None:
        lines.append(f"- **Location:** {user.location}\n")
    if user.company is not None:
        lines.append(f"- **Company:** {user.company}\n")

    lines.append("\n")

    if user.profile_readme is not None:
        lines.append("## Profile README\n\n")
        lines.append(f"{user.profile_readme}\n\n")

    lines.append("## Repositories\n\n")
    for repo in data.repositories:
        lines.extend(_repository_section(repo))

    return "".join(lines)
