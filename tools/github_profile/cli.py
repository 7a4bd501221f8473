"""CLI interface for GitHub Profile Exporter."""

import sys
from pathlib import Path
from typing import Optional

import click

from shared.cli import handle_errors, success
from shared.logger import setup_logger

from .client import GitHubProfileClient


@click.command()
@click.argument("username")
@click.option(
    "--token",
    envvar="GITHUB_TOKEN",
    help="GitHub personal access token (or set GITHUB_TOKEN env var)",
)
@click.option(
    "--output-dir",
    "-o",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Directory for the output files (default: current directory)",
)
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
@handle_errors
def main(
    username: str,
    token: Optional[str],
    output_dir: Optional[Path],
    verbose: bool,
):
    """
    GitHub Profile Exporter - Save a user's profile and repositories.

    Writes USERNAME.json and USERNAME.md to the output directory.

    Examples:

        \b
        # Export a profile
        gh-profile torvalds

        \b
        # Authenticated, into another directory
        GITHUB_TOKEN=ghp_xxx gh-profile octocat --output-dir exports
    """
    log_level = "DEBUG" if verbose else "INFO"
    setup_logger(__name__, level=log_level)

    with GitHubProfileClient(token=token) as client:
        client.fetch_all_data(username, output_dir=output_dir)

    directory = output_dir if output_dir is not None else Path()
    json_path = directory / f"{username}.json"
    md_path = directory / f"{username}.md"
    success(f"Successfully generated {json_path} and {md_path}")
    sys.exit(0)


if __name__ == "__main__":
    main()
