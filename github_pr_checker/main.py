"""Command line entry point for GitHub PR Checker."""

import sys

import click

from github_pr_checker.config import get_settings
from github_pr_checker.exceptions import ConfigNotFoundError, ConfigParseError
from github_pr_checker.github.client import GitHubAPIClient
from github_pr_checker.services import PRChecker, PullRequestFetcher, ReportPrinter
from github_pr_checker.utils import get_logger, set_log_level

logger = get_logger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("username")
@click.option(
    "--file",
    "-f",
    "repositories_file",
    default=None,
    help="JSON file path (default: my-github-repos.json)",
)
@click.option("--token", "-t", default=None, help="GitHub personal access token (default: $GITHUB_TOKEN)")
@click.option("--api-url", default=None, help="GitHub API base URL (default: https://api.github.com)")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Diagnostic log level, written to stderr",
)
def cli(
    username: str,
    repositories_file: str | None,
    token: str | None,
    api_url: str | None,
    log_level: str | None,
) -> None:
    """List open pull requests authored by USERNAME in the configured repositories."""
    settings = get_settings()
    if log_level:
        set_log_level(log_level)

    access_token = token or settings.github_token
    repositories_file = repositories_file or settings.repositories_file

    client = GitHubAPIClient(access_token, base_url=api_url)
    checker = PRChecker(
        PullRequestFetcher(client),
        ReportPrinter(username),
        host=settings.github_host,
    )

    try:
        checker.run(repositories_file, username)
    except (ConfigNotFoundError, ConfigParseError) as e:
        logger.debug("Aborting run", exc_info=True)
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


def main() -> None:
    """Console script entry point."""
    cli(prog_name="github-pr-checker")


if __name__ == "__main__":
    main()
