"""Human-readable report output."""

from typing import IO

import click

from ..models import FetchResult

RULE = "=" * 60


class ReportPrinter:
    """Writes the per-repository report and the final summary."""

    def __init__(self, username: str, stream: IO[str] | None = None) -> None:
        self.username = username
        self.stream = stream

    def _echo(self, message: str = "") -> None:
        click.echo(message, file=self.stream)

    def print_header(self) -> None:
        self._echo(f"Checking for open pull requests by user: {self.username}")
        self._echo(RULE)

    def print_skipped(self, url: object) -> None:
        self._echo(f"\nSkipping invalid repository URL: {url}")

    def print_result(self, result: FetchResult) -> None:
        self._echo(f"\nChecking {result.repository}...")

        if not result.ok:
            self._echo(f"  {result.error}")

        if not result.pull_requests:
            self._echo(f"  No open PRs found for {self.username}")
            return

        self._echo(f"  Found {result.count} open PR(s) for {self.username}:")
        for pr in result.pull_requests:
            self._echo(f"    • #{pr.number}: {pr.title}")
            self._echo(f"      Created: {pr.created_at}")
            self._echo(f"      URL: {pr.html_url}")

    def print_summary(self, total: int) -> None:
        self._echo(f"\n{RULE}")
        self._echo(f"Summary: Found {total} total open pull requests for {self.username}")
