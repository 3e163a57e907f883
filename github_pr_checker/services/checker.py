"""Drive a PR check run over the configured repositories."""

from pathlib import Path

from ..github.url_parser import DEFAULT_HOST, parse_repository_url
from ..utils import get_logger
from .pr_fetcher import PullRequestFetcher
from .report import ReportPrinter
from .repository_loader import load_repository_list

logger = get_logger(__name__)


class PRChecker:
    """Checks each configured repository in order and prints the report."""

    def __init__(self, fetcher: PullRequestFetcher, printer: ReportPrinter, host: str = DEFAULT_HOST) -> None:
        self.fetcher = fetcher
        self.printer = printer
        self.host = host

    def run(self, repositories_file: str | Path, username: str) -> int:
        """Run the check.

        Args:
        ----
            repositories_file: JSON file listing the repositories
            username: Author login to look for

        Returns:
        -------
            Total number of matching open pull requests

        Raises:
        ------
            ConfigNotFoundError: If the repositories file does not exist
            ConfigParseError: If the repositories file cannot be parsed

        """
        repositories = load_repository_list(repositories_file)

        self.printer.print_header()

        total_prs = 0
        for entry in repositories:
            repository = parse_repository_url(entry.url, host=self.host)
            if repository is None:
                logger.warning("Skipping invalid repository URL: %s", entry.url)
                self.printer.print_skipped(entry.url)
                continue

            result = self.fetcher.fetch(repository, username)
            self.printer.print_result(result)
            total_prs += result.count

        self.printer.print_summary(total_prs)
        logger.info("Found %d open pull requests for %s across %d repositories", total_prs, username, len(repositories))
        return total_prs
