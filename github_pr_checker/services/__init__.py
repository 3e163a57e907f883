"""Services driving a PR check run."""

from .checker import PRChecker
from .pr_fetcher import PullRequestFetcher, filter_by_author
from .report import ReportPrinter
from .repository_loader import load_repository_list

__all__ = [
    "PRChecker",
    "PullRequestFetcher",
    "ReportPrinter",
    "filter_by_author",
    "load_repository_list",
]
