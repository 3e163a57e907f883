"""Fetch open pull requests by a given author."""

from collections.abc import Iterable
from typing import Any

import requests

from ..exceptions import GitHubAPIError
from ..github.client import GitHubAPIClient
from ..models import FetchResult, PullRequest, RepositoryRef
from ..utils import get_logger

logger = get_logger(__name__)


def filter_by_author(pulls: Iterable[dict[str, Any]], username: str) -> list[PullRequest]:
    """Keep pull requests whose author login matches ``username``, ignoring case.

    Provider order is preserved.
    """
    pull_requests = (PullRequest.from_github(pr) for pr in pulls)
    return [pr for pr in pull_requests if pr.is_authored_by(username)]


class PullRequestFetcher:
    """Lists a repository's open pull requests and filters them by author."""

    def __init__(self, client: GitHubAPIClient) -> None:
        self.client = client

    def fetch(self, repository: RepositoryRef, username: str) -> FetchResult:
        """Fetch open pull requests authored by ``username``.

        Failures are contained in the returned result instead of raised.

        Args:
        ----
            repository: Repository to query
            username: Author login to match

        Returns:
        -------
            FetchResult with the matching pull requests or an error message

        """
        logger.debug("Fetching open pull requests for %s", repository)

        try:
            pulls = self.client.list_open_pull_requests(repository.owner, repository.name)
            matching = filter_by_author(pulls, username)
        except GitHubAPIError as e:
            error = f"Error querying {repository}: {e.status_code} - {e.message}"
            logger.warning(error)
            return FetchResult.failure(repository, error)
        except (requests.RequestException, ValueError, TypeError, AttributeError) as e:
            error = f"Error accessing {repository}: {e}"
            logger.warning(error)
            return FetchResult.failure(repository, error)

        logger.info("Found %d of %d open pull requests by %s in %s", len(matching), len(pulls), username, repository)
        return FetchResult(repository=repository, pull_requests=matching)
