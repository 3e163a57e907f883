"""GitHub API client for listing open pull requests."""

from typing import Any
from urllib.parse import urljoin

import requests

from github_pr_checker.config import get_github_headers, get_settings
from github_pr_checker.exceptions import GitHubAPIError
from github_pr_checker.utils import get_logger

logger = get_logger(__name__)


class GitHubAPIClient:
    """GitHub REST API client.

    Only the first page of each listing is requested; there is no retry or
    rate-limit handling.
    """

    def __init__(
        self,
        access_token: str | None = None,
        base_url: str | None = None,
        user_agent: str | None = None,
        timeout: float | None = None,
    ) -> None:
        """Initialize GitHub API client.

        Args:
        ----
            access_token: GitHub personal access token, None for anonymous access
            base_url: API root, defaults to the configured GitHub API URL
            user_agent: User-Agent header, defaults to the configured tool identifier
            timeout: Per-request timeout in seconds, None for no timeout

        """
        settings = get_settings()
        self.access_token = access_token
        self.base_url = (base_url or settings.github_api_base_url).rstrip("/") + "/"
        self.timeout = timeout if timeout is not None else settings.request_timeout
        self.session = requests.Session()
        self.session.headers.update(get_github_headers(access_token, user_agent))

        if not self.access_token:
            logger.info("No GitHub token provided, using unauthenticated requests")

    def _make_request(self, method: str, url: str, **kwargs: Any) -> requests.Response:  # noqa: ANN401
        """Make HTTP request.

        Args:
        ----
            method: HTTP method (GET, POST, etc.)
            url: Request URL, absolute or relative to the API root
            **kwargs: Additional request parameters

        Returns:
        -------
            requests.Response: Response object

        Raises:
        ------
            GitHubAPIError: If the response status is not 200
            requests.RequestException: If the request fails

        """
        if not url.startswith(("http://", "https://")):
            url = urljoin(self.base_url, url.lstrip("/"))

        logger.debug("Making %s request to %s", method, url)

        kwargs.setdefault("timeout", self.timeout)
        response = self.session.request(method, url, **kwargs)

        if response.status_code != 200:
            logger.debug("Request to %s returned %s %s", url, response.status_code, response.reason)
            raise GitHubAPIError(response.status_code, response.reason or "")

        return response

    def list_open_pull_requests(self, owner: str, repo: str) -> list[dict]:
        """Get the first page of open pull requests, newest first.

        Args:
        ----
            owner: Repository owner
            repo: Repository name

        Returns:
        -------
            List of pull request dictionaries

        Raises:
        ------
            GitHubAPIError: If GitHub answers with a non-200 status
            requests.RequestException: If the request fails
            ValueError: If the body is not a JSON array

        """
        url = f"/repos/{owner}/{repo}/pulls"
        params = {"state": "open", "sort": "created", "direction": "desc"}

        response = self._make_request("GET", url, params=params)
        pulls = response.json()

        if not isinstance(pulls, list):
            msg = f"Expected a JSON array, got {type(pulls).__name__}"
            raise ValueError(msg)

        return pulls
