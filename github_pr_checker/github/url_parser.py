"""Extract owner and name from GitHub repository URLs."""

import re

from github_pr_checker.models import RepositoryRef

DEFAULT_HOST = "github.com"


def _repository_pattern(host: str) -> re.Pattern:
    return re.compile(re.escape(host) + r"/([^/]+)/([^/]+)")


def parse_repository_url(url: object, host: str = DEFAULT_HOST) -> RepositoryRef | None:
    """Parse a repository URL such as ``https://github.com/octocat/Hello-World``.

    The first two path segments after ``host`` are taken as owner and name;
    anything after them is ignored.

    Args:
    ----
        url: Repository web URL
        host: Hosting provider host name

    Returns:
    -------
        RepositoryRef, or None when the URL does not name a repository

    """
    if not isinstance(url, str):
        return None

    match = _repository_pattern(host).search(url)
    if match is None:
        return None

    return RepositoryRef(owner=match.group(1), name=match.group(2))
