"""GitHub API access and repository URL handling."""

from .client import GitHubAPIClient
from .url_parser import parse_repository_url

__all__ = ["GitHubAPIClient", "parse_repository_url"]
