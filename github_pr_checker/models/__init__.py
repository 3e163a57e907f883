"""Data models for the PR checker."""

from .fetch_result import FetchResult
from .pull_request import PullRequest
from .repository import RepositoryList, RepositoryListEntry, RepositoryRef

__all__ = [
    "FetchResult",
    "PullRequest",
    "RepositoryList",
    "RepositoryListEntry",
    "RepositoryRef",
]
