"""Per-repository fetch outcome."""

from pydantic import BaseModel, Field

from .pull_request import PullRequest
from .repository import RepositoryRef


class FetchResult(BaseModel):
    """Filtered pull requests for one repository, or the reason there are none."""

    repository: RepositoryRef
    pull_requests: list[PullRequest] = Field(default_factory=list)
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def count(self) -> int:
        return len(self.pull_requests)

    @classmethod
    def failure(cls, repository: RepositoryRef, error: str) -> "FetchResult":
        return cls(repository=repository, error=error)
