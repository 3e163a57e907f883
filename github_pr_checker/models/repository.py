"""Repository data models."""

from typing import Any

from pydantic import BaseModel, ConfigDict


class RepositoryRef(BaseModel):
    """Owner and name identifying a GitHub repository."""

    model_config = ConfigDict(frozen=True)

    owner: str
    name: str

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.name}"

    def __str__(self) -> str:
        return self.full_name


class RepositoryListEntry(BaseModel):
    """One configured repository, as listed in the repositories file.

    ``url`` is required but not type-checked here; values that do not name a
    repository are skipped when the list is processed.
    """

    model_config = ConfigDict(extra="allow")

    url: Any


class RepositoryList(BaseModel):
    """Top-level structure of the repositories file."""

    repositories: list[RepositoryListEntry]
