"""Pull Request data model."""

from typing import Any

from pydantic import BaseModel, ConfigDict


class PullRequest(BaseModel):
    """Open pull request as returned by the GitHub API."""

    model_config = ConfigDict(frozen=True)

    number: int
    title: str
    author_login: str
    created_at: str
    html_url: str

    @classmethod
    def from_github(cls, data: dict[str, Any]) -> "PullRequest":
        """Build a pull request from a GitHub API object.

        Args:
        ----
            data: Pull request dictionary from the "list pull requests" endpoint

        Returns:
        -------
            PullRequest instance

        Raises:
        ------
            pydantic.ValidationError: If a required field is missing or mistyped

        """
        user = data.get("user") or {}
        return cls(
            number=data.get("number"),
            title=data.get("title"),
            author_login=user.get("login"),
            created_at=data.get("created_at"),
            html_url=data.get("html_url"),
        )

    def is_authored_by(self, username: str) -> bool:
        """Case-insensitive comparison of the author login with ``username``."""
        return self.author_login.lower() == username.lower()
