"""Exceptions raised by the PR checker."""


class PRCheckerError(Exception):
    """Base exception for PR checker errors."""


class ConfigNotFoundError(PRCheckerError):
    """Raised when the repositories file does not exist."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"JSON file '{path}' not found")


class ConfigParseError(PRCheckerError):
    """Raised when the repositories file is not valid or lacks 'repositories'."""


class GitHubAPIError(PRCheckerError):
    """Raised when the GitHub API answers with a non-200 status."""

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"{status_code} - {message}")
