"""Test configuration and fixtures."""

import json
import os
from collections.abc import Callable
from pathlib import Path

import pytest

# Set environment variables immediately when this module is imported
# This ensures they're available before any other modules try to load Settings
test_env_vars = {
    "GITHUB_API_BASE_URL": "https://api.github.com",
    "GITHUB_HOST": "github.com",
    "GITHUB_USER_AGENT": "GitHub-PR-Checker",
    "REPOSITORIES_FILE": "my-github-repos.json",
    "LOG_LEVEL": "DEBUG",
}

for key, value in test_env_vars.items():
    os.environ[key] = value

# Tests decide explicitly whether a token is used
os.environ.pop("GITHUB_TOKEN", None)
os.environ.pop("REQUEST_TIMEOUT", None)


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment() -> None:
    """Set up test environment variables."""
    yield

    for key in test_env_vars:
        os.environ.pop(key, None)


@pytest.fixture
def make_pull_request() -> Callable[..., dict]:
    """Build a pull request object shaped like the GitHub API response."""

    def _make(number: int, title: str, login: str, repo: str = "user/repo") -> dict:
        return {
            "id": number * 1000,
            "number": number,
            "title": title,
            "state": "open",
            "user": {"login": login},
            "created_at": "2024-01-15T10:30:00Z",
            "html_url": f"https://github.com/{repo}/pull/{number}",
        }

    return _make


@pytest.fixture
def write_repositories_file(tmp_path: Path) -> Callable[..., Path]:
    """Write a repositories JSON file and return its path."""

    def _write(urls: list[str], name: str = "repos.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps({"repositories": [{"url": url} for url in urls]}), encoding="utf-8")
        return path

    return _write
