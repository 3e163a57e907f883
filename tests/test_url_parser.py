"""Unit tests for repository URL parsing."""

import pytest

from github_pr_checker.github.url_parser import parse_repository_url
from github_pr_checker.models import RepositoryRef


class TestParseRepositoryURL:
    """Test parse_repository_url."""

    @pytest.mark.parametrize(
        ("url", "owner", "name"),
        [
            ("https://github.com/octocat/Hello-World", "octocat", "Hello-World"),
            ("http://github.com/octocat/Hello-World", "octocat", "Hello-World"),
            ("github.com/octocat/Hello-World", "octocat", "Hello-World"),
            ("https://github.com/octocat/Hello-World/", "octocat", "Hello-World"),
            ("https://github.com/octocat/Hello-World/pulls/42", "octocat", "Hello-World"),
            ("https://github.com/my.org/repo.name", "my.org", "repo.name"),
        ],
    )
    def test_extracts_owner_and_name(self, url: str, owner: str, name: str) -> None:
        """Test owner and name are the first two path segments after the host."""
        assert parse_repository_url(url) == RepositoryRef(owner=owner, name=name)

    def test_git_suffix_is_kept(self) -> None:
        """Test no normalization is applied to the name segment."""
        ref = parse_repository_url("https://github.com/octocat/Hello-World.git")
        assert ref.name == "Hello-World.git"

    @pytest.mark.parametrize(
        "url",
        [
            "",
            "not a url",
            "https://gitlab.com/octocat/Hello-World",
            "https://github.com/octocat",
            "https://github.com/octocat/",
            "https://github.com//Hello-World",
        ],
    )
    def test_returns_none_when_no_match(self, url: str) -> None:
        """Test URLs without a github.com/owner/name pattern yield None."""
        assert parse_repository_url(url) is None

    @pytest.mark.parametrize("url", [None, 42, {"url": "https://github.com/a/b"}])
    def test_non_string_input(self, url: object) -> None:
        """Test non-string values yield None instead of raising."""
        assert parse_repository_url(url) is None

    def test_custom_host(self) -> None:
        """Test a GitHub Enterprise host can be matched."""
        ref = parse_repository_url("https://git.example.com/team/service", host="git.example.com")
        assert ref == RepositoryRef(owner="team", name="service")
        assert parse_repository_url("https://github.com/team/service", host="git.example.com") is None

    def test_full_name(self) -> None:
        """Test the owner/name rendering."""
        ref = parse_repository_url("https://github.com/octocat/Hello-World")
        assert ref.full_name == "octocat/Hello-World"
        assert str(ref) == "octocat/Hello-World"
