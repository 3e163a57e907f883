"""
Application configuration management
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # GitHub API Configuration
    github_token: str | None = Field(None, validation_alias="GITHUB_TOKEN")
    github_api_base_url: str = Field("https://api.github.com", validation_alias="GITHUB_API_BASE_URL")
    github_host: str = Field("github.com", validation_alias="GITHUB_HOST")
    user_agent: str = Field("GitHub-PR-Checker", validation_alias="GITHUB_USER_AGENT")
    request_timeout: float | None = Field(None, validation_alias="REQUEST_TIMEOUT")

    # Input Configuration
    repositories_file: str = Field("my-github-repos.json", validation_alias="REPOSITORIES_FILE")

    # Logging Configuration
    log_level: str = Field("WARNING", validation_alias="LOG_LEVEL")
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


def get_github_headers(access_token: str | None = None, user_agent: str | None = None) -> dict:
    """Get GitHub API headers, with authentication when a token is given"""
    settings = get_settings()
    headers = {
        "Accept": "application/vnd.github.v3+json",
        "User-Agent": user_agent or settings.user_agent,
    }
    if access_token:
        headers["Authorization"] = f"token {access_token}"
    return headers
