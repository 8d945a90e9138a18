"""
GitHub Search Stream - Configuration

Pydantic Settings for all configuration via environment variables.
"""

from pydantic_settings import BaseSettings
from pydantic import Field
from typing import Optional, Literal


class GitHubSettings(BaseSettings):
    """GitHub search API configuration."""
    api_url: str = Field("https://api.github.com", alias="GITHUB_API_URL")
    token: Optional[str] = Field(None, alias="GITHUB_TOKEN")
    timeout_ms: int = Field(10000, alias="GITHUB_TIMEOUT_MS")
    per_page: int = Field(30, alias="GITHUB_PER_PAGE")

    model_config = {"env_prefix": "", "extra": "ignore"}


class PipelineSettings(BaseSettings):
    """Search pipeline configuration."""
    provider: Literal["github"] = Field("github", alias="SEARCH_PROVIDER")
    debounce_ms: int = Field(250, alias="SEARCH_DEBOUNCE_MS")

    model_config = {"env_prefix": "", "extra": "ignore"}


class CacheSettings(BaseSettings):
    """Caching configuration."""
    enabled: bool = Field(True, alias="CACHE_ENABLED")
    ttl_seconds: int = Field(300, alias="CACHE_TTL_SECONDS")
    max_entries: int = Field(1000, alias="CACHE_MAX_ENTRIES")

    model_config = {"env_prefix": "", "extra": "ignore"}


class MCPSettings(BaseSettings):
    """MCP server configuration."""
    transport: Literal["sse", "stdio"] = Field("stdio", alias="MCP_TRANSPORT")
    port: int = Field(8080, alias="MCP_PORT")
    host: str = Field("0.0.0.0", alias="MCP_HOST")

    model_config = {"env_prefix": "", "extra": "ignore"}


class LogSettings(BaseSettings):
    """Logging configuration."""
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        "INFO", alias="LOG_LEVEL"
    )

    model_config = {"env_prefix": "", "extra": "ignore"}


class Settings(BaseSettings):
    """Main settings aggregating all configuration."""
    github: GitHubSettings = Field(default_factory=GitHubSettings)
    pipeline: PipelineSettings = Field(default_factory=PipelineSettings)
    cache: CacheSettings = Field(default_factory=CacheSettings)
    mcp: MCPSettings = Field(default_factory=MCPSettings)
    log: LogSettings = Field(default_factory=LogSettings)

    model_config = {"env_prefix": "", "extra": "ignore"}


def get_settings() -> Settings:
    """Load settings from environment variables."""
    from dotenv import load_dotenv
    load_dotenv()
    return Settings()
