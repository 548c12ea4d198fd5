"""Dependency injection — settings, the shared GitHub client, the aggregator."""

from __future__ import annotations

from fastapi import Depends

from ghactivity.collector.aggregator import Aggregator
from ghactivity.collector.github_client import GitHubClient
from ghactivity.core.config import Settings

# ---------------------------------------------------------------------------
# Client (initialised by app lifespan)
# ---------------------------------------------------------------------------
_settings: Settings | None = None
_github_client: GitHubClient | None = None


def init_github_client(settings: Settings) -> GitHubClient:
    """Create the shared GitHub client. Called once at startup."""
    global _settings, _github_client  # noqa: PLW0603
    _settings = settings
    _github_client = GitHubClient(
        settings.github_token,
        base_url=settings.api_url,
        timeout=settings.http_timeout,
    )
    return _github_client


async def close_github_client() -> None:
    """Close the shared client and its connection pool."""
    global _github_client  # noqa: PLW0603
    if _github_client is not None:
        await _github_client.close()
        _github_client = None


# ---------------------------------------------------------------------------
# Getters (for Depends())
# ---------------------------------------------------------------------------


def get_settings() -> Settings:
    if _settings is None:
        return Settings.from_env()
    return _settings


def get_github_client() -> GitHubClient:
    if _github_client is None:
        raise RuntimeError("call init_github_client() before handling requests")
    return _github_client


def get_aggregator(client: GitHubClient = Depends(get_github_client)) -> Aggregator:
    return Aggregator(client)
