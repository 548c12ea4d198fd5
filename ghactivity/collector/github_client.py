"""Async GitHub API client — one page per call, errors surfaced, never retried."""

from __future__ import annotations

import os
from datetime import datetime
from typing import Any

import httpx
import structlog

log = structlog.get_logger("ghactivity.github")

DEFAULT_BASE_URL = "https://api.github.com"
_API_VERSION = "2022-11-28"
_PER_PAGE = 100


class ProviderError(Exception):
    """Base class for errors raised while talking to the provider."""


class RateLimitError(ProviderError):
    """Raised when GitHub reports the rate limit is exhausted."""

    def __init__(self, url: str, reset_at: int | None = None) -> None:
        self.url = url
        self.reset_at = reset_at
        suffix = f", resets at {reset_at}" if reset_at is not None else ""
        super().__init__(f"rate limit exceeded for {url}{suffix}")


class ProviderResponseError(ProviderError):
    """Raised when a response body is not the JSON shape we expect."""


class GitHubClient:
    """Thin async wrapper around the GitHub REST API.

    One instance may be shared by any number of concurrent coroutines; the
    underlying ``httpx.AsyncClient`` handles connection pooling.
    """

    def __init__(
        self,
        token: str | None = None,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        resolved_token = token or os.environ.get("GITHUB_TOKEN")
        headers: dict[str, str] = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": _API_VERSION,
        }
        if resolved_token:
            headers["Authorization"] = f"token {resolved_token}"
        self._client = httpx.AsyncClient(
            base_url=base_url,
            headers=headers,
            timeout=timeout,
            transport=transport,
        )

    # ── lifecycle ──────────────────────────────────────────────────────────

    async def close(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> GitHubClient:
        return self

    async def __aexit__(self, *exc: object) -> None:
        await self.close()

    # ── endpoints ──────────────────────────────────────────────────────────

    async def search_issues(
        self, query: str, *, sort: str, order: str = "desc"
    ) -> list[dict[str, Any]]:
        """GET /search/issues — the ``items`` of the first page."""
        data = await self.get(
            "/search/issues",
            {"q": query, "sort": sort, "order": order, "per_page": _PER_PAGE},
        )
        items = data.get("items") if isinstance(data, dict) else None
        if not isinstance(items, list):
            raise ProviderResponseError("search response has no 'items' list")
        return items

    async def list_user_repositories(self, user: str) -> list[dict[str, Any]]:
        """GET /users/{user}/repos — first page only."""
        return await self._get_list(f"/users/{user}/repos", {"per_page": _PER_PAGE})

    async def list_commits(
        self,
        owner: str,
        repo: str,
        *,
        author: str,
        since: datetime,
        until: datetime,
    ) -> list[dict[str, Any]]:
        """GET /repos/{owner}/{repo}/commits filtered by author and time range."""
        params = {
            "author": author,
            "since": since.isoformat(),
            "until": until.isoformat(),
            "per_page": _PER_PAGE,
        }
        return await self._get_list(f"/repos/{owner}/{repo}/commits", params)

    async def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """Single GET, returns parsed JSON.

        Raises :class:`RateLimitError` when the rate limit is exhausted,
        ``httpx.HTTPStatusError`` for any other non-2xx status and
        :class:`ProviderResponseError` when the body is not JSON.
        """
        response = await self._client.get(path, params=params)
        if self._is_rate_limited(response):
            reset_at = self._parse_header_int(response.headers.get("X-RateLimit-Reset"))
            log.warning("github.rate_limited", path=path, reset_at=reset_at)
            raise RateLimitError(path, reset_at)
        response.raise_for_status()
        try:
            return response.json()
        except ValueError as exc:
            raise ProviderResponseError(f"non-JSON response from {path}") from exc

    # ── internal ───────────────────────────────────────────────────────────

    async def _get_list(self, path: str, params: dict[str, Any]) -> list[dict[str, Any]]:
        data = await self.get(path, params)
        if not isinstance(data, list):
            raise ProviderResponseError(f"expected a JSON array from {path}")
        return data

    @staticmethod
    def _is_rate_limited(response: httpx.Response) -> bool:
        """Check if a 403/429 response is due to rate limiting."""
        if response.status_code not in (403, 429):
            return False
        remaining = GitHubClient._parse_header_int(
            response.headers.get("X-RateLimit-Remaining")
        )
        if remaining is not None:
            return remaining == 0
        # Secondary (abuse) limits only send Retry-After
        return "Retry-After" in response.headers

    @staticmethod
    def _parse_header_int(value: str | None) -> int | None:
        """Safely parse an integer header value."""
        if value is None:
            return None
        try:
            return int(value)
        except (ValueError, TypeError):
            return None
