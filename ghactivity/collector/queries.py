"""The five facet queries — one provider query each, no error handling.

Every query has the signature ``(client, user, window) -> list[Activity]``
and lets provider errors propagate; the aggregator turns them into soft
per-facet failures.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any

from ghactivity.collector.github_client import GitHubClient
from ghactivity.collector.models import Activity
from ghactivity.collector.repositories import list_repositories, probe_repositories
from ghactivity.collector.window import DateWindow

ActivityQuery = Callable[[GitHubClient, str, DateWindow], Awaitable[list[Activity]]]


async def issues_created(client: GitHubClient, user: str, window: DateWindow) -> list[Activity]:
    """Issues authored by *user*, created on the day."""
    query = f"author:{user} type:issue created:{window.search_date}"
    return await _search(client, query, sort="created")


async def prs_reviewed(client: GitHubClient, user: str, window: DateWindow) -> list[Activity]:
    """PRs *user* reviewed, last updated on the day.

    ``updated:`` is GitHub's update timestamp, not the review time, so a
    PR reviewed earlier but touched on the day also shows up.
    """
    query = f"reviewed-by:{user} type:pr updated:{window.search_date}"
    return await _search(client, query, sort="updated")


async def prs_merged(client: GitHubClient, user: str, window: DateWindow) -> list[Activity]:
    """Merged PRs authored by *user*, last updated on the day."""
    query = f"author:{user} type:pr is:merged updated:{window.search_date}"
    return await _search(client, query, sort="updated")


async def comments(client: GitHubClient, user: str, window: DateWindow) -> list[Activity]:
    """Issues and PRs *user* commented on, last updated on the day."""
    query = f"commenter:{user} updated:{window.search_date}"
    return await _search(client, query, sort="updated")


async def commits_created(client: GitHubClient, user: str, window: DateWindow) -> list[Activity]:
    """Commits authored by *user* inside the window, across the user's repos."""
    repos = await list_repositories(client, user)
    return await probe_repositories(client, repos, author=user, window=window)


# ── helpers ───────────────────────────────────────────────────────────────


async def _search(client: GitHubClient, query: str, *, sort: str) -> list[Activity]:
    items = await client.search_issues(query, sort=sort, order="desc")
    return [_issue_activity(item) for item in items]


def _issue_activity(item: dict[str, Any]) -> Activity:
    return Activity(title=item.get("title") or "", url=item.get("html_url") or "")
