"""Repository enumeration and per-repository commit probing."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass

import structlog

from ghactivity.collector.github_client import GitHubClient
from ghactivity.collector.models import Activity
from ghactivity.collector.window import DateWindow

log = structlog.get_logger("ghactivity.collector")

_MAX_REPO_CONCURRENCY = 5


@dataclass(frozen=True)
class RepoRef:
    owner: str
    name: str

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.name}"


async def list_repositories(client: GitHubClient, user: str) -> list[RepoRef]:
    """List the repositories associated with *user*, in provider order.

    Errors propagate: a failed enumeration fails the whole commits facet.
    Entries without an owner login or a name are dropped.
    """
    repos: list[RepoRef] = []
    for item in await client.list_user_repositories(user):
        owner = (item.get("owner") or {}).get("login")
        name = item.get("name")
        if not owner or not name:
            log.debug("commits.repo_malformed", user=user, item_id=item.get("id"))
            continue
        repos.append(RepoRef(owner=owner, name=name))
    return repos


async def probe_repositories(
    client: GitHubClient,
    repos: list[RepoRef],
    *,
    author: str,
    window: DateWindow,
) -> list[Activity]:
    """Collect *author*'s commits inside *window* from every repository.

    A repository whose commit listing fails is logged and skipped; the
    others still count.  Output keeps enumeration order, and provider
    order within each repository.
    """
    sem = asyncio.Semaphore(_MAX_REPO_CONCURRENCY)

    async def _probe_one(repo: RepoRef) -> list[Activity]:
        async with sem:
            items = await client.list_commits(
                repo.owner,
                repo.name,
                author=author,
                since=window.start,
                until=window.end,
            )
        return [_commit_activity(item) for item in items]

    results = await asyncio.gather(*(_probe_one(r) for r in repos), return_exceptions=True)

    activities: list[Activity] = []
    for repo, result in zip(repos, results):
        if isinstance(result, BaseException):
            if not isinstance(result, Exception):
                raise result
            log.warning(
                "commits.repo_skipped",
                repo=repo.full_name,
                error=f"{type(result).__name__}: {result}",
            )
            continue
        activities.extend(result)
    return activities


def _commit_activity(item: dict) -> Activity:
    commit = item.get("commit") or {}
    return Activity(title=commit.get("message") or "", url=item.get("html_url") or "")
