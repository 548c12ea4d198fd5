"""Aggregator — runs every facet query concurrently and builds the Report."""

from __future__ import annotations

import asyncio
import re
import time

import structlog

from ghactivity.collector import queries
from ghactivity.collector.github_client import GitHubClient
from ghactivity.collector.models import FacetResult, Report
from ghactivity.collector.queries import ActivityQuery
from ghactivity.collector.window import DateWindow
from ghactivity.exceptions import InvalidLogin

log = structlog.get_logger("ghactivity.collector")

# Registry order is irrelevant to the output; Report fixes the key order.
FACETS: tuple[tuple[str, ActivityQuery], ...] = (
    ("issues_created", queries.issues_created),
    ("prs_reviewed", queries.prs_reviewed),
    ("prs_merged", queries.prs_merged),
    ("commits_created", queries.commits_created),
    ("comments", queries.comments),
)

# GitHub logins: ASCII alphanumerics and hyphens, at most 39 chars.
_LOGIN_RE = re.compile(r"[A-Za-z0-9](?:[A-Za-z0-9-]{0,38})", re.ASCII)


def check_login(user: str) -> str:
    """Return *user* unchanged, or raise :class:`InvalidLogin`.

    The login is spliced into search qualifiers and URL paths, so anything
    outside the GitHub login alphabet is rejected.
    """
    if not isinstance(user, str) or not _LOGIN_RE.fullmatch(user):
        raise InvalidLogin(str(user))
    return user


class Aggregator:
    """Fan out the facet queries for one user and day, join them all."""

    def __init__(
        self,
        client: GitHubClient,
        facets: tuple[tuple[str, ActivityQuery], ...] = FACETS,
    ) -> None:
        self._client = client
        self._facets = facets

    async def fetch(self, user: str, date: str) -> Report:
        """Return the report for *user* on *date* (``DD-MM-YYYY``).

        Raises :class:`~ghactivity.exceptions.InvalidDateFormat` before any
        network call when the date is bad, and :class:`~ghactivity.exceptions.InvalidLogin`
        when the user is not a GitHub login; every other failure leaves its
        facet empty.
        """
        report, _detail = await self.collect(user, date)
        return report

    async def collect(self, user: str, date: str) -> tuple[Report, dict[str, str]]:
        """Like :meth:`fetch`, plus a ``{facet: "ok" | error}`` detail map."""
        window = DateWindow.for_day(date)
        check_login(user)
        started = time.perf_counter()

        results = await asyncio.gather(
            *(self._run_facet(name, query, user, window) for name, query in self._facets)
        )

        detail = {r.name: "ok" if r.ok else r.error for r in results}
        log.info(
            "aggregator.done",
            user=user,
            date=window.search_date,
            counts={r.name: len(r.activities) for r in results},
            failed=[r.name for r in results if not r.ok],
            duration_ms=round((time.perf_counter() - started) * 1000, 1),
        )
        return Report.from_results(results), detail

    async def _run_facet(
        self,
        name: str,
        query: ActivityQuery,
        user: str,
        window: DateWindow,
    ) -> FacetResult:
        """Run one query, converting any exception into a soft failure."""
        try:
            activities = await query(self._client, user, window)
        except Exception as exc:
            err_msg = f"{type(exc).__name__}: {exc}"
            log.error("aggregator.facet_failed", facet=name, user=user, error=err_msg)
            return FacetResult(name=name, error=err_msg)
        return FacetResult(name=name, activities=tuple(activities))
