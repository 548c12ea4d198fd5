"""Data models for the activity collector."""

from __future__ import annotations

from dataclasses import dataclass, fields


@dataclass(frozen=True)
class Activity:
    """One unit of GitHub activity reduced to a title and a link.

    This is a pure data structure — no provider dependencies.
    """

    title: str
    url: str


ActivityList = tuple[Activity, ...]


@dataclass(frozen=True)
class FacetResult:
    """Outcome of one facet query; ``error`` is None on success."""

    name: str
    activities: ActivityList = ()
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class Report:
    """Everything a user did on one day, one list per facet.

    Field order is the rendered key order.
    """

    issues_created: ActivityList = ()
    prs_reviewed: ActivityList = ()
    prs_merged: ActivityList = ()
    commits_created: ActivityList = ()
    comments: ActivityList = ()

    @classmethod
    def from_results(cls, results: list[FacetResult]) -> Report:
        """Assemble a report, leaving failed facets empty."""
        by_name = {r.name: r.activities for r in results if r.ok}
        return cls(**{name: by_name.get(name, ()) for name in report_fields()})

    def to_dict(self) -> dict[str, list[dict[str, str]]]:
        return {
            name: [{"title": a.title, "url": a.url} for a in getattr(self, name)]
            for name in report_fields()
        }


def report_fields() -> list[str]:
    """Report field names in their fixed order."""
    return [f.name for f in fields(Report)]
