"""Activity collector — concurrent per-facet GitHub queries, no rendering."""

from ghactivity.collector.aggregator import FACETS, Aggregator
from ghactivity.collector.github_client import (
    GitHubClient,
    ProviderError,
    ProviderResponseError,
    RateLimitError,
)
from ghactivity.collector.models import Activity, FacetResult, Report
from ghactivity.collector.window import DateWindow

__all__ = [
    "FACETS",
    "Activity",
    "Aggregator",
    "DateWindow",
    "FacetResult",
    "GitHubClient",
    "ProviderError",
    "ProviderResponseError",
    "RateLimitError",
    "Report",
]
