"""Report rendering."""

from __future__ import annotations

import json

from ghactivity.collector.models import Report

INDENT = 4


def render_json(report: Report) -> str:
    """Pretty JSON with the five facet keys in their fixed order."""
    return json.dumps(report.to_dict(), indent=INDENT, ensure_ascii=False)
