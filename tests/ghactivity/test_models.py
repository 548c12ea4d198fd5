"""Tests for Report assembly and JSON rendering."""

from __future__ import annotations

import json

import pytest

from ghactivity.collector.models import Activity, FacetResult, Report, report_fields
from ghactivity.render import render_json

FIELDS = ["issues_created", "prs_reviewed", "prs_merged", "commits_created", "comments"]


class TestReport:
    def test_field_order(self):
        assert report_fields() == FIELDS

    def test_defaults_are_empty(self):
        report = Report()
        for name in FIELDS:
            assert getattr(report, name) == ()

    def test_from_results_maps_by_name(self):
        a = Activity("t", "u")
        report = Report.from_results(
            [
                FacetResult("comments", (a, a)),
                FacetResult("issues_created", (a,)),
            ]
        )
        assert report.comments == (a, a)  # duplicates kept
        assert report.issues_created == (a,)
        assert report.prs_merged == ()

    def test_failed_facet_is_empty(self):
        report = Report.from_results(
            [FacetResult("prs_reviewed", (Activity("t", "u"),), error="boom")]
        )
        assert report.prs_reviewed == ()

    def test_frozen(self):
        with pytest.raises(AttributeError):
            Report().comments = ()  # type: ignore[misc]

    def test_facet_result_ok(self):
        assert FacetResult("comments").ok
        assert not FacetResult("comments", error="HTTPStatusError: 500").ok


class TestRenderJson:
    def test_keys_in_fixed_order(self):
        data = json.loads(render_json(Report()))
        assert list(data) == FIELDS
        assert all(v == [] for v in data.values())

    def test_activity_shape(self):
        report = Report(commits_created=(Activity("fix: typo", "https://x/c/1"),))
        data = json.loads(render_json(report))
        assert data["commits_created"] == [{"title": "fix: typo", "url": "https://x/c/1"}]

    def test_four_space_indent(self):
        text = render_json(Report())
        assert text.splitlines()[1] == '    "issues_created": [],'

    def test_non_ascii_kept(self):
        report = Report(comments=(Activity("Überarbeitung", "u"),))
        assert "Überarbeitung" in render_json(report)
