"""Tests for the facet queries (stub provider, no network)."""

from __future__ import annotations

import httpx
import pytest
from fakes import FakeGitHub, commit, issue, repo

from ghactivity.collector import queries
from ghactivity.collector.models import Activity
from ghactivity.collector.window import DateWindow

WINDOW = DateWindow.for_day("15-03-2024")


class TestSearchFacets:
    @pytest.mark.anyio
    @pytest.mark.parametrize(
        "query_fn, expected_query, expected_sort",
        [
            (queries.issues_created, "author:alice type:issue created:2024-03-15", "created"),
            (queries.prs_reviewed, "reviewed-by:alice type:pr updated:2024-03-15", "updated"),
            (queries.prs_merged, "author:alice type:pr is:merged updated:2024-03-15", "updated"),
            (queries.comments, "commenter:alice updated:2024-03-15", "updated"),
        ],
    )
    async def test_query_string_and_sort(self, query_fn, expected_query, expected_sort):
        client = FakeGitHub()
        await query_fn(client, "alice", WINDOW)
        assert client.calls == [("search_issues", expected_query, expected_sort, "desc")]

    @pytest.mark.anyio
    async def test_maps_title_and_url_in_provider_order(self):
        client = FakeGitHub(search={"author:alice type:issue": [issue(2), issue(1)]})
        result = await queries.issues_created(client, "alice", WINDOW)
        assert result == [
            Activity("Issue 2", "https://github.com/o/r/issues/2"),
            Activity("Issue 1", "https://github.com/o/r/issues/1"),
        ]

    @pytest.mark.anyio
    async def test_missing_fields_become_empty_strings(self):
        client = FakeGitHub(search={"commenter:alice": [{"title": None}]})
        result = await queries.comments(client, "alice", WINDOW)
        assert result == [Activity("", "")]

    @pytest.mark.anyio
    async def test_empty_result(self):
        result = await queries.prs_merged(FakeGitHub(), "alice", WINDOW)
        assert result == []

    @pytest.mark.anyio
    async def test_provider_error_propagates(self):
        err = httpx.ConnectError("down")
        client = FakeGitHub(search={"reviewed-by:alice": err})
        with pytest.raises(httpx.ConnectError):
            await queries.prs_reviewed(client, "alice", WINDOW)


class TestCommitsCreated:
    @pytest.mark.anyio
    async def test_commits_across_repos_in_enumeration_order(self):
        client = FakeGitHub(
            repos=[repo("alice", "b"), repo("alice", "a")],
            commits={
                "alice/a": [commit("a1", "feat: a", "alice/a")],
                "alice/b": [commit("b1", "fix: b1", "alice/b"), commit("b2", "fix: b2", "alice/b")],
            },
        )
        result = await queries.commits_created(client, "alice", WINDOW)
        assert [a.title for a in result] == ["fix: b1", "fix: b2", "feat: a"]
        assert result[0].url == "https://github.com/alice/b/commit/b1"

    @pytest.mark.anyio
    async def test_commit_probe_uses_window_and_author(self):
        client = FakeGitHub(repos=[repo("org", "tool")])
        await queries.commits_created(client, "alice", WINDOW)
        probe = [c for c in client.calls if c[0] == "list_commits"][0]
        assert probe == ("list_commits", "org/tool", "alice", WINDOW.start, WINDOW.end)

    @pytest.mark.anyio
    async def test_full_commit_message_is_title(self):
        client = FakeGitHub(
            repos=[repo("alice", "r")],
            commits={"alice/r": [commit("s", "subject\n\nbody text", "alice/r")]},
        )
        result = await queries.commits_created(client, "alice", WINDOW)
        assert result[0].title == "subject\n\nbody text"

    @pytest.mark.anyio
    async def test_enumeration_failure_propagates(self):
        client = FakeGitHub(repos=httpx.ReadTimeout("slow"))
        with pytest.raises(httpx.ReadTimeout):
            await queries.commits_created(client, "alice", WINDOW)
        assert [c[0] for c in client.calls] == ["list_user_repositories"]
