"""Tests for the GitHub adapter."""

import pytest
from unittest.mock import Mock

from issuesync.adapters.github import GitHubAdapter, GitHubApiClient
from issuesync.core.ports.config_provider import TrackerConfig
from issuesync.core.ports.issue_tracker import CommentData, IssueData


@pytest.fixture
def config():
    return TrackerConfig(token="t", owner="octo", repo="widgets")


@pytest.fixture
def client():
    return Mock()


@pytest.fixture
def adapter(config, client):
    return GitHubAdapter(config, dry_run=False, client=client)


class TestReadOperations:
    """Tests for reading issues and comments."""

    def test_name(self, adapter):
        assert adapter.name == "GitHub"

    def test_get_issue(self, adapter, client):
        client.get.return_value = {
            "number": 5,
            "title": "Flaky test X",
            "state": "open",
            "body": None,
            "labels": [{"name": "kind/flake"}],
        }

        issue = adapter.get_issue(5)

        client.get.assert_called_once_with("issues/5")
        assert issue == IssueData(
            number=5,
            title="Flaky test X",
            state="open",
            body=None,
            labels=["kind/flake"],
        )
        assert issue.is_open

    def test_get_issue_without_state(self, adapter, client):
        client.get.return_value = {"number": 5}

        issue = adapter.get_issue(5)

        assert issue.state is None
        assert not issue.is_open

    def test_list_comments(self, adapter, client):
        client.get_paginated.return_value = [
            {"id": 1, "body": "first"},
            {"id": 2, "body": None},
        ]

        comments = adapter.list_comments(5)

        client.get_paginated.assert_called_once_with("issues/5/comments")
        assert comments == [CommentData(id=1, body="first"), CommentData(id=2, body=None)]

    def test_search_issue_numbers_exact_title(self, adapter, client):
        client.search_issues.return_value = [
            {"number": 3, "title": "Flaky test X"},
            {"number": 4, "title": "Flaky test X in CI"},
            {"number": 8, "title": "Flaky test X", "pull_request": {}},
            {"number": 9, "title": "Flaky test X"},
        ]

        assert adapter.search_issue_numbers("Flaky test X") == [3, 9]
        client.search_issues.assert_called_once_with('"Flaky test X" in:title')

    def test_search_issue_numbers_reads_every_page(self, config):
        client = GitHubApiClient(token="t", owner="octo", repo="widgets", dry_run=False)
        client._session = Mock()
        first_page = Mock(status_code=200, ok=True, text="x", headers={})
        first_page.json.return_value = {"items": [
            {"number": n, "title": f"Flaky test X in suite {n}"} for n in range(100)
        ]}
        first_page.links = {"next": {"url": "https://api.github.com/search/issues?page=2"}}
        second_page = Mock(status_code=200, ok=True, text="x", headers={}, links={})
        second_page.json.return_value = {"items": [{"number": 500, "title": "Flaky test X"}]}
        client._session.request.side_effect = [first_page, second_page]
        adapter = GitHubAdapter(config, dry_run=False, client=client)

        assert adapter.search_issue_numbers("Flaky test X") == [500]
        assert client._session.request.call_count == 2


class TestWriteOperations:
    """Tests for mutations."""

    def test_add_comment(self, adapter, client):
        adapter.add_comment(5, "hello")

        client.post.assert_called_once_with("issues/5/comments", json={"body": "hello"})

    def test_close_issue_posts_message_then_closes(self, adapter, client):
        adapter.close_issue(7, "This is a duplicate of #5; closing")

        client.post.assert_called_once_with(
            "issues/7/comments", json={"body": "This is a duplicate of #5; closing"}
        )
        client.patch.assert_called_once_with("issues/7", json={"state": "closed"})

    def test_create_issue(self, adapter, client):
        client.post.return_value = {"number": 42}

        number = adapter.create_issue("Flaky test X", "body flaky-test-x-v1", ["kind/flake"])

        assert number == 42
        client.post.assert_called_once_with(
            "issues",
            json={"title": "Flaky test X", "body": "body flaky-test-x-v1", "labels": ["kind/flake"]},
        )

    def test_create_issue_without_labels(self, adapter, client):
        client.post.return_value = {"number": 1}

        adapter.create_issue("T", "B", [])

        assert "labels" not in client.post.call_args[1]["json"]


class TestDryRun:
    """Dry-run mode makes no write calls."""

    @pytest.fixture
    def dry_adapter(self, config, client):
        return GitHubAdapter(config, dry_run=True, client=client)

    def test_dry_run_flag(self, adapter, dry_adapter):
        assert dry_adapter.dry_run is True
        assert adapter.dry_run is False

    def test_writes_are_skipped(self, dry_adapter, client):
        dry_adapter.add_comment(5, "x")
        dry_adapter.close_issue(7, "dup")

        assert dry_adapter.create_issue("T", "B", []) == -1
        client.post.assert_not_called()
        client.patch.assert_not_called()

    def test_reads_still_happen(self, dry_adapter, client):
        client.get.return_value = {"number": 5, "state": "open"}

        assert dry_adapter.get_issue(5).number == 5

    def test_created_placeholder_is_readable(self, dry_adapter, client):
        first = dry_adapter.create_issue("Flaky test X", "body flaky-test-x-v1", ["kind/flake"])
        second = dry_adapter.create_issue("Flaky test Y", "body flaky-test-y-v1", [])

        issue = dry_adapter.get_issue(first)

        assert (first, second) == (-1, -2)
        assert issue.is_open
        assert issue.title == "Flaky test X"
        assert issue.body == "body flaky-test-x-v1"
        assert issue.labels == ["kind/flake"]
        assert dry_adapter.list_comments(first) == []
        client.get.assert_not_called()
        client.get_paginated.assert_not_called()

    def test_placeholder_records_comments_and_close(self, dry_adapter):
        number = dry_adapter.create_issue("Flaky test X", "B", [])

        dry_adapter.add_comment(number, "flaky-test-x-v2")
        dry_adapter.close_issue(number, "This is a duplicate of #5; closing")

        assert dry_adapter.list_comments(number) == [CommentData(body="flaky-test-x-v2")]
        assert not dry_adapter.get_issue(number).is_open
