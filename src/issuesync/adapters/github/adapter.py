"""
GitHub Adapter - Implements IssueTrackerPort for GitHub Issues.

This is the main entry point for GitHub integration.
"""

import logging
from dataclasses import replace
from typing import Any, Optional

from ...core.ports.issue_tracker import (
    IssueTrackerPort,
    IssueData,
    CommentData,
)
from ...core.ports.config_provider import TrackerConfig
from .client import GitHubApiClient


class GitHubAdapter(IssueTrackerPort):
    """
    GitHub implementation of the IssueTrackerPort.

    Translates between domain data and GitHub's API.

    In dry-run mode, issues that would be created are kept in memory
    under negative placeholder numbers, so later reads in the same run
    see them the way they would see a real issue.
    """

    def __init__(
        self,
        config: TrackerConfig,
        dry_run: bool = True,
        client: Optional[GitHubApiClient] = None,
    ):
        """
        Initialize the GitHub adapter.

        Args:
            config: Tracker configuration
            dry_run: If True, don't make changes
            client: Optional preconfigured API client
        """
        self.config = config
        self._dry_run = dry_run
        self.logger = logging.getLogger("GitHubAdapter")

        self._client = client or GitHubApiClient(
            token=config.token,
            owner=config.owner,
            repo=config.repo,
            api_url=config.api_url,
            dry_run=dry_run,
            timeout=config.timeout,
        )

        self._simulated: dict[int, IssueData] = {}
        self._simulated_comments: dict[int, list[CommentData]] = {}

    @property
    def name(self) -> str:
        return "GitHub"

    @property
    def dry_run(self) -> bool:
        return self._dry_run

    # -------------------------------------------------------------------------
    # IssueTrackerPort Implementation - Read Operations
    # -------------------------------------------------------------------------

    def get_issue(self, number: int) -> IssueData:
        if number in self._simulated:
            return self._simulated[number]

        data = self._client.get(f"issues/{number}")
        return self._parse_issue(data)

    def list_comments(self, number: int) -> list[CommentData]:
        if number in self._simulated:
            return list(self._simulated_comments[number])

        data = self._client.get_paginated(f"issues/{number}/comments")
        return [
            CommentData(id=comment.get("id"), body=comment.get("body"))
            for comment in data
        ]

    def search_issue_numbers(self, title: str) -> list[int]:
        """
        Find issues whose title is exactly the given title.

        Search matches words, not whole titles, so results are filtered
        again locally. Pull requests are skipped.
        """
        quoted = title.replace('"', "")
        items = self._client.search_issues(f'"{quoted}" in:title')
        return [
            item["number"]
            for item in items
            if item.get("title") == title and "pull_request" not in item
        ]

    # -------------------------------------------------------------------------
    # IssueTrackerPort Implementation - Write Operations
    # -------------------------------------------------------------------------

    def add_comment(self, number: int, body: str) -> None:
        if self._dry_run:
            self.logger.info(f"[DRY-RUN] Would add comment to #{number}")
            if number in self._simulated:
                self._simulated_comments[number].append(CommentData(body=body))
            return

        self._client.post(f"issues/{number}/comments", json={"body": body})
        self.logger.info(f"Added comment to #{number}")

    def close_issue(self, number: int, message: str) -> None:
        if self._dry_run:
            self.logger.info(f"[DRY-RUN] Would close #{number}: {message}")
            if number in self._simulated:
                self._simulated[number] = replace(self._simulated[number], state="closed")
            return

        self._client.post(f"issues/{number}/comments", json={"body": message})
        self._client.patch(f"issues/{number}", json={"state": "closed"})
        self.logger.info(f"Closed #{number}")

    def create_issue(
        self,
        title: str,
        body: str,
        labels: list[str],
    ) -> Optional[int]:
        if self._dry_run:
            number = -(len(self._simulated) + 1)
            self._simulated[number] = IssueData(
                number=number,
                title=title,
                state="open",
                body=body,
                labels=list(labels),
            )
            self._simulated_comments[number] = []
            self.logger.info(
                f"[DRY-RUN] Would create issue '{title[:50]}' with labels {labels} "
                f"(placeholder #{number})"
            )
            return number

        payload: dict[str, Any] = {"title": title, "body": body}
        if labels:
            payload["labels"] = list(labels)

        result = self._client.post("issues", json=payload)
        number = result.get("number")

        if number is not None:
            self.logger.info(f"Created issue #{number} '{title}'")

        return number

    # -------------------------------------------------------------------------
    # Private Methods
    # -------------------------------------------------------------------------

    def _parse_issue(self, data: dict) -> IssueData:
        """Parse GitHub API response into IssueData."""
        return IssueData(
            number=data["number"],
            title=data.get("title") or "",
            state=data.get("state"),
            body=data.get("body"),
            labels=[label["name"] for label in data.get("labels", []) if isinstance(label, dict)],
        )
