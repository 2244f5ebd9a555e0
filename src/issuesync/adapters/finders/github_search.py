"""
GitHub Title Finder - Looks up candidate issues with the search API.
"""

import logging

from ...core.ports.issue_finder import IssueFinderPort
from ..github.adapter import GitHubAdapter
from .memory import InMemoryIssueFinder


class GitHubTitleFinder(IssueFinderPort):
    """
    Finds issues on GitHub whose title equals the key.

    The search index lags behind issue creation, so issues created by
    this process are remembered locally and merged into the results.
    """

    def __init__(self, adapter: GitHubAdapter):
        self.adapter = adapter
        self._created = InMemoryIssueFinder()
        self.logger = logging.getLogger("GitHubTitleFinder")

    def all_issues_for_key(self, key: str) -> list[int]:
        numbers = self.adapter.search_issue_numbers(key)
        for number in self._created.all_issues_for_key(key):
            if number not in numbers:
                numbers.append(number)
        self.logger.debug(f"Found {len(numbers)} issue(s) titled '{key}'")
        return numbers

    def created(self, key: str, number: int) -> None:
        self._created.created(key, number)
