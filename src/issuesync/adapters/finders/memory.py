"""
In-Memory Issue Finder - Title to issue number index held in a dict.
"""

from typing import Iterable, Optional

from ...core.ports.issue_finder import IssueFinderPort


class InMemoryIssueFinder(IssueFinderPort):
    """
    Keeps issue numbers per title in insertion order.

    Useful when the caller already knows the existing issues (for
    example from a cache it maintains) and for tests.
    """

    def __init__(self, issues: Optional[dict[str, Iterable[int]]] = None):
        self._issues: dict[str, list[int]] = {}
        for key, numbers in (issues or {}).items():
            for number in numbers:
                self.created(key, number)

    def all_issues_for_key(self, key: str) -> list[int]:
        return list(self._issues.get(key, []))

    def created(self, key: str, number: int) -> None:
        numbers = self._issues.setdefault(key, [])
        if number not in numbers:
            numbers.append(number)

    def __len__(self) -> int:
        return len(self._issues)
