"""
Issue Finder Port - Maps an item title to candidate issue numbers.

The finder only proposes candidates. Whether an issue really covers an
item is decided by re-reading the issue from the tracker.
"""

from abc import ABC, abstractmethod


class IssueFinderPort(ABC):
    """Looks up issues previously filed under a title."""

    @abstractmethod
    def all_issues_for_key(self, key: str) -> list[int]:
        """
        Get all issue numbers associated with a key.

        The order matters: when several of them are open, the first one
        is kept and the others are closed as duplicates.
        """
        ...

    @abstractmethod
    def created(self, key: str, number: int) -> None:
        """Record a newly created issue so later lookups find it."""
        ...
