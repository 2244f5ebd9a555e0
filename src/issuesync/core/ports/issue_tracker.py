"""
Issue Tracker Port - Abstract interface for issue trackers.

Implementations:
- GitHubAdapter: GitHub Issues REST API
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional

from ..exceptions import (
    IssueTrackerError,
    AuthenticationError,
    NotFoundError,
    PermissionError,
    RateLimitError,
)


OPEN_STATE = "open"


@dataclass(frozen=True)
class IssueData:
    """Read-only snapshot of a tracking issue."""

    number: int
    title: str = ""
    state: Optional[str] = None
    body: Optional[str] = None
    labels: list[str] = field(default_factory=list)

    @property
    def is_open(self) -> bool:
        # A missing state is not open.
        return self.state is not None and self.state == OPEN_STATE


@dataclass(frozen=True)
class CommentData:
    """A single comment on a tracking issue."""

    id: Optional[int] = None
    body: Optional[str] = None


class IssueTrackerPort(ABC):
    """
    Abstract interface for issue tracker operations.

    The syncer never mutates issues directly; everything goes through
    these calls. Every method raises IssueTrackerError on failure.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Get the tracker name (e.g., 'GitHub')."""
        ...

    @property
    def dry_run(self) -> bool:
        """True when write operations are only logged, not performed."""
        return False

    # -------------------------------------------------------------------------
    # Read Operations
    # -------------------------------------------------------------------------

    @abstractmethod
    def get_issue(self, number: int) -> IssueData:
        """Fetch a single issue by number."""
        ...

    @abstractmethod
    def list_comments(self, number: int) -> list[CommentData]:
        """List all comments of an issue, oldest first."""
        ...

    # -------------------------------------------------------------------------
    # Write Operations
    # -------------------------------------------------------------------------

    @abstractmethod
    def add_comment(self, number: int, body: str) -> None:
        """Append a comment to an issue."""
        ...

    @abstractmethod
    def close_issue(self, number: int, message: str) -> None:
        """Post message as a comment, then close the issue."""
        ...

    @abstractmethod
    def create_issue(
        self,
        title: str,
        body: str,
        labels: list[str],
    ) -> Optional[int]:
        """
        File a new issue.

        Returns:
            The new issue number (a placeholder in dry-run), or None when
            the tracker cannot report one
        """
        ...


__all__ = [
    "OPEN_STATE",
    "IssueData",
    "CommentData",
    "IssueTrackerPort",
    "IssueTrackerError",
    "AuthenticationError",
    "NotFoundError",
    "PermissionError",
    "RateLimitError",
]
