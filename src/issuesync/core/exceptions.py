"""
Exceptions - Centralized exception hierarchy.

Recoverable failures derive from IssueSyncError. SourceContractError is
kept outside that hierarchy: it signals a broken IssueSource and must
abort the caller instead of being handled like an I/O failure.
"""

from typing import Optional


class IssueSyncError(Exception):
    """Base class for all recoverable issuesync errors."""


class IssueTrackerError(IssueSyncError):
    """Error talking to the issue tracker."""

    def __init__(
        self,
        message: str,
        issue_number: Optional[int] = None,
        cause: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.issue_number = issue_number
        self.cause = cause


class AuthenticationError(IssueTrackerError):
    """Credentials were rejected."""


class PermissionError(IssueTrackerError):
    """Authenticated, but not allowed to perform the operation."""


class NotFoundError(IssueTrackerError):
    """Issue or repository does not exist."""


class RateLimitError(IssueTrackerError):
    """API rate limit exhausted."""


class SyncError(IssueSyncError):
    """A sync call failed; the item was not marked as synced."""

    def __init__(self, message: str, source_id: str = "", cause: Optional[Exception] = None):
        super().__init__(message)
        self.source_id = source_id
        self.cause = cause


class ParserError(IssueSyncError):
    """Item file could not be parsed."""


class ConfigError(IssueSyncError):
    """Configuration is missing or invalid."""


class SourceContractError(Exception):
    """
    Programmer error: an IssueSource produced text without its own ID.

    Posting such text would make the item untraceable and every later
    sync would file another comment, so this is never retried.
    """

    def __init__(self, source_id: str, body: str):
        super().__init__(f"Programmer error: {body!r} does not contain {source_id!r}!")
        self.source_id = source_id
        self.body = body


__all__ = [
    "IssueSyncError",
    "IssueTrackerError",
    "AuthenticationError",
    "PermissionError",
    "NotFoundError",
    "RateLimitError",
    "SyncError",
    "ParserError",
    "ConfigError",
    "SourceContractError",
]
