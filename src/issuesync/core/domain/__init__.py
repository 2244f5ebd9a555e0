"""
Domain - Items to track and the events emitted while syncing them.
"""

from .source import IssueSource, StaticIssueSource
from .events import (
    DomainEvent,
    DuplicateClosed,
    CommentAdded,
    IssueCreated,
    SourceSynced,
    EventBus,
)

__all__ = [
    "IssueSource",
    "StaticIssueSource",
    "DomainEvent",
    "DuplicateClosed",
    "CommentAdded",
    "IssueCreated",
    "SourceSynced",
    "EventBus",
]
