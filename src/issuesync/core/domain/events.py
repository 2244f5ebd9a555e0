"""
Domain Events - Things that happened in the domain.

Events are immutable records of something that occurred.
They enable loose coupling and audit trails.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Optional
from uuid import uuid4


@dataclass(frozen=True)
class DomainEvent:
    """Base class for all domain events."""

    event_id: str = field(default_factory=lambda: str(uuid4()))
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def event_type(self) -> str:
        """Get the event type name."""
        return self.__class__.__name__


@dataclass(frozen=True)
class DuplicateClosed(DomainEvent):
    """Event: An open duplicate issue was closed."""

    issue_number: int = 0
    duplicate_of: int = 0
    title: str = ""


@dataclass(frozen=True)
class CommentAdded(DomainEvent):
    """Event: An item was appended to an existing issue as a comment."""

    issue_number: int = 0
    source_id: str = ""


@dataclass(frozen=True)
class IssueCreated(DomainEvent):
    """Event: A new tracking issue was filed."""

    issue_number: Optional[int] = None
    title: str = ""
    source_id: str = ""
    labels: tuple = ()


@dataclass(frozen=True)
class SourceSynced(DomainEvent):
    """Event: An item is now represented on the tracker."""

    source_id: str = ""
    outcome: str = ""  # recorded, commented, created


class EventBus:
    """
    Simple event bus for publishing and subscribing to domain events.

    This enables loose coupling between components.
    """

    def __init__(self):
        self._handlers: dict[type, list] = {}
        self._history: list[DomainEvent] = []

    def subscribe(self, event_type: type, handler: Callable[[DomainEvent], None]) -> None:
        """Subscribe a handler to an event type."""
        if event_type not in self._handlers:
            self._handlers[event_type] = []
        self._handlers[event_type].append(handler)

    def unsubscribe(self, event_type: type, handler: Callable[[DomainEvent], None]) -> bool:
        """Remove a handler. Returns False if it was not subscribed."""
        handlers = self._handlers.get(event_type, [])
        if handler not in handlers:
            return False
        handlers.remove(handler)
        return True

    def publish(self, event: DomainEvent) -> None:
        """Publish an event to all subscribers."""
        self._history.append(event)

        for handler in self._handlers.get(type(event), []):
            handler(event)

        # Catch-all handlers
        for handler in self._handlers.get(DomainEvent, []):
            handler(event)

    def get_history(self) -> list[DomainEvent]:
        """Get all published events."""
        return self._history.copy()

    def clear_history(self) -> None:
        """Clear event history."""
        self._history.clear()
