"""
Sync Runner - Drives the IssueSyncer over a batch of items.

This is the main entry point for sync operations.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Iterable, Optional

from ...core.domain.events import EventBus, DuplicateClosed, IssueCreated
from ...core.domain.source import IssueSource
from ...core.exceptions import SyncError
from .syncer import IssueSyncer, SyncOutcome


@dataclass
class SyncResult:
    """Result of a sync run."""

    success: bool = True
    dry_run: bool = True

    # Counts
    items_total: int = 0
    items_synced: int = 0
    items_skipped: int = 0
    items_recorded: int = 0
    comments_added: int = 0
    issues_created: int = 0
    duplicates_closed: int = 0

    # Details
    created_issues: list[tuple[str, Optional[int]]] = field(default_factory=list)  # (source_id, number)
    errors: list[str] = field(default_factory=list)

    def add_error(self, error: str) -> None:
        """Add an error message."""
        self.errors.append(error)
        self.success = False


class SyncRunner:
    """
    Syncs many items, one after the other.

    A tracker failure for one item is recorded and the run moves on to
    the next item. SourceContractError is not caught.
    """

    def __init__(
        self,
        syncer: IssueSyncer,
        dry_run: bool = True,
    ):
        self.syncer = syncer
        self.dry_run = dry_run
        self.logger = logging.getLogger("SyncRunner")

        if self.syncer.event_bus is None:
            self.syncer.event_bus = EventBus()
        self.event_bus = self.syncer.event_bus

    def run(
        self,
        sources: Iterable[IssueSource],
        progress_callback: Optional[Callable[[str, int, int], None]] = None,
    ) -> SyncResult:
        """
        Sync every item.

        Args:
            sources: Items to sync
            progress_callback: Optional callback (title, current, total)

        Returns:
            SyncResult with counts and errors
        """
        items = list(sources)
        result = SyncResult(dry_run=self.dry_run, items_total=len(items))

        def count_duplicate(event: DuplicateClosed) -> None:
            result.duplicates_closed += 1

        def record_created(event: IssueCreated) -> None:
            result.created_issues.append((event.source_id, event.issue_number))

        self.event_bus.subscribe(DuplicateClosed, count_duplicate)
        self.event_bus.subscribe(IssueCreated, record_created)
        try:
            for index, source in enumerate(items, start=1):
                if progress_callback:
                    progress_callback(source.title(), index, len(items))
                self._sync_one(source, result)
        finally:
            self.event_bus.unsubscribe(DuplicateClosed, count_duplicate)
            self.event_bus.unsubscribe(IssueCreated, record_created)

        if self.dry_run:
            self.logger.info(
                f"[DRY-RUN] Would sync {result.items_synced}/{result.items_total} items "
                f"({result.issues_created} to create, {result.comments_added} to comment, "
                f"{result.duplicates_closed} duplicates to close, {len(result.errors)} errors)"
            )
        else:
            self.logger.info(
                f"Synced {result.items_synced}/{result.items_total} items "
                f"({result.issues_created} created, {result.comments_added} commented, "
                f"{result.duplicates_closed} duplicates closed, {len(result.errors)} errors)"
            )
        return result

    def _sync_one(self, source: IssueSource, result: SyncResult) -> None:
        try:
            outcome = self.syncer.sync(source)
        except SyncError as e:
            self.logger.error(f"Sync failed for {source.id()}: {e}")
            result.add_error(str(e))
            return

        if outcome is SyncOutcome.ALREADY_SYNCED:
            result.items_skipped += 1
            return

        result.items_synced += 1
        if outcome is SyncOutcome.RECORDED:
            result.items_recorded += 1
        elif outcome is SyncOutcome.COMMENTED:
            result.comments_added += 1
        elif outcome is SyncOutcome.CREATED:
            result.issues_created += 1
