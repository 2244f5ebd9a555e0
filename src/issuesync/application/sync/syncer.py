"""
Issue Syncer - Robust issue syncing that won't file duplicates.

For every item it:
1. Looks up the issues previously filed under the item's title
2. Closes all but the first open issue as duplicates
3. Stops if any of them already mentions the item's ID
4. Otherwise comments on the open issue, or files a new one

It is fine and cheap to call sync() repeatedly for the same item.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from ...core.domain.events import (
    EventBus,
    DuplicateClosed,
    CommentAdded,
    IssueCreated,
    SourceSynced,
)
from ...core.domain.source import IssueSource
from ...core.exceptions import IssueTrackerError, SourceContractError, SyncError
from ...core.ports.issue_finder import IssueFinderPort
from ...core.ports.issue_tracker import IssueData, IssueTrackerPort


DUPLICATE_MESSAGE = "This is a duplicate of #{number}; closing"


class SyncOutcome(Enum):
    """How a sync() call left the item."""

    ALREADY_SYNCED = "already_synced"  # seen earlier by this syncer, no I/O
    RECORDED = "recorded"  # an issue already mentions the item
    COMMENTED = "commented"
    CREATED = "created"


@dataclass
class _PreviousIssues:
    found: bool = False
    updatable: list[IssueData] = field(default_factory=list)


class IssueSyncer:
    """
    Keeps each IssueSource represented by exactly one open issue.

    The syncer remembers every ID it has synced for its own lifetime.
    It is not safe to call sync() concurrently for items sharing a
    title: two calls could both decide that no issue exists and each
    file one.
    """

    def __init__(
        self,
        tracker: IssueTrackerPort,
        finder: IssueFinderPort,
        event_bus: Optional[EventBus] = None,
    ):
        """
        Initialize the syncer.

        Args:
            tracker: Issue tracker port
            finder: Maps titles to previously filed issues
            event_bus: Optional event bus
        """
        self.tracker = tracker
        self.finder = finder
        self.event_bus = event_bus
        self.logger = logging.getLogger("IssueSyncer")

        self._synced: set[str] = set()

    def is_synced(self, source_id: str) -> bool:
        """Check whether an ID was already synced by this instance."""
        return source_id in self._synced

    def sync(self, source: IssueSource) -> SyncOutcome:
        """
        Sync one item to the tracker.

        Raises:
            SyncError: A tracker call failed; nothing is remembered, so
                calling again redoes the work.
            SourceContractError: The item's text does not contain its ID.
        """
        source_id = source.id()
        if source_id in self._synced:
            return SyncOutcome.ALREADY_SYNCED

        previous = self._find_previous_issues(source)

        # Close dups if there are multiple open issues
        if len(previous.updatable) > 1:
            survivor = previous.updatable[0]
            self._mark_as_dups(source, previous.updatable[1:], survivor.number)

        if previous.found:
            # Only here to close the dups.
            return self._mark_synced(source_id, SyncOutcome.RECORDED)

        if previous.updatable:
            issue = previous.updatable[0]
            try:
                self._update_issue(issue, source)
            except IssueTrackerError as e:
                raise SyncError(
                    f"error updating issue {issue.number} for {source_id}: {e}",
                    source_id=source_id,
                    cause=e,
                ) from e
            return self._mark_synced(source_id, SyncOutcome.COMMENTED)

        try:
            number = self._create_issue(source)
        except IssueTrackerError as e:
            raise SyncError(
                f"error making issue for {source_id}: {e}",
                source_id=source_id,
                cause=e,
            ) from e

        if number is None:
            self.logger.warning(f"No issue number returned for '{source.title()}', not registering it")
        else:
            self.finder.created(source.title(), number)
        return self._mark_synced(source_id, SyncOutcome.CREATED)

    # -------------------------------------------------------------------------
    # Discovery
    # -------------------------------------------------------------------------

    def _find_previous_issues(self, source: IssueSource) -> _PreviousIssues:
        """
        Look through all issues filed under the item's title.

        found is set if any of them mentions the item. All open ones are
        returned as updatable, in the order the finder gave them.
        """
        source_id = source.id()
        previous = _PreviousIssues()

        try:
            candidates = self.finder.all_issues_for_key(source.title())
        except IssueTrackerError as e:
            raise SyncError(
                f"error looking up issues for {source_id}: {e}",
                source_id=source_id,
                cause=e,
            ) from e
        self.logger.debug(f"Candidates for '{source.title()}': {candidates}")

        for number in candidates:
            try:
                issue = self.tracker.get_issue(number)
            except IssueTrackerError as e:
                raise SyncError(
                    f"error getting issue {number} for {source_id}: {e}",
                    source_id=source_id,
                    cause=e,
                ) from e

            try:
                recorded = self._is_recorded(issue, source_id)
            except IssueTrackerError as e:
                raise SyncError(
                    f"error checking whether item {source_id} is recorded in issue {number}: {e}",
                    source_id=source_id,
                    cause=e,
                ) from e

            if recorded:
                # keep going, there may be dups to close
                previous.found = True
            if issue.is_open:
                previous.updatable.append(issue)

        return previous

    def _is_recorded(self, issue: IssueData, source_id: str) -> bool:
        """Search the body and comments of an issue for the item's ID."""
        if issue.body and source_id in issue.body:
            return True

        for comment in self.tracker.list_comments(issue.number):
            if not comment.body:
                continue
            if source_id in comment.body:
                return True
        return False

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    def _mark_as_dups(self, source: IssueSource, dups: list[IssueData], of: int) -> None:
        for dup in dups:
            try:
                self.tracker.close_issue(dup.number, DUPLICATE_MESSAGE.format(number=of))
            except IssueTrackerError as e:
                raise SyncError(
                    f"failed to close {dup.number} as a dup of {of}: {e}",
                    source_id=source.id(),
                    cause=e,
                ) from e
            if self.tracker.dry_run:
                self.logger.info(f"[DRY-RUN] Would close #{dup.number} as a duplicate of #{of}")
            else:
                self.logger.info(f"Closed #{dup.number} as a duplicate of #{of}")
            self._publish(DuplicateClosed(
                issue_number=dup.number,
                duplicate_of=of,
                title=source.title(),
            ))

    def _update_issue(self, issue: IssueData, source: IssueSource) -> None:
        """Add a comment about the item to an existing issue."""
        body = self._checked_body(source, new_issue=False)
        if self.tracker.dry_run:
            self.logger.info(f"[DRY-RUN] Would update issue #{issue.number} with item {source.id()}")
        else:
            self.logger.info(f"Updating issue #{issue.number} with item {source.id()}")
        self.tracker.add_comment(issue.number, body)
        self._publish(CommentAdded(issue_number=issue.number, source_id=source.id()))

    def _create_issue(self, source: IssueSource) -> Optional[int]:
        """File a new issue for the item."""
        body = self._checked_body(source, new_issue=True)
        labels = source.labels()
        number = self.tracker.create_issue(source.title(), body, labels)
        if self.tracker.dry_run:
            self.logger.info(f"[DRY-RUN] Would create issue '{source.title()}':\n{body}")
        elif number is not None:
            self.logger.info(f"Created issue #{number}:\n{body}")
        self._publish(IssueCreated(
            issue_number=number,
            title=source.title(),
            source_id=source.id(),
            labels=tuple(labels),
        ))
        return number

    def _checked_body(self, source: IssueSource, new_issue: bool) -> str:
        body = source.body(new_issue)
        source_id = source.id()
        if source_id not in body:
            raise SourceContractError(source_id, body)
        return body

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _mark_synced(self, source_id: str, outcome: SyncOutcome) -> SyncOutcome:
        self._synced.add(source_id)
        self._publish(SourceSynced(source_id=source_id, outcome=outcome.value))
        return outcome

    def _publish(self, event) -> None:
        if self.event_bus is not None:
            self.event_bus.publish(event)
