"""
Issue Source - Anything that wishes to be tracked as a GitHub issue.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional


class IssueSource(ABC):
    """
    An item that should be represented by exactly one open issue.

    Implementations are the things being synced: flaky test reports,
    stale PR notices, failed job summaries, ...
    """

    @abstractmethod
    def title(self) -> str:
        """
        Title of the tracking issue.

        Titles are used to find existing issues, so the way a title is
        built must never change or duplicates will be filed.
        """
        ...

    @abstractmethod
    def id(self) -> str:
        """
        Unique, stable token for this item.

        If the token appears in the body of an issue or of any of its
        comments, the item is already recorded there. A URL to more
        details is a good choice.
        """
        ...

    @abstractmethod
    def body(self, new_issue: bool) -> str:
        """
        Text for a new issue (new_issue=True) or a follow-up comment.

        The text must contain id().
        """
        ...

    @abstractmethod
    def labels(self) -> list[str]:
        """Labels applied when a new issue is filed."""
        ...


@dataclass
class StaticIssueSource(IssueSource):
    """An IssueSource built from fixed values, e.g. loaded from a file."""

    title_text: str
    source_id: str
    body_text: str
    comment_text: Optional[str] = None
    label_names: list[str] = field(default_factory=list)

    def title(self) -> str:
        return self.title_text

    def id(self) -> str:
        return self.source_id

    def body(self, new_issue: bool) -> str:
        if new_issue or self.comment_text is None:
            return self.body_text
        return self.comment_text

    def labels(self) -> list[str]:
        return list(self.label_names)
