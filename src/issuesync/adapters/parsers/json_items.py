"""
JSON Item Parser - Load items to sync from a JSON file.

Expected format:

    [
      {
        "title": "Flaky test X",
        "id": "flaky-test-x-v1",
        "body": "Test X failed in run flaky-test-x-v1",
        "comment": "Failed again: flaky-test-x-v1",
        "labels": ["kind/flake"]
      }
    ]

"comment" and "labels" are optional. A top-level object with an "items"
list is accepted as well.
"""

import json
import logging
from pathlib import Path
from typing import Any, Optional, Union

from ...core.domain.source import StaticIssueSource
from ...core.exceptions import ParserError


class JsonItemParser:
    """Parses item records into StaticIssueSource objects."""

    REQUIRED_FIELDS = ("title", "id", "body")

    def __init__(self, default_labels: Optional[list[str]] = None):
        """
        Args:
            default_labels: Labels for items that don't list their own
        """
        self.default_labels = default_labels or []
        self.logger = logging.getLogger("JsonItemParser")

    def parse_file(self, path: Union[str, Path]) -> list[StaticIssueSource]:
        path = Path(path)
        if not path.exists():
            raise ParserError(f"Items file not found: {path}")

        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ParserError(f"Invalid JSON in {path}: {e}") from e

        items = self.parse(data)
        self.logger.info(f"Parsed {len(items)} items from {path}")
        return items

    def parse(self, data: Any) -> list[StaticIssueSource]:
        if isinstance(data, dict):
            data = data.get("items")
        if not isinstance(data, list):
            raise ParserError("Expected a list of items")

        items = []
        seen: set[str] = set()
        for index, record in enumerate(data):
            item = self._parse_record(record, index)
            if item.source_id in seen:
                raise ParserError(f"Item {index}: duplicate id '{item.source_id}'")
            seen.add(item.source_id)
            items.append(item)
        return items

    def _parse_record(self, record: Any, index: int) -> StaticIssueSource:
        if not isinstance(record, dict):
            raise ParserError(f"Item {index}: expected an object")

        missing = [name for name in self.REQUIRED_FIELDS if not record.get(name)]
        if missing:
            raise ParserError(f"Item {index}: missing {', '.join(missing)}")

        labels = record.get("labels", self.default_labels)
        if not isinstance(labels, list) or not all(isinstance(label, str) for label in labels):
            raise ParserError(f"Item {index}: labels must be a list of strings")

        return StaticIssueSource(
            title_text=str(record["title"]),
            source_id=str(record["id"]),
            body_text=str(record["body"]),
            comment_text=record.get("comment"),
            label_names=list(labels),
        )
