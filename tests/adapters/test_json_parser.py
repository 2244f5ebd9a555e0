"""Tests for the JSON item parser."""

import json

import pytest

from issuesync.adapters.parsers import JsonItemParser
from issuesync.core.exceptions import ParserError


class TestJsonItemParser:
    """Tests for JsonItemParser."""

    @pytest.fixture
    def parser(self):
        return JsonItemParser(default_labels=["triage"])

    def test_parse_records(self, parser):
        items = parser.parse([
            {
                "title": "Flaky test X",
                "id": "flaky-test-x-v1",
                "body": "failed: flaky-test-x-v1",
                "comment": "again: flaky-test-x-v1",
                "labels": ["kind/flake"],
            },
            {"title": "Flaky test Y", "id": "y-1", "body": "failed: y-1"},
        ])

        assert len(items) == 2
        assert items[0].title() == "Flaky test X"
        assert items[0].id() == "flaky-test-x-v1"
        assert items[0].body(True) == "failed: flaky-test-x-v1"
        assert items[0].body(False) == "again: flaky-test-x-v1"
        assert items[0].labels() == ["kind/flake"]
        assert items[1].body(False) == "failed: y-1"
        assert items[1].labels() == ["triage"]

    def test_items_wrapper_object(self, parser):
        items = parser.parse({"items": [{"title": "T", "id": "i", "body": "i"}]})

        assert [item.id() for item in items] == ["i"]

    def test_parse_file(self, parser, tmp_path):
        path = tmp_path / "items.json"
        path.write_text(json.dumps([{"title": "T", "id": "i", "body": "i"}]))

        assert len(parser.parse_file(path)) == 1

    @pytest.mark.parametrize(
        ("data", "message"),
        [
            ("not a list", "Expected a list"),
            (["nope"], "expected an object"),
            ([{"title": "T", "id": "i"}], "missing body"),
            ([{"title": "T", "id": "i", "body": "i", "labels": "x"}], "labels"),
            (
                [{"title": "T", "id": "i", "body": "i"}, {"title": "U", "id": "i", "body": "i"}],
                "duplicate id",
            ),
        ],
    )
    def test_invalid(self, parser, data, message):
        with pytest.raises(ParserError, match=message):
            parser.parse(data)

    def test_missing_file(self, parser, tmp_path):
        with pytest.raises(ParserError, match="not found"):
            parser.parse_file(tmp_path / "missing.json")

    def test_invalid_json(self, parser, tmp_path):
        path = tmp_path / "items.json"
        path.write_text("{broken")

        with pytest.raises(ParserError, match="Invalid JSON"):
            parser.parse_file(path)
