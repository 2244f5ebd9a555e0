"""Tests for the command line interface."""

import json
from unittest.mock import patch

import pytest

from issuesync.application.sync import SyncResult
from issuesync.cli import ExitCode, main
from issuesync.cli.app import build_runner, create_parser
from issuesync.cli.output import Console
from issuesync.core.ports.config_provider import AppConfig, SyncConfig, TrackerConfig


@pytest.fixture(autouse=True)
def environment(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("GITHUB_TOKEN", "secret")
    monkeypatch.setenv("GITHUB_OWNER", "octo")
    monkeypatch.setenv("GITHUB_REPO", "widgets")
    monkeypatch.delenv("ISSUESYNC_VERBOSE", raising=False)


@pytest.fixture
def items_file(tmp_path):
    path = tmp_path / "items.json"
    path.write_text(json.dumps([
        {"title": "Flaky test X", "id": "flaky-test-x-v1", "body": "see flaky-test-x-v1"},
    ]))
    return path


class TestParser:
    """Tests for argument parsing."""

    def test_defaults(self):
        args = create_parser().parse_args(["--items", "x.json"])

        assert args.items == "x.json"
        assert not args.execute
        assert not args.no_confirm


class TestBuildRunner:
    """Tests for component wiring."""

    def test_dry_run_is_propagated(self):
        config = AppConfig(
            tracker=TrackerConfig(token="t", owner="o", repo="r"),
            sync=SyncConfig(dry_run=True),
        )

        runner = build_runner(config)

        assert runner.dry_run is True
        assert runner.syncer.tracker.name == "GitHub"


class TestMain:
    """Tests for main()."""

    def test_missing_items_is_config_error(self):
        assert main(["--no-color"]) == ExitCode.CONFIG_ERROR

    def test_missing_token_is_config_error(self, monkeypatch, items_file):
        monkeypatch.delenv("GITHUB_TOKEN")

        assert main(["--items", str(items_file), "--no-color"]) == ExitCode.CONFIG_ERROR

    def test_unparseable_items_is_config_error(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("[1, 2]")

        assert main(["--items", str(path), "--no-color"]) == ExitCode.CONFIG_ERROR

    def test_successful_dry_run(self, items_file):
        with patch("issuesync.cli.app.SyncRunner.run", return_value=SyncResult()) as run:
            code = main(["--items", str(items_file), "--no-color"])

        assert code == ExitCode.SUCCESS
        sources = run.call_args[0][0]
        assert [source.id() for source in sources] == ["flaky-test-x-v1"]

    def test_sync_errors_exit_code(self, items_file):
        failed = SyncResult()
        failed.add_error("boom")

        with patch("issuesync.cli.app.SyncRunner.run", return_value=failed):
            code = main(["--items", str(items_file), "--no-color"])

        assert code == ExitCode.SYNC_ERROR

    def test_execute_requires_confirmation(self, items_file):
        with patch("issuesync.cli.app.Console.confirm", return_value=False), \
                patch("issuesync.cli.app.SyncRunner.run") as run:
            code = main(["--items", str(items_file), "--execute", "--no-color"])

        assert code == ExitCode.CANCELLED
        run.assert_not_called()

    def test_execute_without_confirmation(self, items_file):
        with patch("issuesync.cli.app.SyncRunner.run", return_value=SyncResult(dry_run=False)) as run:
            code = main(["--items", str(items_file), "--execute", "--no-confirm", "--no-color"])

        assert code == ExitCode.SUCCESS
        run.assert_called_once()

    def test_verbose_from_environment_enables_debug_logging(self, monkeypatch, items_file):
        monkeypatch.setenv("ISSUESYNC_VERBOSE", "1")

        with patch("issuesync.cli.app.setup_logging") as setup_logging, \
                patch("issuesync.cli.app.Console") as console, \
                patch("issuesync.cli.app.SyncRunner.run", return_value=SyncResult()):
            main(["--items", str(items_file), "--no-color"])

        setup_logging.assert_called_once_with(True)
        assert console.call_args[1]["verbose"] is True

    def test_verbose_disabled_by_zero(self, monkeypatch, items_file):
        monkeypatch.setenv("ISSUESYNC_VERBOSE", "0")

        with patch("issuesync.cli.app.setup_logging") as setup_logging, \
                patch("issuesync.cli.app.SyncRunner.run", return_value=SyncResult()):
            main(["--items", str(items_file), "--no-color"])

        setup_logging.assert_called_once_with(False)

    def test_verbose_flag_overrides_environment(self, monkeypatch, items_file):
        monkeypatch.setenv("ISSUESYNC_VERBOSE", "0")

        with patch("issuesync.cli.app.setup_logging") as setup_logging, \
                patch("issuesync.cli.app.SyncRunner.run", return_value=SyncResult()):
            main(["--items", str(items_file), "--no-color", "--verbose"])

        setup_logging.assert_called_once_with(True)


class TestConsole:
    """Tests for the sync summary output."""

    def test_dry_run_labels(self, capsys):
        result = SyncResult(dry_run=True, items_total=2, items_synced=2, issues_created=1, comments_added=1)

        Console(color=False).sync_result(result)

        out = capsys.readouterr().out
        assert "Issues To Create" in out
        assert "Comments To Add" in out
        assert "Duplicates To Close" in out
        assert "Issues Created" not in out

    def test_live_labels(self, capsys):
        Console(color=False).sync_result(SyncResult(dry_run=False))

        out = capsys.readouterr().out
        assert "Issues Created" in out
        assert "Duplicates Closed" in out

    def test_verbose_lists_new_issues(self, capsys):
        result = SyncResult(dry_run=False, created_issues=[("flaky-test-x-v1", 42)])

        Console(color=False, verbose=True).sync_result(result)

        assert "flaky-test-x-v1 → #42" in capsys.readouterr().out

    def test_quiet_omits_new_issues(self, capsys):
        result = SyncResult(dry_run=False, created_issues=[("flaky-test-x-v1", 42)])

        Console(color=False).sync_result(result)

        assert "flaky-test-x-v1" not in capsys.readouterr().out
