"""
issuesync - Sync items to GitHub issues without filing duplicates.

Usage:
    # Dry-run to see what would happen (default)
    issuesync --items flakes.json --owner my-org --repo my-repo

    # Execute changes
    issuesync --items flakes.json --owner my-org --repo my-repo --execute

Environment Variables:
    GITHUB_TOKEN: Token with permission to read and write issues
    GITHUB_OWNER / GITHUB_REPO: Target repository (or --owner/--repo)
    GITHUB_API_URL: API root for GitHub Enterprise
    ISSUESYNC_LABELS: Comma separated labels for items without labels
    ISSUESYNC_VERBOSE: Set to 1 or true for debug logging (same as --verbose)
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from ..adapters.config import EnvironmentConfigProvider
from ..adapters.finders import GitHubTitleFinder
from ..adapters.github import GitHubAdapter
from ..adapters.parsers import JsonItemParser
from ..application.sync import IssueSyncer, SyncRunner
from ..core.exceptions import ParserError
from ..core.ports.config_provider import AppConfig
from .exit_codes import ExitCode
from .output import Console


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S"
    )


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="issuesync",
        description="Sync items to GitHub issues without filing duplicates",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )

    parser.add_argument(
        "--items", "-i",
        type=str,
        help="Path to the JSON file listing the items to sync"
    )
    parser.add_argument(
        "--owner",
        type=str,
        help="Repository owner (or set GITHUB_OWNER)"
    )
    parser.add_argument(
        "--repo",
        type=str,
        help="Repository name (or set GITHUB_REPO)"
    )
    parser.add_argument(
        "--api-url",
        type=str,
        help="GitHub API URL (or set GITHUB_API_URL)"
    )
    parser.add_argument(
        "--env-file",
        type=str,
        help="Path to a .env file (defaults to ./.env)"
    )
    parser.add_argument(
        "--execute",
        action="store_true",
        help="Actually execute changes (default is dry-run)"
    )
    parser.add_argument(
        "--no-confirm",
        action="store_true",
        help="Skip the confirmation prompt in execute mode"
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging"
    )

    return parser


def build_runner(config: AppConfig) -> SyncRunner:
    """Wire the GitHub adapter, finder and syncer together."""
    tracker = GitHubAdapter(config.tracker, dry_run=config.sync.dry_run)
    finder = GitHubTitleFinder(tracker)
    syncer = IssueSyncer(tracker, finder)
    return SyncRunner(syncer, dry_run=config.sync.dry_run)


def main(argv: Optional[list[str]] = None) -> int:
    args = create_parser().parse_args(argv)

    provider = EnvironmentConfigProvider(
        env_file=Path(args.env_file) if args.env_file else None,
        cli_overrides={
            "items": args.items,
            "owner": args.owner,
            "repo": args.repo,
            "api_url": args.api_url,
            # store_true flags default to False; only let them override when set
            "execute": args.execute or None,
            "verbose": args.verbose or None,
        },
    )
    config = provider.load()

    setup_logging(config.sync.verbose)
    logger = logging.getLogger("main")
    console = Console(color=not args.no_color, verbose=config.sync.verbose)

    errors = provider.validate()
    if config.items_path is None:
        errors.append("Missing items file - use --items")
    if errors:
        for error in errors:
            logger.error(error)
        return ExitCode.CONFIG_ERROR

    try:
        sources = JsonItemParser(config.sync.default_labels).parse_file(config.items_path)
    except ParserError as e:
        logger.error(str(e))
        return ExitCode.CONFIG_ERROR

    console.header(f"issuesync {Path(config.items_path).name} → {config.tracker.full_name}")

    if config.sync.dry_run:
        console.dry_run_banner()
    elif not args.no_confirm:
        if not console.confirm(f"Sync {len(sources)} item(s) to {config.tracker.full_name}?"):
            logger.info("Aborted.")
            return ExitCode.CANCELLED

    runner = build_runner(config)
    result = runner.run(
        sources,
        progress_callback=lambda title, current, total: console.progress(current, total, title),
    )

    console.sync_result(result)
    return ExitCode.SUCCESS if result.success else ExitCode.SYNC_ERROR


def run() -> None:
    """Console script entry point."""
    sys.exit(main())
