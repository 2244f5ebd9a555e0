"""
Application Layer - Use cases and orchestration.

This layer contains:
- sync/: The issue syncer and the batch runner driving it
"""

from .sync import IssueSyncer, SyncOutcome, SyncRunner, SyncResult

__all__ = [
    "IssueSyncer",
    "SyncOutcome",
    "SyncRunner",
    "SyncResult",
]
