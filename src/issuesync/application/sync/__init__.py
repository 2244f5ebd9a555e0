"""
Sync Module - Reconciliation of items against the issue tracker.
"""

from .syncer import IssueSyncer, SyncOutcome, DUPLICATE_MESSAGE
from .runner import SyncRunner, SyncResult

__all__ = [
    "IssueSyncer",
    "SyncOutcome",
    "DUPLICATE_MESSAGE",
    "SyncRunner",
    "SyncResult",
]
