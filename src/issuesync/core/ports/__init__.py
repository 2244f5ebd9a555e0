"""
Ports - Abstract interfaces for external dependencies.

Ports define the contracts that adapters must implement.
This enables dependency inversion and easy testing.
"""

from .issue_tracker import (
    OPEN_STATE,
    IssueTrackerPort,
    IssueData,
    CommentData,
)
from .issue_finder import IssueFinderPort
from .config_provider import (
    ConfigProviderPort,
    AppConfig,
    TrackerConfig,
    SyncConfig,
    DEFAULT_API_URL,
)

__all__ = [
    "OPEN_STATE",
    "IssueTrackerPort",
    "IssueData",
    "CommentData",
    "IssueFinderPort",
    "ConfigProviderPort",
    "AppConfig",
    "TrackerConfig",
    "SyncConfig",
    "DEFAULT_API_URL",
]
