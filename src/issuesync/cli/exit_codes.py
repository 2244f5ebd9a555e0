"""
Exit codes returned by the issuesync command.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    SUCCESS = 0
    SYNC_ERROR = 1  # at least one item failed to sync
    CONFIG_ERROR = 2  # bad configuration or unreadable items file
    CANCELLED = 130
