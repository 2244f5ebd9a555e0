"""
CLI Module - Command Line Interface for issuesync.
"""

from .app import main, run
from .exit_codes import ExitCode

__all__ = ["main", "run", "ExitCode"]
