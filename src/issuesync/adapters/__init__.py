"""
Adapters - Concrete implementations of ports.

This module contains implementations for:
- Issue Trackers: GitHub
- Issue Finders: in-memory, GitHub title search
- Parsers: JSON item files
- Config: Environment variables
"""

from .github import GitHubAdapter
from .finders import InMemoryIssueFinder, GitHubTitleFinder
from .parsers import JsonItemParser
from .config import EnvironmentConfigProvider

__all__ = [
    "GitHubAdapter",
    "InMemoryIssueFinder",
    "GitHubTitleFinder",
    "JsonItemParser",
    "EnvironmentConfigProvider",
]
