"""
Issue Finders - Implementations of IssueFinderPort.
"""

from .memory import InMemoryIssueFinder
from .github_search import GitHubTitleFinder

__all__ = ["InMemoryIssueFinder", "GitHubTitleFinder"]
