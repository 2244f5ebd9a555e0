"""
Config Provider Port - Abstract interface for configuration.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional


DEFAULT_API_URL = "https://api.github.com"


@dataclass
class TrackerConfig:
    """Connection settings for the issue tracker."""

    token: str = ""
    owner: str = ""
    repo: str = ""
    api_url: str = DEFAULT_API_URL
    timeout: float = 30.0

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"


@dataclass
class SyncConfig:
    """Behavioral settings for a sync run."""

    dry_run: bool = True
    verbose: bool = False
    default_labels: list[str] = field(default_factory=list)


@dataclass
class AppConfig:
    """Complete application configuration."""

    tracker: TrackerConfig = field(default_factory=TrackerConfig)
    sync: SyncConfig = field(default_factory=SyncConfig)
    items_path: Optional[Path] = None


class ConfigProviderPort(ABC):
    """Abstract interface for configuration sources."""

    @property
    @abstractmethod
    def name(self) -> str:
        ...

    @abstractmethod
    def load(self) -> AppConfig:
        """Load the complete configuration."""
        ...

    @abstractmethod
    def get(self, key: str, default: Any = None) -> Any:
        ...

    @abstractmethod
    def validate(self) -> list[str]:
        """
        Validate configuration.

        Returns:
            List of validation errors (empty if valid)
        """
        ...
