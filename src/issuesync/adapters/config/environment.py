"""
Environment Config Provider - Load configuration from environment variables.

Supports:
- Environment variables (GITHUB_TOKEN, GITHUB_OWNER, GITHUB_REPO)
- .env files
- Command line argument overrides
"""

import os
from pathlib import Path
from typing import Any, Optional

from ...core.ports.config_provider import (
    ConfigProviderPort,
    AppConfig,
    TrackerConfig,
    SyncConfig,
    DEFAULT_API_URL,
)


class EnvironmentConfigProvider(ConfigProviderPort):
    """
    Configuration provider that loads from environment variables and .env files.

    Precedence, lowest first: .env file, environment, CLI overrides.
    """

    ENV_MAPPING = {
        "GITHUB_TOKEN": "github_token",
        "GITHUB_OWNER": "github_owner",
        "GITHUB_REPO": "github_repo",
        "GITHUB_API_URL": "github_api_url",
        "ISSUESYNC_LABELS": "labels",
        "ISSUESYNC_VERBOSE": "verbose",
    }

    CLI_MAPPING = {
        "items": "items_path",
        "owner": "github_owner",
        "repo": "github_repo",
        "api_url": "github_api_url",
        "execute": "execute",
        "verbose": "verbose",
    }

    def __init__(
        self,
        env_file: Optional[Path] = None,
        cli_overrides: Optional[dict[str, Any]] = None,
    ):
        """
        Initialize the config provider.

        Args:
            env_file: Path to .env file (auto-detected if not specified)
            cli_overrides: Command line argument overrides
        """
        self._values: dict[str, Any] = {}
        self._env_file = env_file
        self._cli_overrides = cli_overrides or {}

        self._load_env_file()
        self._load_environment()
        self._apply_cli_overrides()

    # -------------------------------------------------------------------------
    # ConfigProviderPort Implementation
    # -------------------------------------------------------------------------

    @property
    def name(self) -> str:
        return "Environment"

    def load(self) -> AppConfig:
        """Load complete configuration."""
        tracker = TrackerConfig(
            token=self.get("github_token", ""),
            owner=self.get("github_owner", ""),
            repo=self.get("github_repo", ""),
            api_url=self.get("github_api_url") or DEFAULT_API_URL,
        )

        sync = SyncConfig(
            dry_run=not self.get("execute", False),
            verbose=bool(self._as_bool(self.get("verbose"))),
            default_labels=self._split_labels(self.get("labels")),
        )

        items_path = self.get("items_path")
        return AppConfig(
            tracker=tracker,
            sync=sync,
            items_path=Path(items_path) if items_path else None,
        )

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value."""
        key = key.lower().replace("-", "_")
        return self._values.get(key, default)

    def validate(self) -> list[str]:
        """Validate configuration."""
        errors = []

        if not self.get("github_token"):
            errors.append("Missing GITHUB_TOKEN - set in environment or .env file")
        if not self.get("github_owner"):
            errors.append("Missing GITHUB_OWNER - set in environment, .env file or --owner")
        if not self.get("github_repo"):
            errors.append("Missing GITHUB_REPO - set in environment, .env file or --repo")
        if self._as_bool(self.get("verbose")) is None:
            errors.append(f"Invalid ISSUESYNC_VERBOSE value: {self.get('verbose')!r}")

        return errors

    # -------------------------------------------------------------------------
    # Private Methods
    # -------------------------------------------------------------------------

    def _load_env_file(self) -> None:
        """Load values from .env file."""
        env_file = self._find_env_file()
        if not env_file:
            return

        for line in env_file.read_text().splitlines():
            line = line.strip()

            # Skip empty lines and comments
            if not line or line.startswith("#") or "=" not in line:
                continue

            key, value = line.split("=", 1)
            key = key.strip()
            value = value.strip().strip('"').strip("'")

            config_key = self.ENV_MAPPING.get(key.upper(), key.lower())
            self._values[config_key] = self._coerce(value)

    def _find_env_file(self) -> Optional[Path]:
        """Find .env file."""
        if self._env_file is not None:
            return self._env_file if self._env_file.exists() else None

        cwd_env = Path.cwd() / ".env"
        if cwd_env.exists():
            return cwd_env

        return None

    def _load_environment(self) -> None:
        """Load values from environment variables."""
        for env_key, config_key in self.ENV_MAPPING.items():
            raw_value = os.environ.get(env_key)
            if raw_value is not None:
                self._values[config_key] = self._coerce(raw_value)

    def _apply_cli_overrides(self) -> None:
        """Apply CLI argument overrides."""
        for cli_key, config_key in self.CLI_MAPPING.items():
            if self._cli_overrides.get(cli_key) is not None:
                self._values[config_key] = self._cli_overrides[cli_key]

    @staticmethod
    def _coerce(raw_value: str) -> Any:
        """Convert boolean-ish values."""
        if raw_value.lower() in ("true", "yes"):
            return True
        if raw_value.lower() in ("false", "no"):
            return False
        return raw_value

    @staticmethod
    def _split_labels(value: Any) -> list[str]:
        if not value or not isinstance(value, str):
            return []
        return [label.strip() for label in value.split(",") if label.strip()]

    @staticmethod
    def _as_bool(value: Any) -> Optional[bool]:
        """Parse a flag value. Unset is False, unrecognized text is None."""
        if value is None or isinstance(value, bool):
            return bool(value)
        text = str(value).strip().lower()
        if text in ("1", "true", "yes", "on"):
            return True
        if text in ("", "0", "false", "no", "off"):
            return False
        return None
