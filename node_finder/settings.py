"""Settings manager for node-finder settings.yaml files.

Manages three-scope settings system:
- User global (~/.node-finder/settings.yaml)
- Project (.node-finder/settings.yaml)
- Local (.node-finder/settings.local.yaml)

Only the ``finder:`` section is read; it is validated into FinderSettings.
"""

import logging
from pathlib import Path
from typing import Any
from typing import Literal

import yaml
from pydantic import ValidationError

from .finder.models import FinderSettings

logger = logging.getLogger(__name__)

ScopeType = Literal["user", "project", "local"]

SECTION = "finder"


class SettingsManager:
    """Manages finder settings across user/project/local scopes."""

    def __init__(self, settings_dir: Path | None = None, user_settings_file: Path | None = None):
        """Initialize settings manager with standard paths.

        Args:
            settings_dir: Base directory for project/local settings (for testing).
                          If None, uses .node-finder in current directory.
            user_settings_file: User settings file (for testing).
                          If None, uses ~/.node-finder/settings.yaml.
        """
        if settings_dir is None:
            settings_dir = Path(".node-finder")

        self.user_settings_file = user_settings_file or Path.home() / ".node-finder" / "settings.yaml"
        self.project_settings_file = settings_dir / "settings.yaml"
        self.local_settings_file = settings_dir / "settings.local.yaml"

    def _scope_file(self, scope: ScopeType) -> Path:
        file_map = {
            "user": self.user_settings_file,
            "project": self.project_settings_file,
            "local": self.local_settings_file,
        }
        if scope not in file_map:
            raise ValueError(f"Unknown settings scope '{scope}' (expected user, project or local)")
        return file_map[scope]

    def get_finder_settings(self) -> FinderSettings:
        """Get finder settings merged from all scopes.

        Invalid values fall back to defaults with a warning.

        Returns:
            FinderSettings
        """
        section = self.get_merged_settings().get(SECTION) or {}
        try:
            return FinderSettings(**section)
        except (ValidationError, TypeError) as e:
            logger.warning(f"Invalid '{SECTION}' settings, using defaults: {e}")
            return FinderSettings()

    def set_value(self, key: str, value: str, scope: ScopeType = "project") -> None:
        """Set one finder setting in a scope.

        Args:
            key: FinderSettings field name
            value: New value
            scope: "user", "project", or "local"

        Raises:
            ValueError: Unknown key or scope, or a value FinderSettings rejects
        """
        if key not in FinderSettings.model_fields:
            raise ValueError(
                f"Unknown setting '{key}'. Available: {', '.join(sorted(FinderSettings.model_fields))}"
            )

        # Reject values that would break lookups before anything is written
        FinderSettings(**{key: value})

        self._update_settings(self._scope_file(scope), {SECTION: {key: value}})
        logger.info(f"Set {scope} {SECTION}.{key} to: {value}")

    def get_merged_settings(self) -> dict[str, Any]:
        """Get merged settings from all scopes.

        Merge order (later overrides earlier):
        1. User settings
        2. Project settings
        3. Local settings

        Returns:
            Merged settings dictionary
        """
        merged: dict[str, Any] = {}

        for path in (self.user_settings_file, self.project_settings_file, self.local_settings_file):
            settings = self._read_settings(path)
            if settings:
                merged = self._deep_merge(merged, settings)

        return merged

    def _read_settings(self, path: Path) -> dict[str, Any] | None:
        """Read settings from YAML file.

        Args:
            path: Path to settings file

        Returns:
            Settings dict or None if file doesn't exist or can't be read
        """
        if not path.exists():
            return None

        try:
            with open(path) as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            logger.warning(f"Failed to read settings from {path}: {e}")
            return None

        if data and not isinstance(data, dict):
            logger.warning(f"Ignoring settings in {path}: expected a mapping")
            return None
        return data if data else {}

    def _write_settings(self, path: Path, settings: dict[str, Any]) -> None:
        """Write settings to YAML file.

        Args:
            path: Path to settings file
            settings: Settings dictionary
        """
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w") as f:
            yaml.dump(settings, f, default_flow_style=False, sort_keys=False)

    def _update_settings(self, path: Path, updates: dict[str, Any]) -> None:
        """Update settings file with new values (deep merge)."""
        existing = self._read_settings(path) or {}
        merged = self._deep_merge(existing, updates)
        self._write_settings(path, merged)

    def _deep_merge(self, base: dict[str, Any], overlay: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries.

        Args:
            base: Base dictionary
            overlay: Overlay dictionary (takes precedence)

        Returns:
            Merged dictionary
        """
        result = base.copy()

        for key, value in overlay.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result
