"""CLI-specific path policy and dependency injection helpers.

Libraries receive their collaborators via injection; this module provides
the CLI's choices (settings locations, where root discovery starts).
"""

import os
from pathlib import Path

from .finder import Finder
from .finder import LoadingContext
from .settings import SettingsManager

# Root discovery starts from the directory of a file; from the working
# directory we pretend the caller is a file sitting in it.
CWD_ENTRY_FILE = "index.js"


def create_settings_manager(settings_dir: Path | None = None) -> SettingsManager:
    """Create settings manager with CLI paths (.node-finder/ in cwd, ~/.node-finder/)."""
    return SettingsManager(settings_dir=settings_dir)


def default_start_file() -> str:
    """File path root discovery starts from when none is given."""
    return os.path.join(os.getcwd(), CWD_ENTRY_FILE)


def create_finder(start_file: str | None = None, settings_manager: SettingsManager | None = None) -> Finder:
    """Create a Finder for the CLI.

    Args:
        start_file: File that started loading (default: a file in cwd)
        settings_manager: Settings source (default: CLI settings manager)

    Returns:
        Finder over the local filesystem
    """
    start_file = os.path.abspath(start_file) if start_file else default_start_file()
    settings = (settings_manager or create_settings_manager()).get_finder_settings()
    return Finder(context=LoadingContext(filename=start_file), settings=settings)
