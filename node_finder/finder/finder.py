"""Finder - project root discovery, module listing and specifier resolution.

Three lookups over a Node-style directory tree:
- find_root: nearest ancestor of the originating file holding package.json
- list_modules: packages visible from a directory through node_modules folders
- find: a specifier relative to a directory, with the .js fallback

Only "does not exist" is ever recovered from. Every other filesystem error
reaches the caller untouched.
"""

import logging
import os
import threading
from types import ModuleType

from .context import ContextLike
from .context import origin_filename
from .errors import ErrorKind
from .errors import RootNotFoundError
from .errors import error_kind
from .filesystem import Filesystem
from .filesystem import LocalFilesystem
from .filesystem import StatResult
from .models import FinderSettings
from .models import PathEntry

logger = logging.getLogger(__name__)


class Finder:
    """Resolves module-loading metadata from the filesystem.

    The project root is computed once per instance and cached. Listings and
    ``find`` results are never cached.
    """

    def __init__(
        self,
        fs: Filesystem | None = None,
        path: ModuleType | None = None,
        context: ContextLike | None = None,
        settings: FinderSettings | None = None,
    ):
        """Initialize finder with its collaborators.

        Args:
            fs: Filesystem to query (default: LocalFilesystem)
            path: Path utilities module (default: os.path)
            context: Loading context whose outermost file starts root discovery
            settings: Naming conventions (default: package.json / node_modules / .js)
        """
        self._fs = fs or LocalFilesystem()
        self._path = path or os.path
        self._context = context
        self.settings = settings or FinderSettings()

        self._root: str | None = None
        self._root_lock = threading.Lock()

    def find_root(self) -> str:
        """Find the closest directory above the originating file holding the descriptor.

        Returns:
            Project root directory

        Raises:
            RootNotFoundError: Filesystem root reached without finding the descriptor
            ValueError: No loading context (or it has no filename)
            OSError: Any filesystem error other than "not found"
        """
        with self._root_lock:
            if self._root is None:
                self._root = self._discover_root()
            else:
                logger.debug(f"[finder:root] cached -> {self._root}")
            return self._root

    def _discover_root(self) -> str:
        if self._context is None:
            raise ValueError("Finder has no loading context to start root discovery from")

        start = origin_filename(self._context)
        descriptor = self.settings.descriptor_name
        # relative starts are taken from the working directory
        current = self._path.abspath(start)

        while True:
            parent = self._path.dirname(current)
            if parent == current:
                raise RootNotFoundError(start, descriptor)
            current = parent

            logger.debug(f"[finder:root] checking {current}")
            if self.find(current, descriptor) is not None:
                logger.debug(f"[finder:root] {start} -> {current}")
                return current

    def list_modules(self, start_dir: str | None = None) -> list[str]:
        """List dependency names visible from a directory.

        Args:
            start_dir: Directory to start from (default: project root)

        Returns:
            Unique names, closest dependency folder first
        """
        return list(self.list_module_paths(start_dir))

    def list_module_paths(self, start_dir: str | None = None) -> dict[str, str]:
        """Map dependency names to their real paths.

        Walks from ``start_dir`` towards the filesystem root. Levels without a
        dependency folder are skipped. The walk ends after listing the
        dependency folder of a directory that is not itself inside a
        dependency folder, i.e. at the top of the dependency tree.

        Args:
            start_dir: Directory to start from (default: project root)

        Returns:
            Ordered mapping of name -> real path; closer folders shadow farther ones

        Raises:
            OSError: Any filesystem error other than "not found"
        """
        directory = self._path.abspath(start_dir) if start_dir is not None else self.find_root()
        modules: dict[str, str] = {}

        while True:
            modules_path = self._path.join(directory, self.settings.modules_dir)
            stat = self._stat_if_exists(modules_path)

            if stat is not None and stat.is_directory:
                self._collect_modules(modules_path, modules)
                if not self._is_nested_module(directory):
                    break
            elif stat is not None:
                logger.debug(f"[finder:modules] {modules_path} is not a directory, skipping")

            parent = self._path.dirname(directory)
            if parent == directory:
                break
            directory = parent

        logger.debug(f"[finder:modules] found {len(modules)} modules")
        return modules

    def _stat_if_exists(self, path: str) -> StatResult | None:
        try:
            return self._fs.stat(path)
        except OSError as e:
            if error_kind(e) is not ErrorKind.NOT_FOUND:
                raise
            return None

    def _collect_modules(self, modules_path: str, modules: dict[str, str]) -> None:
        logger.debug(f"[finder:modules] reading {modules_path}")
        for name in self._fs.listdir(modules_path):
            if name.startswith(self.settings.hidden_prefix) or name in modules:
                continue
            modules[name] = self._fs.realpath(self._path.join(modules_path, name))

    def _is_nested_module(self, directory: str) -> bool:
        """Check if directory sits inside a dependency folder (e.g. node_modules/pkg)."""
        return self.settings.modules_dir in directory.split(self._path.sep)

    def find(self, base_path: str, specifier: str) -> PathEntry | None:
        """Resolve a specifier relative to a directory.

        Tries ``base_path/specifier`` first. When that does not exist and the
        specifier has no extension, tries again with the default extension;
        such a match is always reported as a file.

        Args:
            base_path: Directory to resolve from
            specifier: Relative path, e.g. "package.json" or "lib/index"

        Returns:
            PathEntry for the existing path, None if nothing exists

        Raises:
            OSError: Any stat error other than "not found"
        """
        candidate = self._path.normpath(self._path.join(base_path, specifier))

        stat = self._stat_if_exists(candidate)
        if stat is not None:
            return PathEntry(filename=candidate, directory=stat.is_directory)

        if self._has_extension(specifier):
            return None

        candidate += self.settings.default_extension
        if self._stat_if_exists(candidate) is None:
            return None
        return PathEntry(filename=candidate, directory=False)

    def _has_extension(self, specifier: str) -> bool:
        return "." in self._path.basename(specifier)

    def __repr__(self) -> str:
        return f"Finder({self._fs!r}, root={self._root})"
