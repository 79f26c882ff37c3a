"""Filesystem lookups for a Node-style module loader.

Given the file that started loading, the finder locates the project root
(the nearest directory with a package.json), lists the packages installed
in node_modules folders visible from it, and resolves relative specifiers
with the .js fallback.
"""

from .context import LoadingContext
from .context import origin
from .errors import ErrorKind
from .errors import FinderError
from .errors import RootNotFoundError
from .errors import error_kind
from .filesystem import Filesystem
from .filesystem import LocalFilesystem
from .filesystem import StatResult
from .finder import Finder
from .models import FinderSettings
from .models import PathEntry

__all__ = [
    "ErrorKind",
    "Filesystem",
    "Finder",
    "FinderError",
    "FinderSettings",
    "LoadingContext",
    "LocalFilesystem",
    "PathEntry",
    "RootNotFoundError",
    "StatResult",
    "error_kind",
    "origin",
]
