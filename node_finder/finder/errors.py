"""Error classification for filesystem lookups.

Filesystem collaborators raise plain ``OSError``. The finder only ever
recovers from one condition ("path does not exist"); everything else is
re-raised unchanged. ``error_kind`` makes that split explicit.
"""

import errno
from enum import Enum


class ErrorKind(str, Enum):
    """Kind of a filesystem failure, as far as the finder cares.

    Kinds:
    - NOT_FOUND: the path (or directory entry) does not exist
    - OTHER: permission denied, I/O error, too many links, ...
    """

    NOT_FOUND = "not_found"
    OTHER = "other"


def error_kind(exc: OSError) -> ErrorKind:
    """Classify a filesystem error.

    Args:
        exc: Error raised by a filesystem collaborator

    Returns:
        ErrorKind.NOT_FOUND for FileNotFoundError / ENOENT, ErrorKind.OTHER otherwise
    """
    if isinstance(exc, FileNotFoundError) or exc.errno == errno.ENOENT:
        return ErrorKind.NOT_FOUND
    return ErrorKind.OTHER


class FinderError(Exception):
    """Base class for errors raised by the finder itself."""

    pass


class RootNotFoundError(FinderError):
    """Raised when no ancestor of the start path holds the package descriptor."""

    def __init__(self, start: str, descriptor_name: str):
        self.start = start
        self.descriptor_name = descriptor_name
        super().__init__(
            f"No '{descriptor_name}' found in any parent directory of {start}\n\n"
            f"Suggestions:\n"
            f"  - Run from inside a project that has a {descriptor_name}\n"
            f"  - Pass --from with a file inside the project"
        )
