"""Filesystem collaborator used by the finder.

The finder never touches ``os`` directly. It talks to a ``Filesystem``, so
tests (and callers with virtual trees) can substitute their own.
"""

import os
import stat
from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class StatResult:
    """What the finder needs to know about an existing path."""

    is_directory: bool


class Filesystem(Protocol):
    """Capabilities the finder consumes.

    Every method raises ``OSError`` on failure. A missing path must raise
    ``FileNotFoundError`` (or an ``OSError`` with ``errno.ENOENT``).
    """

    def stat(self, path: str) -> StatResult: ...

    def listdir(self, path: str) -> list[str]: ...

    def realpath(self, path: str) -> str: ...


class LocalFilesystem:
    """Filesystem backed by the local disk."""

    def stat(self, path: str) -> StatResult:
        return StatResult(is_directory=stat.S_ISDIR(os.stat(path).st_mode))

    def listdir(self, path: str) -> list[str]:
        return os.listdir(path)

    def realpath(self, path: str) -> str:
        # strict: a broken link raises instead of yielding a dangling path
        return os.path.realpath(path, strict=True)

    def __repr__(self) -> str:
        return "LocalFilesystem()"
