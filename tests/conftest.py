"""Pytest configuration for node-finder tests."""

import errno
import logging
import posixpath

import pytest
from node_finder.finder import Finder
from node_finder.finder import LoadingContext
from node_finder.finder import StatResult


def not_found(path: str) -> FileNotFoundError:
    return FileNotFoundError(errno.ENOENT, "No such file or directory", path)


class FakeFilesystem:
    """In-memory filesystem that records every call.

    Args:
        entries: path -> is_directory for paths that exist
        listings: directory -> entry names (or an OSError to raise)
        errors: path -> OSError raised by stat
        realpaths: path -> real path (identity when absent)
    """

    def __init__(self, entries=None, listings=None, errors=None, realpaths=None):
        self.entries = entries or {}
        self.listings = listings or {}
        self.errors = errors or {}
        self.realpaths = realpaths or {}
        self.calls: list[tuple[str, str]] = []

    def stat(self, path: str) -> StatResult:
        self.calls.append(("stat", path))
        if path in self.errors:
            raise self.errors[path]
        if path not in self.entries:
            raise not_found(path)
        return StatResult(is_directory=self.entries[path])

    def listdir(self, path: str) -> list[str]:
        self.calls.append(("listdir", path))
        listing = self.listings.get(path, [])
        if isinstance(listing, OSError):
            raise listing
        return list(listing)

    def realpath(self, path: str) -> str:
        self.calls.append(("realpath", path))
        real = self.realpaths.get(path, path)
        if isinstance(real, OSError):
            raise real
        return real

    def called(self, op: str) -> list[str]:
        return [path for name, path in self.calls if name == op]


@pytest.fixture
def app_context():
    """Loading chain three frames deep, started by /var/node/foo/bar/app.js."""
    return LoadingContext.from_chain(
        [
            "/var/node/foo/bar/app.js",
            "/var/node/foo/bar/src/kernel.js",
            "/var/node/foo/bar/src/http/router.js",
        ]
    )


@pytest.fixture
def make_finder():
    """Build a Finder over a FakeFilesystem with POSIX path rules."""

    def _make(fs: FakeFilesystem, context=None, settings=None) -> Finder:
        return Finder(fs=fs, path=posixpath, context=context, settings=settings)

    return _make


@pytest.fixture
def make_fs():
    """Build a FakeFilesystem (see FakeFilesystem for arguments)."""
    return FakeFilesystem


@pytest.fixture
def enoent():
    """Build a "not found" error for a path."""
    return not_found


@pytest.fixture
def restore_root_logger():
    """Undo handlers and level changes made to the root logger."""
    root = logging.getLogger()
    level = root.level
    handlers = list(root.handlers)
    yield
    for h in list(root.handlers):
        if h not in handlers:
            root.removeHandler(h)
            h.close()
    root.setLevel(level)
