"""Loading context chain.

A loading context records which file asked for a load, and which context
loaded *that* file. Root discovery starts from the outermost one: the file
that kicked off loading in the first place.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Protocol


class ContextLike(Protocol):
    """Anything shaped like a loading context (``parent`` + ``filename``)."""

    @property
    def parent(self) -> ContextLike | None: ...

    @property
    def filename(self) -> str | None: ...


@dataclass(frozen=True)
class LoadingContext:
    """One frame of the loading chain.

    Attributes:
        filename: Source file of this frame
        parent: Context that loaded this one (None for the outermost frame)
    """

    filename: str | None = None
    parent: LoadingContext | None = None

    @classmethod
    def from_chain(cls, filenames: list[str]) -> LoadingContext:
        """Build a chain from filenames, outermost first.

        ``from_chain(["app.js", "lib.js"])`` returns the ``lib.js`` context,
        whose parent is the ``app.js`` context.
        """
        if not filenames:
            raise ValueError("Loading chain needs at least one filename")

        context = None
        for filename in filenames:
            context = cls(filename=filename, parent=context)
        assert context is not None  # Help type checker
        return context

    @classmethod
    def from_main_module(cls) -> LoadingContext:
        """Context for the running program's ``__main__`` file."""
        main = sys.modules.get("__main__")
        filename = getattr(main, "__file__", None)
        if not filename:
            raise ValueError("__main__ has no file (interactive session?)")
        return cls(filename=filename)


def origin(context: ContextLike) -> ContextLike:
    """Follow ``parent`` links to the outermost context."""
    current = context
    while current.parent is not None:
        current = current.parent
    return current


def origin_filename(context: ContextLike) -> str:
    """File path of the outermost context.

    Raises:
        ValueError: Outermost context carries no filename
    """
    filename = origin(context).filename
    if not filename:
        raise ValueError("Outermost loading context has no filename")
    return filename
