"""Common interface for committing generated artifacts."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path


class ArtifactWriter(ABC):
    """Commits generated output for one processing session.

    ``write_if_changed`` and ``remove`` may be called concurrently from many
    threads. ``finalize`` is called once, after every other call has returned.
    """

    @abstractmethod
    def write_if_changed(self, path: str | Path, content: bytes) -> None:
        """Request that ``path`` ends up holding ``content``."""

    @abstractmethod
    def remove(self, path: str | Path) -> None:
        """Request that ``path`` no longer exists."""

    @abstractmethod
    def finalize(self) -> None:
        """Flush any buffered state."""
