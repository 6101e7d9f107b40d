"""Writer that commits artifacts straight to the filesystem."""

from __future__ import annotations

from pathlib import Path

from artifact_writer.errors import WriteError
from artifact_writer.utils.io import write_file
from artifact_writer.utils.logging import get_logger
from artifact_writer.writers.base import ArtifactWriter

LOG = get_logger(__name__)


class DirectWriter(ArtifactWriter):
    """Writes and deletes real files, skipping writes that would not change anything."""

    def write_if_changed(self, path: str | Path, content: bytes) -> None:
        path = Path(path)
        try:
            written = write_file(path, content)
        except OSError as exc:
            raise WriteError(path, exc) from exc
        if not written:
            LOG.debug("Skipped unchanged artifact", extra={"path": str(path)})

    def remove(self, path: str | Path) -> None:
        path = Path(path)
        try:
            path.unlink()
        except FileNotFoundError:
            LOG.info("Tried to delete already deleted file", extra={"path": str(path)})
        except OSError as exc:
            # Deletion is best-effort; a leftover artifact is not treated as a failure.
            LOG.info("Ignored failure deleting file", extra={"path": str(path), "error": str(exc)})

    def finalize(self) -> None:
        return None
