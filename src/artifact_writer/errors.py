"""Error definitions for artifact writers."""

from __future__ import annotations

from pathlib import Path


class ArtifactWriterError(RuntimeError):
    """Base class for failures surfaced by a writer."""


class WriteError(ArtifactWriterError):
    """Raised when reading or writing a single artifact fails."""

    def __init__(self, path: str | Path, cause: BaseException) -> None:
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"Failed to write artifact {self.path}: {cause}")


class FinalizeError(ArtifactWriterError):
    """Raised when the change report cannot be produced."""

    def __init__(self, report_path: str | Path, cause: BaseException) -> None:
        self.report_path = Path(report_path)
        self.cause = cause
        super().__init__(f"Failed to write change report {self.report_path}: {cause}")
