"""Writer that records changes into a JSON report instead of touching files."""

from __future__ import annotations

import threading
from pathlib import Path

from artifact_writer.errors import FinalizeError, WriteError
from artifact_writer.records import ArtifactDeletionRecord, ArtifactUpdateRecord, ChangeSet
from artifact_writer.utils.io import atomic_write_json, content_is_same
from artifact_writer.utils.logging import get_logger
from artifact_writer.writers.base import ArtifactWriter

LOG = get_logger(__name__)


class RecordingWriter(ArtifactWriter):
    """Accumulates updates and deletions and serializes them on ``finalize``.

    With ``verify_against_filesystem`` enabled, writes whose target already holds
    identical content are not recorded, so the report only lists real changes.
    Without it every write is recorded unconditionally.

    The change-set is an append-only log of calls. Nothing is deduplicated by
    path and record order across threads follows lock acquisition.
    """

    def __init__(self, report_path: str | Path, verify_against_filesystem: bool = False) -> None:
        self.report_path = Path(report_path)
        self.verify_against_filesystem = verify_against_filesystem
        self._lock = threading.Lock()
        self._changes = ChangeSet()

    @property
    def records(self) -> ChangeSet:
        with self._lock:
            return ChangeSet(removed=list(self._changes.removed), changed=list(self._changes.changed))

    def write_if_changed(self, path: str | Path, content: bytes) -> None:
        path = Path(path)
        if self.verify_against_filesystem:
            try:
                unchanged = content_is_same(path, content)
            except OSError as exc:
                raise WriteError(path, exc) from exc
            if unchanged:
                LOG.debug("Skipped unchanged artifact", extra={"path": str(path)})
                return
        record = ArtifactUpdateRecord(path=path, data=content)
        with self._lock:
            self._changes.changed.append(record)
        LOG.debug("Recorded change", extra={"path": str(path)})

    def remove(self, path: str | Path) -> None:
        path = Path(path)
        if not path.exists():
            return
        record = ArtifactDeletionRecord(path=path)
        with self._lock:
            self._changes.removed.append(record)
        LOG.debug("Recorded removal", extra={"path": str(path)})

    def finalize(self) -> None:
        changes = self.records
        # Decode before the report file is touched.
        report = changes.to_report()
        try:
            atomic_write_json(self.report_path, report)
        except (OSError, TypeError, ValueError) as exc:
            raise FinalizeError(self.report_path, exc) from exc
        LOG.info(
            "Wrote change report",
            extra={
                "path": str(self.report_path),
                "changed": len(changes.changed),
                "removed": len(changes.removed),
            },
        )
