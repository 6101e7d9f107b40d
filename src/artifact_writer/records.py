"""Change records accumulated by the recording writer and the report format."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field


class ArtifactUpdateRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    path: Path
    data: bytes


class ArtifactDeletionRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    path: Path


class ChangeSet(BaseModel):
    removed: List[ArtifactDeletionRecord] = Field(default_factory=list)
    changed: List[ArtifactUpdateRecord] = Field(default_factory=list)

    def to_report(self) -> Dict[str, Any]:
        # Strict decode: artifact content must be UTF-8 text to fit the report.
        return {
            "removed": [{"path": str(r.path)} for r in self.removed],
            "changed": [{"path": str(r.path), "data": r.data.decode("utf-8")} for r in self.changed],
        }


class ReportDeletion(BaseModel):
    path: str


class ReportUpdate(BaseModel):
    path: str
    data: str


class CodegenReport(BaseModel):
    """Parsed form of a report file written by ``RecordingWriter.finalize``."""

    removed: List[ReportDeletion] = Field(default_factory=list)
    changed: List[ReportUpdate] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.removed and not self.changed


def load_report(path: str | Path) -> CodegenReport:
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    return CodegenReport(**data)
