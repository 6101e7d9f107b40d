"""Typed configuration for selecting an artifact writer."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Literal, Optional

import yaml
from pydantic import BaseModel, model_validator

from artifact_writer.writers.base import ArtifactWriter
from artifact_writer.writers.direct import DirectWriter
from artifact_writer.writers.recording import RecordingWriter

DEFAULT_CONFIG_PATH = "configs/writer.yaml"


class WriterConfig(BaseModel):
    mode: Literal["direct", "recording"] = "direct"
    report_path: Optional[str] = None
    verify_against_filesystem: bool = False

    @model_validator(mode="after")
    def _require_report_path(self) -> "WriterConfig":
        if self.mode == "recording" and not self.report_path:
            raise ValueError("report_path is required when mode is 'recording'")
        return self


def load_yaml(path: str | Path) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def load_writer_config(path: Optional[str] = None) -> WriterConfig:
    config_path = path or os.environ.get("ARTIFACT_WRITER_CONFIG")
    if config_path is None:
        if not Path(DEFAULT_CONFIG_PATH).exists():
            return WriterConfig()
        config_path = DEFAULT_CONFIG_PATH
    data = load_yaml(config_path)
    if "writer" not in data:
        raise ValueError(f"Invalid config file, expected 'writer' root at {config_path}")
    return WriterConfig(**(data["writer"] or {}))


def create_writer(config: WriterConfig) -> ArtifactWriter:
    if config.mode == "recording":
        return RecordingWriter(config.report_path, config.verify_against_filesystem)
    return DirectWriter()
