"""Filesystem helpers shared by the writers."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict


def ensure_parent_dir(path: str | Path) -> None:
    parent = Path(path).parent
    if not parent.exists():
        parent.mkdir(parents=True, exist_ok=True)


def content_is_same(path: str | Path, content: bytes) -> bool:
    path = Path(path)
    if not path.exists():
        return False
    with open(path, "rb") as f:
        return f.read() == content


def write_file(path: str | Path, content: bytes) -> bool:
    """Write ``content`` to ``path`` unless it already holds exactly those bytes.

    Returns True when the file was physically written.
    """
    path = Path(path)
    if path.exists():
        if content_is_same(path, content):
            return False
    else:
        ensure_parent_dir(path)
    with open(path, "wb") as f:
        f.write(content)
    return True


def atomic_write_json(path: str | Path, data: Dict[str, Any]) -> None:
    path = Path(path)
    ensure_parent_dir(path)
    tmp_path = path.with_suffix(path.suffix + ".tmp")
    with open(tmp_path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
        f.write("\n")
    os.replace(tmp_path, path)
