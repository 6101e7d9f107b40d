import json
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

import pytest

from artifact_writer.errors import FinalizeError, WriteError
from artifact_writer.records import load_report
from artifact_writer.writers.recording import RecordingWriter


def test_records_every_write_without_verification(tmp_path: Path) -> None:
    report = tmp_path / "report.json"
    writer = RecordingWriter(report, verify_against_filesystem=False)
    for i in range(5):
        writer.write_if_changed(tmp_path / f"gen_{i}.txt", f"content {i}".encode())
    writer.finalize()
    assert len(load_report(report).changed) == 5
    assert not (tmp_path / "gen_0.txt").exists()


def test_unverified_writes_are_recorded_even_when_identical(tmp_path: Path) -> None:
    target = tmp_path / "a.txt"
    target.write_bytes(b"same")
    writer = RecordingWriter(tmp_path / "report.json")
    writer.write_if_changed(target, b"same")
    writer.write_if_changed(target, b"same")
    assert len(writer.records.changed) == 2


def test_verification_suppresses_identical_content(tmp_path: Path) -> None:
    same = tmp_path / "same.txt"
    same.write_bytes(b"unchanged")
    different = tmp_path / "different.txt"
    different.write_bytes(b"old")
    report = tmp_path / "report.json"

    writer = RecordingWriter(report, verify_against_filesystem=True)
    writer.write_if_changed(same, b"unchanged")
    writer.write_if_changed(different, b"new")
    writer.write_if_changed(tmp_path / "created.txt", b"fresh")
    writer.finalize()

    changed = {Path(u.path).name: u.data for u in load_report(report).changed}
    assert changed == {"different.txt": "new", "created.txt": "fresh"}
    assert different.read_bytes() == b"old"
    assert not (tmp_path / "created.txt").exists()


def test_verification_read_failure_raises_write_error(tmp_path: Path) -> None:
    target = tmp_path / "a_directory"
    target.mkdir()
    writer = RecordingWriter(tmp_path / "report.json", verify_against_filesystem=True)
    with pytest.raises(WriteError) as excinfo:
        writer.write_if_changed(target, b"data")
    assert excinfo.value.path == target
    assert writer.records.changed == []


def test_remove_recorded_only_for_existing_paths(tmp_path: Path) -> None:
    present = tmp_path / "present.txt"
    present.write_text("x")
    report = tmp_path / "report.json"

    writer = RecordingWriter(report)
    writer.remove(present)
    writer.remove(tmp_path / "absent.txt")
    writer.finalize()

    assert [r.path for r in load_report(report).removed] == [str(present)]
    assert present.exists()


def test_same_path_is_not_merged(tmp_path: Path) -> None:
    target = tmp_path / "a.txt"
    target.write_text("x")
    writer = RecordingWriter(tmp_path / "report.json")
    writer.write_if_changed(target, b"y")
    writer.remove(target)
    writer.write_if_changed(target, b"z")
    records = writer.records
    assert [r.data for r in records.changed] == [b"y", b"z"]
    assert [r.path for r in records.removed] == [target]


def test_finalize_without_writes_produces_empty_report(tmp_path: Path) -> None:
    report = tmp_path / "report.json"
    RecordingWriter(report).finalize()
    assert json.loads(report.read_text(encoding="utf-8")) == {"removed": [], "changed": []}


def test_report_matches_wire_format(tmp_path: Path) -> None:
    stale = tmp_path / "b"
    stale.write_text("old")
    report = tmp_path / "reports" / "codegen.json"

    writer = RecordingWriter(report, verify_against_filesystem=False)
    writer.write_if_changed("/a", b"x")
    writer.remove(stale)
    writer.finalize()

    assert json.loads(report.read_text(encoding="utf-8")) == {
        "removed": [{"path": str(stale)}],
        "changed": [{"path": "/a", "data": "x"}],
    }


def test_report_keeps_unicode_text(tmp_path: Path) -> None:
    report = tmp_path / "report.json"
    writer = RecordingWriter(report)
    writer.write_if_changed(tmp_path / "i18n.txt", "grüße ✓".encode("utf-8"))
    writer.finalize()
    assert load_report(report).changed[0].data == "grüße ✓"


def test_finalize_overwrites_previous_report(tmp_path: Path) -> None:
    report = tmp_path / "report.json"
    report.write_text('{"stale": true}')
    writer = RecordingWriter(report)
    writer.write_if_changed(tmp_path / "a.txt", b"a")
    writer.finalize()
    assert set(json.loads(report.read_text(encoding="utf-8"))) == {"removed", "changed"}


def test_finalize_failure_carries_report_path(tmp_path: Path) -> None:
    blocker = tmp_path / "file.txt"
    blocker.write_text("not a directory")
    report = blocker / "report.json"
    with pytest.raises(FinalizeError) as excinfo:
        RecordingWriter(report).finalize()
    assert excinfo.value.report_path == report


def test_non_utf8_content_is_rejected_before_writing(tmp_path: Path) -> None:
    report = tmp_path / "report.json"
    writer = RecordingWriter(report)
    writer.write_if_changed(tmp_path / "blob.bin", b"\xff\xfe\x00")
    with pytest.raises(UnicodeDecodeError):
        writer.finalize()
    assert not report.exists()


def test_concurrent_writers_record_every_call(tmp_path: Path) -> None:
    report = tmp_path / "report.json"
    writer = RecordingWriter(report)
    paths = [tmp_path / f"gen_{i}.txt" for i in range(200)]
    with ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(lambda p: writer.write_if_changed(p, p.name.encode()), paths))
    writer.finalize()

    changed = load_report(report).changed
    assert len(changed) == len(paths)
    assert {u.path for u in changed} == {str(p) for p in paths}
