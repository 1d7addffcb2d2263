import json
from datetime import datetime
from pathlib import Path

from backend.media_drop.storage import build_metadata, sidecar_path, write_metadata


def test_build_metadata_formats_create_date() -> None:
    record = build_metadata("photo.jpg", 2048, datetime(2024, 3, 9, 7, 5, 1))

    assert record.file_name == "photo.jpg"
    assert record.file_size == 2048
    assert record.create_date == "2024/03/09 07:05:01"


def test_sidecar_path_appends_json_suffix(tmp_path: Path) -> None:
    content = tmp_path / "6f1c1a2e-0000-4000-8000-000000000000"

    assert sidecar_path(content) == tmp_path / "6f1c1a2e-0000-4000-8000-000000000000.json"


def test_write_metadata_is_indented_and_ordered(tmp_path: Path) -> None:
    content = tmp_path / "abc"
    record = build_metadata("notes.md", 12, datetime(2023, 12, 31, 23, 59, 59))

    metadata_path = write_metadata(content, record)

    text = metadata_path.read_text(encoding="utf-8")
    assert "\n" in text
    assert list(json.loads(text)) == ["file_name", "create_date", "file_size"]
    assert json.loads(text) == {
        "file_name": "notes.md",
        "create_date": "2023/12/31 23:59:59",
        "file_size": 12,
    }


def test_write_metadata_overwrites_existing_record(tmp_path: Path) -> None:
    content = tmp_path / "abc"
    sidecar_path(content).write_text("stale", encoding="utf-8")

    write_metadata(content, build_metadata("fresh.txt", 1))

    assert json.loads(sidecar_path(content).read_text(encoding="utf-8"))["file_name"] == "fresh.txt"
