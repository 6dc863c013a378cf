from __future__ import annotations

from datetime import datetime, timezone

import pytest

from tentapress_export.utils.temp import (
    cleanup_export,
    ensure_export_dir,
    export_filename,
    reserve_export_path,
)

NOW = datetime(2026, 10, 16, 9, 30, 5, tzinfo=timezone.utc)


def test_export_filename_convention():
    assert export_filename(NOW) == "tentapress-export-20261016-093005.zip"
    assert export_filename(NOW, suffix="abc") == "tentapress-export-20261016-093005-abc.zip"


def test_ensure_export_dir_creates_parents(tmp_path):
    target = tmp_path / "app" / "tp-exports"
    assert ensure_export_dir(target) == target
    assert target.is_dir()
    # second call is a no-op
    ensure_export_dir(target)


def test_ensure_export_dir_over_a_file(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("x")
    with pytest.raises(OSError):
        ensure_export_dir(blocker)


def test_reserve_export_path_adds_suffix_on_collision(tmp_path):
    first = reserve_export_path(tmp_path, NOW)
    assert first.name == "tentapress-export-20261016-093005.zip"

    first.write_bytes(b"")
    second = reserve_export_path(tmp_path, NOW)

    assert second != first
    assert second.name.startswith("tentapress-export-20261016-093005-")
    assert second.suffix == ".zip"


def test_cleanup_export(tmp_path):
    f = tmp_path / "x.zip"
    f.write_bytes(b"zip")

    cleanup_export(f)
    assert not f.exists()

    # missing file and None are both fine
    cleanup_export(f)
    cleanup_export(None)
