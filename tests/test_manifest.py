from __future__ import annotations

from datetime import datetime, timedelta, timezone

from tentapress_export.export import (
    APP_NAME,
    SCHEMA_VERSION,
    ArchiveWriter,
    ExportManifest,
    read_manifest,
)


def test_build_manifest_shape():
    when = datetime(2026, 10, 16, 9, 30, 15, 123456, tzinfo=timezone.utc)
    manifest = ExportManifest.build(
        settings=True, theme=False, plugins=True, seo=False, generated_at=when,
    )

    assert manifest.to_dict() == {
        "schema_version": SCHEMA_VERSION,
        "generated_at_utc": "2026-10-16T09:30:15+00:00",
        "app": {"name": APP_NAME},
        "includes": {
            "pages": True,
            "settings": True,
            "theme": False,
            "plugins": True,
            "seo": False,
        },
    }


def test_generated_at_is_normalised_to_utc():
    local = datetime(2026, 10, 16, 11, 0, 0, tzinfo=timezone(timedelta(hours=2)))
    manifest = ExportManifest.build(
        settings=False, theme=False, plugins=False, seo=False, generated_at=local,
    )
    assert manifest.generated_at_utc == "2026-10-16T09:00:00+00:00"


def test_manifest_round_trips_through_archive(tmp_path):
    manifest = ExportManifest.build(settings=True, theme=True, plugins=True, seo=True)
    path = tmp_path / "m.zip"
    with ArchiveWriter(path) as writer:
        writer.add_document("manifest.json", manifest.to_dict())

    loaded = read_manifest(path)

    assert loaded == manifest


def test_read_manifest_missing_entry(tmp_path):
    path = tmp_path / "no-manifest.zip"
    with ArchiveWriter(path) as writer:
        writer.add_document("pages.json", {"count": 0, "items": []})

    assert read_manifest(path) is None
