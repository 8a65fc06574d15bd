"""Tests for shared/storage/storage_manager.py"""

from harvest_pipeline.core.export.artifact import CSV_MIME_TYPE, ExportArtifact
from shared.storage import StorageManager, VideoCache

from helpers import make_video


class TestStorageManager:
    def test_creates_layout(self, tmp_path):
        storage = StorageManager(str(tmp_path / "storage"))

        assert storage.cache_path.is_dir()
        assert storage.exports_path.is_dir()
        assert storage.logs_path.is_dir()

    def test_persist_export_does_not_overwrite(self, tmp_path):
        storage = StorageManager(str(tmp_path))
        first = ExportArtifact("a.csv", CSV_MIME_TYPE, b"first")
        second = ExportArtifact("a.csv", CSV_MIME_TYPE, b"second")

        written = storage.persist_export(first)

        assert written == storage.exports_path / "a.csv"
        assert storage.persist_export(second) is None
        assert written.read_bytes() == b"first"

    def test_cache_store_lives_under_cache_dir(self, tmp_path):
        storage = StorageManager(str(tmp_path))
        cache = VideoCache(storage.cache_store())

        cache.put("UCabc", [make_video("v1")])

        assert (storage.cache_path / "UCabc.json").exists()
