"""
Storage Manager for Channel Comment Harvest
Directory layout for the cache, exported artifacts and logs.
"""

import logging
from pathlib import Path
from typing import Optional

from .video_cache import JsonFileStore

logger = logging.getLogger(__name__)


class StorageManager:
    """
    Service responsible for managing local storage and organizing project files.

    Responsibilities:
    - Create and validate storage directory structure.
    - Provide canonical paths for all storage components.
    - Persist export artifacts without overwriting earlier ones.
    """

    def __init__(self, storage_root: str = "./storage"):
        """
        Initialize the StorageManager.

        Args:
            storage_root (str): The base directory for all storage.
        """
        self._root = Path(storage_root).resolve()

        # Define subdirectories
        self._cache_dir = self._root / "cache"
        self._exports_dir = self._root / "exports"
        self._logs_dir = self._root / "logs"

        self._ensure_directories()

    def _ensure_directories(self):
        """Ensures that all required storage directories exist."""
        dirs = [
            self._cache_dir,
            self._exports_dir,
            self._logs_dir
        ]
        for d in dirs:
            d.mkdir(parents=True, exist_ok=True)
            logger.info(f"✓ Storage directory verified: {d}")

    @property
    def cache_path(self) -> Path:
        return self._cache_dir

    @property
    def exports_path(self) -> Path:
        return self._exports_dir

    @property
    def logs_path(self) -> Path:
        return self._logs_dir

    def cache_store(self) -> JsonFileStore:
        """Key-value store backing the video cache."""
        return JsonFileStore(self._cache_dir)

    def persist_export(self, artifact) -> Optional[Path]:
        """
        Writes an export artifact into storage/exports.

        Returns the written path, or None when a file with the same name
        already exists.
        """
        destination = self._exports_dir / artifact.filename

        if destination.exists():
            logger.warning(f"Destination already exists, skipping: {destination}")
            return None

        destination.write_bytes(artifact.content)
        logger.info(f"✓ Export written to storage: {destination.name} ({len(artifact.content)} bytes)")
        return destination

    def __repr__(self):
        return f"StorageManager(root={self._root})"
