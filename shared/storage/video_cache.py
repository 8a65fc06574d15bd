"""
Video Cache
Whole-collection persistence of a channel's videos, keyed by channel id.
"""

import json
import logging
import os
import re
import tempfile
from pathlib import Path
from typing import Dict, List, Optional

from harvest_pipeline.core.youtube.video_info import VideoInfo

logger = logging.getLogger(__name__)

_VALID_KEY = re.compile(r"^[\w-]+$")


def _check_key(key: str) -> str:
    if not key or not _VALID_KEY.match(key):
        raise ValueError(f"Invalid cache key: {key!r}")
    return key


class MemoryStore:
    """Key-value store held in a dict. Used in tests and short-lived sessions."""

    def __init__(self):
        self._data: Dict[str, str] = {}

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def put(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)


class JsonFileStore:
    """
    One JSON document per key inside a directory.

    Writes go through a temporary file in the same directory followed by
    os.replace, so readers see either the old record or the new one.
    """

    def __init__(self, directory: Path):
        self._dir = Path(directory)
        self._dir.mkdir(parents=True, exist_ok=True)

    def _path(self, key: str) -> Path:
        return self._dir / f"{_check_key(key)}.json"

    def get(self, key: str) -> Optional[str]:
        path = self._path(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def put(self, key: str, value: str) -> None:
        path = self._path(key)
        fd, tmp_name = tempfile.mkstemp(dir=self._dir, prefix=f".{key}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(value)
            os.replace(tmp_name, path)
        except BaseException:
            if os.path.exists(tmp_name):
                os.remove(tmp_name)
            raise

    def delete(self, key: str) -> None:
        path = self._path(key)
        if path.exists():
            path.unlink()

    def __repr__(self):
        return f"JsonFileStore(dir={self._dir})"


class VideoCache:
    """
    Cache of mined videos, one record per channel.

    get() returns None when the channel has never been fetched, which is
    different from a cached empty list. Store errors propagate unchanged.
    """

    def __init__(self, store):
        self._store = store

    def get(self, channel_id: str) -> Optional[List[VideoInfo]]:
        raw = self._store.get(_check_key(channel_id))
        if raw is None:
            return None
        return [VideoInfo.from_dict(item) for item in json.loads(raw)]

    def put(self, channel_id: str, videos: List[VideoInfo]) -> None:
        payload = json.dumps([v.to_dict() for v in videos], ensure_ascii=False)
        self._store.put(_check_key(channel_id), payload)
        logger.info(f"Cached {len(videos)} videos for channel {channel_id}")

    def delete(self, channel_id: str) -> None:
        self._store.delete(_check_key(channel_id))
        logger.info(f"Removed cached videos for channel {channel_id}")
