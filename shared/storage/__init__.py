"""
Local storage: directory layout and the per-channel video cache
"""

from .storage_manager import StorageManager
from .video_cache import JsonFileStore, MemoryStore, VideoCache

__all__ = ["StorageManager", "JsonFileStore", "MemoryStore", "VideoCache"]
