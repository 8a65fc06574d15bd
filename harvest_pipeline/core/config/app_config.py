"""
Application Configuration Model
Represents a validated configuration state
"""


class AppConfig:
    """
    Immutable configuration object for Channel Comment Harvest.

    Represents a VALID configuration state only.
    All validation must be performed before instantiation.
    """

    def __init__(
        self,
        api_key: str,
        channel: str,
        export_format: str = "zip",
        refresh: bool = False,
        comment_page_size: int = 100,
        storage_root: str = "./storage"
    ):
        """
        Initialize AppConfig with validated values.

        Args:
            api_key: YouTube API key (non-empty)
            channel: Channel ID, @handle, or channel URL (non-empty)
            export_format: 'csv' (single file) or 'zip' (one file per video)
            refresh: Whether to ignore the cached video list (default: False)
            comment_page_size: Comments requested per page (1 - 100)
            storage_root: Root directory for storage (default: "./storage")
        """
        self._api_key = api_key
        self._channel = channel
        self._export_format = export_format
        self._refresh = refresh
        self._comment_page_size = comment_page_size
        self._storage_root = storage_root

    @property
    def api_key(self) -> str:
        """YouTube API key."""
        return self._api_key

    @property
    def channel(self) -> str:
        """Channel identifier (ID, @handle, or URL)."""
        return self._channel

    @property
    def export_format(self) -> str:
        return self._export_format

    @property
    def refresh(self) -> bool:
        """Whether to re-mine videos even when a cache record exists."""
        return self._refresh

    @property
    def comment_page_size(self) -> int:
        return self._comment_page_size

    @property
    def storage_root(self) -> str:
        """Root directory for storage."""
        return self._storage_root

    def __repr__(self) -> str:
        """String representation for debugging."""
        return (
            f"AppConfig(channel={self.channel!r}, "
            f"export_format={self.export_format!r}, "
            f"refresh={self.refresh}, "
            f"storage_root={self.storage_root!r})"
        )
