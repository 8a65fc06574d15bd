"""
Video Information Domain Model
Videos and their top-level comments.
"""

import re
from dataclasses import dataclass, asdict, field
from typing import Dict, Any, Optional, Tuple

_ISO_DURATION = re.compile(r"PT(?:(\d+)H)?(?:(\d+)M)?(?:(\d+)S)?")


@dataclass(frozen=True)
class VideoInfo:
    """
    Domain model representing a single YouTube video's metadata.
    Immutable dataclass for thread-safety and clarity.

    Counters keep the API's textual representation ("0" when absent).
    """
    video_id: str
    title: str
    thumbnail_url: str
    view_count: str
    like_count: str
    comment_count: str
    published_at: str
    duration: str
    definition: str
    is_for_kids: bool
    topic_categories: Optional[Tuple[str, ...]] = None
    description: str = ""
    tags: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def advertised_comments(self) -> int:
        """Comment count as reported by the video statistics (0 if unreadable)."""
        try:
            return int(self.comment_count)
        except (TypeError, ValueError):
            return 0

    @property
    def duration_seconds(self) -> int:
        match = _ISO_DURATION.match(self.duration or "")
        if not match:
            return 0
        hours, minutes, seconds = (int(g) if g else 0 for g in match.groups())
        return hours * 3600 + minutes * 60 + seconds

    @property
    def display_duration(self) -> str:
        """Duration as H:MM:SS, or M:SS for videos shorter than an hour."""
        if not _ISO_DURATION.match(self.duration or ""):
            return "0:00"
        total = self.duration_seconds
        hours, rest = divmod(total, 3600)
        minutes, seconds = divmod(rest, 60)
        if hours > 0:
            return f"{hours}:{minutes:02d}:{seconds:02d}"
        return f"{minutes}:{seconds:02d}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert object to dictionary for serialization (e.g., CSV, cache)."""
        data = asdict(self)
        data["tags"] = list(self.tags)
        if self.topic_categories is not None:
            data["topic_categories"] = list(self.topic_categories)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "VideoInfo":
        topics = data.get("topic_categories")
        return cls(
            video_id=data["video_id"],
            title=data.get("title", ""),
            thumbnail_url=data.get("thumbnail_url", ""),
            view_count=data.get("view_count", "0"),
            like_count=data.get("like_count", "0"),
            comment_count=data.get("comment_count", "0"),
            published_at=data.get("published_at", ""),
            duration=data.get("duration", ""),
            definition=data.get("definition", "sd"),
            is_for_kids=bool(data.get("is_for_kids", False)),
            topic_categories=tuple(topics) if topics is not None else None,
            description=data.get("description", ""),
            tags=tuple(data.get("tags") or ()),
        )


@dataclass(frozen=True)
class CommentInfo:
    """A top-level comment. Held in memory only for the duration of an export."""
    author: str
    text: str
    published_at: str
    like_count: int
