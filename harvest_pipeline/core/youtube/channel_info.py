"""
Channel Information Domain Model
Channel references and resolved channels.
"""

from dataclasses import dataclass
from typing import List, Optional


REFERENCE_KINDS = ("id", "handle", "custom", "username")


@dataclass(frozen=True)
class ChannelReference:
    """
    A user-entered channel reference after classification.

    `kind` is one of REFERENCE_KINDS and `value` the part of the input that
    identifies the channel for that kind. `channel_id` stays None until the
    reference has been resolved.
    """
    raw: str
    kind: str
    value: str
    channel_id: Optional[str] = None


class ChannelInfo:
    """
    Domain model representing a resolved YouTube channel.
    Represents a VALID channel state only.
    """

    def __init__(
        self,
        channel_id: str,
        title: str,
        uploads_playlist_id: str,
        thumbnail_url: str = "",
        url: str = "",
        description: str = "",
        custom_url: str = "",
        subscriber_count: Optional[str] = None,
        video_count: Optional[str] = None,
        tags: Optional[List[str]] = None,
        reference: Optional[ChannelReference] = None
    ):
        self.channel_id = channel_id
        self.title = title
        self.uploads_playlist_id = uploads_playlist_id
        self.thumbnail_url = thumbnail_url
        self.url = url
        self.description = description
        self.custom_url = custom_url
        self.subscriber_count = subscriber_count
        self.video_count = video_count
        self.tags = list(tags or [])
        self.reference = reference
        # Owned by the calling application: last fetch error shown for this channel
        self.error: Optional[str] = None

    def __repr__(self) -> str:
        return f"ChannelInfo(title={self.title!r}, handle={self.custom_url!r}, id={self.channel_id!r})"
