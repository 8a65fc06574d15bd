"""
YouTube API integration module
"""

from .channel_info import ChannelInfo, ChannelReference
from .errors import (
    HarvestError,
    ChannelResolutionError,
    InvalidReferenceError,
    NotFoundError,
    RemoteRequestError,
    CommentsDisabledError,
    NoExportableDataError,
)
from .video_info import CommentInfo, VideoInfo
from .youtube_client import YouTubeClient

__all__ = [
    "ChannelInfo",
    "ChannelReference",
    "CommentInfo",
    "VideoInfo",
    "YouTubeClient",
    "HarvestError",
    "ChannelResolutionError",
    "InvalidReferenceError",
    "NotFoundError",
    "RemoteRequestError",
    "CommentsDisabledError",
    "NoExportableDataError",
]
