"""
Video Metadata Miner Service
Collects every video of a channel and keeps the result in the local cache.
"""

import logging
from typing import List

from .channel_info import ChannelInfo
from .pagination import VIDEO_WINDOW_SIZE, drain, hydrate
from .progress import ProgressSink, NULL_PROGRESS
from .video_info import VideoInfo
from .youtube_client import YouTubeClient

logger = logging.getLogger(__name__)

# playlistItems.list maximum page size
PLAYLIST_PAGE_SIZE = 50


class VideoMetadataMiner:
    """
    Service responsible for mining all video metadata from a channel.

    Responsibilities:
    - Iterate through the uploads playlist with pagination.
    - Efficiently batch detail requests to the YouTube API.
    - Serve and refresh the per-channel cache record.
    """

    def __init__(self, youtube_client: YouTubeClient, cache=None):
        """
        Args:
            youtube_client: Transport used for playlist and video requests.
            cache: Optional VideoCache serving and storing mined records.
        """
        self._client = youtube_client
        self._cache = cache

    def mine_all_videos(self, channel: ChannelInfo, progress: ProgressSink = NULL_PROGRESS) -> List[VideoInfo]:
        """
        Retrieves metadata for all videos in the channel's uploads playlist.

        Returns:
            List[VideoInfo]: Videos in playlist order.
        """
        logger.info(f"Starting metadata mining for channel: {channel.title}")

        # 1. Collect all video IDs from the uploads playlist (handles pagination)
        video_ids = self._discover_video_ids(channel, progress)
        total_discovered = len(video_ids)
        logger.info(f"Discovered {total_discovered} videos in uploads playlist")

        if total_discovered == 0:
            logger.warning("No videos found to mine.")
            return []

        # 2. Fetch detailed metadata in windows of 50
        videos = hydrate(
            video_ids,
            self._client.fetch_videos_details,
            key=lambda video: video.video_id,
            window_size=VIDEO_WINDOW_SIZE,
            progress=progress,
            label="Fetching video details"
        )
        logger.info(f"Fetched details for {len(videos)}/{total_discovered} videos")
        return videos

    def load_videos(
        self,
        channel: ChannelInfo,
        refresh: bool = False,
        progress: ProgressSink = NULL_PROGRESS
    ) -> List[VideoInfo]:
        """
        Returns the cached videos of a channel, mining and caching them on a miss.

        An existing record is served as-is, even when it is empty.
        """
        if self._cache is not None and not refresh:
            cached = self._cache.get(channel.channel_id)
            if cached is not None:
                logger.info(f"Loaded {len(cached)} cached videos for {channel.title}")
                return cached

        videos = self.mine_all_videos(channel, progress)
        if self._cache is not None:
            self._cache.put(channel.channel_id, videos)
        return videos

    def forget(self, channel_id: str) -> None:
        """Drops the cache record of a channel."""
        if self._cache is not None:
            self._cache.delete(channel_id)

    def _discover_video_ids(self, channel: ChannelInfo, progress: ProgressSink) -> List[str]:
        """Iterates through playlist items to collect video IDs."""
        def fetch_page(cursor, page_size):
            return self._client.fetch_playlist_page(
                playlist_id=channel.uploads_playlist_id,
                page_token=cursor,
                max_results=page_size
            )

        return drain(fetch_page, PLAYLIST_PAGE_SIZE, progress=progress, label="Fetching video list")
