"""
Comment Aggregator
Collects every top-level comment of a video.
"""

import logging
from typing import List, Optional, Tuple

from .errors import CommentsDisabledError, RemoteRequestError
from .pagination import PageStream
from .progress import ProgressSink, ProgressSnapshot, NULL_PROGRESS
from .video_info import CommentInfo
from .youtube_client import YouTubeClient

logger = logging.getLogger(__name__)

# commentThreads.list maximum page size
COMMENT_PAGE_SIZE = 100
COMMENTS_DISABLED_REASON = "commentsDisabled"


class CommentAggregator:
    """
    Drains commentThreads.list for one video at a time.

    Progress is reported as a percentage of the comment count advertised by
    the video's statistics. That count includes replies and may be stale, so
    the percentage is capped at 100 rather than trusted as exact.
    """

    def __init__(self, client: YouTubeClient, page_size: int = COMMENT_PAGE_SIZE):
        if not 1 <= page_size <= COMMENT_PAGE_SIZE:
            raise ValueError(f"page_size must be between 1 and {COMMENT_PAGE_SIZE}, got {page_size}")
        self._client = client
        self._page_size = page_size

    def collect(self, video_id: str, progress: ProgressSink = NULL_PROGRESS) -> List[CommentInfo]:
        """
        Returns all top-level comments of `video_id`, in API order.

        Raises:
            CommentsDisabledError: If the video has comments turned off.
            RemoteRequestError: For any other API failure.
        """
        advertised = self._client.fetch_comment_count(video_id)
        if advertised == 0:
            logger.info(f"Video {video_id} advertises no comments, skipping")
            return []

        def fetch_page(cursor: Optional[str], page_size: int) -> Tuple[List[CommentInfo], Optional[str]]:
            return self._client.fetch_comment_page(video_id, page_token=cursor, max_results=page_size)

        comments: List[CommentInfo] = []
        try:
            for page in PageStream(fetch_page, self._page_size):
                comments.extend(page)
                progress.update(ProgressSnapshot(current=len(comments), total=advertised, label=video_id))
        except RemoteRequestError as e:
            if e.reason == COMMENTS_DISABLED_REASON:
                raise CommentsDisabledError(video_id) from e
            raise

        progress.update(ProgressSnapshot(current=len(comments), total=advertised, label=video_id, done=True))
        logger.info(f"Collected {len(comments)} comments for {video_id} (advertised {advertised})")
        return comments
