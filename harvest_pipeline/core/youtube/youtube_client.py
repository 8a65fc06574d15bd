"""
YouTube API Client
Thin transport over the YouTube Data API v3.

Every public method issues exactly one request. HttpError is translated
into RemoteRequestError at this boundary, keeping the API's machine-readable
reason so callers never have to inspect error messages.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import unquote

from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from .errors import RemoteRequestError
from .pagination import VIDEO_WINDOW_SIZE
from .video_info import CommentInfo, VideoInfo

logger = logging.getLogger(__name__)

CHANNEL_PARTS = "snippet,contentDetails,statistics,brandingSettings"
VIDEO_PARTS = "snippet,statistics,contentDetails,status,topicDetails"


def _error_reason(error: HttpError) -> Optional[str]:
    """First machine-readable reason in the error payload, if any."""
    details = getattr(error, "error_details", None)
    if isinstance(details, list):
        for detail in details:
            if isinstance(detail, dict) and detail.get("reason"):
                return detail["reason"]
    return None


def _topic_label(url: str) -> str:
    """'https://en.wikipedia.org/wiki/Role-playing_video_game' -> 'Role-playing video game'."""
    return unquote(url.rstrip("/").split("/")[-1].replace("_", " "))


class YouTubeClient:
    """
    YouTube Data API client.

    The googleapiclient Resource can be injected, which is how tests drive
    the client without network access.
    """

    def __init__(self, api_key: Optional[str] = None, service: Any = None):
        """Initialize the YouTube API service."""
        if service is None:
            if not api_key:
                raise ValueError("An API key is required when no service is injected")
            # static_discovery=False prevents the 'file_cache' warning in logs
            service = build('youtube', 'v3', developerKey=api_key, static_discovery=False)
        self._service = service

    def _execute(self, request: Any, action: str) -> Dict[str, Any]:
        try:
            response = request.execute()
        except HttpError as e:
            status = getattr(e.resp, "status", None)
            message = getattr(e, "reason", None) or str(e)
            reason = _error_reason(e)
            logger.error(f"API error while {action}: status={status} reason={reason} message={message}")
            raise RemoteRequestError(message, status=int(status) if status else None, reason=reason) from e

        if not isinstance(response, dict):
            raise RemoteRequestError(f"Malformed response while {action}: expected a JSON object")
        return response

    def list_channels(self, **selector: str) -> List[Dict[str, Any]]:
        """
        channels.list with one selector: id=... or forUsername=...
        """
        response = self._execute(
            self._service.channels().list(part=CHANNEL_PARTS, **selector),
            f"listing channels {selector}"
        )
        return response.get("items") or []

    def search_channels(self, query: str, max_results: int = 25) -> List[Dict[str, Any]]:
        """search.list restricted to channels. Costs 100 quota units."""
        response = self._execute(
            self._service.search().list(part="snippet", q=query, type="channel", maxResults=max_results),
            f"searching channels for {query!r}"
        )
        return response.get("items") or []

    def fetch_playlist_page(
        self,
        playlist_id: str,
        page_token: Optional[str] = None,
        max_results: int = 50
    ) -> Tuple[List[str], Optional[str]]:
        """One page of playlistItems.list as (video ids, next page token)."""
        response = self._execute(
            self._service.playlistItems().list(
                part="contentDetails",
                playlistId=playlist_id,
                maxResults=max_results,
                pageToken=page_token
            ),
            f"fetching playlist items for {playlist_id}"
        )
        video_ids = []
        for item in response.get("items", []):
            v_id = item.get("contentDetails", {}).get("videoId")
            if v_id:
                video_ids.append(v_id)
        return video_ids, response.get("nextPageToken")

    def fetch_videos_details(self, video_ids: List[str]) -> List[VideoInfo]:
        """videos.list for one window of at most VIDEO_WINDOW_SIZE ids."""
        if len(video_ids) > VIDEO_WINDOW_SIZE:
            raise ValueError(f"videos.list accepts at most {VIDEO_WINDOW_SIZE} ids, got {len(video_ids)}")

        response = self._execute(
            self._service.videos().list(part=VIDEO_PARTS, id=",".join(video_ids)),
            f"fetching details for {len(video_ids)} videos"
        )
        try:
            return [self._parse_video(item) for item in response.get("items", [])]
        except (KeyError, TypeError) as e:
            raise RemoteRequestError(f"Malformed video payload: missing {e}") from e

    def fetch_comment_count(self, video_id: str) -> int:
        """Advertised comment count from the video statistics."""
        response = self._execute(
            self._service.videos().list(part="statistics", id=video_id),
            f"fetching statistics for {video_id}"
        )
        items = response.get("items") or []
        if not items:
            return 0
        try:
            return int(items[0].get("statistics", {}).get("commentCount", 0))
        except (TypeError, ValueError):
            return 0

    def fetch_comment_page(
        self,
        video_id: str,
        page_token: Optional[str] = None,
        max_results: int = 100
    ) -> Tuple[List[CommentInfo], Optional[str]]:
        """One page of top-level comment threads as (comments, next page token)."""
        response = self._execute(
            self._service.commentThreads().list(
                part="snippet",
                videoId=video_id,
                maxResults=max_results,
                pageToken=page_token
            ),
            f"fetching comments for {video_id}"
        )
        comments = []
        try:
            for item in response.get("items", []):
                snippet = item["snippet"]["topLevelComment"]["snippet"]
                comments.append(CommentInfo(
                    author=snippet.get("authorDisplayName", ""),
                    text=snippet.get("textDisplay", ""),
                    published_at=snippet.get("publishedAt", ""),
                    like_count=int(snippet.get("likeCount", 0))
                ))
        except (KeyError, TypeError, ValueError) as e:
            raise RemoteRequestError(f"Malformed comment payload: {e}") from e
        return comments, response.get("nextPageToken")

    @staticmethod
    def _parse_video(item: Dict[str, Any]) -> VideoInfo:
        snippet = item["snippet"]
        stats = item.get("statistics", {})
        content = item.get("contentDetails", {})
        status = item.get("status", {})
        thumbnails = snippet.get("thumbnails", {})
        thumbnail = thumbnails.get("high") or thumbnails.get("default") or {}

        topics = None
        topic_details = item.get("topicDetails")
        if topic_details and topic_details.get("topicCategories") is not None:
            topics = tuple(
                label for label in (_topic_label(url) for url in topic_details["topicCategories"]) if label
            )

        return VideoInfo(
            video_id=item["id"],
            title=snippet.get("title", "Untitled"),
            thumbnail_url=thumbnail.get("url", ""),
            view_count=stats.get("viewCount") or "0",
            like_count=stats.get("likeCount") or "0",
            comment_count=stats.get("commentCount") or "0",
            published_at=snippet.get("publishedAt", ""),
            duration=content.get("duration", ""),
            definition=content.get("definition", "sd"),
            is_for_kids=bool(status.get("madeForKids", False)),
            topic_categories=topics,
            description=snippet.get("description", ""),
            tags=tuple(snippet.get("tags") or ())
        )
