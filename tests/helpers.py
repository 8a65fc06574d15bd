"""Builders and fakes shared by the harvest pipeline tests."""

from typing import Dict, List, Optional, Tuple

from harvest_pipeline.core.youtube.errors import RemoteRequestError
from harvest_pipeline.core.youtube.video_info import CommentInfo, VideoInfo


def make_video(video_id: str, title: str = "", comment_count: str = "0", **overrides) -> VideoInfo:
    data = dict(
        video_id=video_id,
        title=title or f"Video {video_id}",
        thumbnail_url=f"https://i.ytimg.com/vi/{video_id}/hqdefault.jpg",
        view_count="100",
        like_count="10",
        comment_count=comment_count,
        published_at="2024-01-01T00:00:00Z",
        duration="PT4M13S",
        definition="hd",
        is_for_kids=False,
        topic_categories=None,
        description=f"Description of {video_id}",
        tags=("music", "live"),
    )
    data.update(overrides)
    return VideoInfo(**data)


def make_comment(likes: int, author: str = "", text: str = "") -> CommentInfo:
    return CommentInfo(
        author=author or f"user{likes}",
        text=text or f"comment with {likes} likes",
        published_at="2024-02-01T00:00:00Z",
        like_count=likes,
    )


def channel_item(channel_id: str, title: str = "Some Channel", **statistics) -> dict:
    return {
        "id": channel_id,
        "snippet": {
            "title": title,
            "description": "About",
            "customUrl": "@somechannel",
            "thumbnails": {"medium": {"url": "https://yt3.ggpht.com/medium.jpg"}},
        },
        "contentDetails": {"relatedPlaylists": {"uploads": "UU" + channel_id[2:]}},
        "statistics": statistics or {"subscriberCount": "1200", "videoCount": "3"},
        "brandingSettings": {"channel": {"keywords": 'cooking "street food" travel'}},
    }


class FakeClient:
    """
    Stands in for YouTubeClient, recording every call by method name.

    Channels are looked up by selector (id / forUsername);
    playlist and comment pages are keyed by page token (None = first page).
    """

    def __init__(self):
        self.calls: List[Tuple[str, tuple]] = []
        self.channels: Dict[Tuple[str, str], List[dict]] = {}
        self.search_results: Dict[str, List[dict]] = {}
        self.playlist_pages: Dict[Optional[str], Tuple[List[str], Optional[str]]] = {}
        self.videos: Dict[str, VideoInfo] = {}
        self.comment_counts: Dict[str, int] = {}
        self.comment_pages: Dict[str, Dict[Optional[str], Tuple[List[CommentInfo], Optional[str]]]] = {}
        self.comment_errors: Dict[str, RemoteRequestError] = {}

    def count(self, method: str) -> int:
        return sum(1 for name, _ in self.calls if name == method)

    def list_channels(self, **selector):
        self.calls.append(("list_channels", tuple(selector.items())))
        (key, value), = selector.items()
        return self.channels.get((key, value), [])

    def search_channels(self, query, max_results=25):
        self.calls.append(("search_channels", (query,)))
        return self.search_results.get(query, [])

    def fetch_playlist_page(self, playlist_id, page_token=None, max_results=50):
        self.calls.append(("fetch_playlist_page", (playlist_id, page_token)))
        return self.playlist_pages[page_token]

    def fetch_videos_details(self, video_ids):
        self.calls.append(("fetch_videos_details", tuple(video_ids)))
        # The API does not promise to answer in request order
        return [self.videos[v] for v in reversed(video_ids) if v in self.videos]

    def fetch_comment_count(self, video_id):
        self.calls.append(("fetch_comment_count", (video_id,)))
        return self.comment_counts.get(video_id, 0)

    def fetch_comment_page(self, video_id, page_token=None, max_results=100):
        self.calls.append(("fetch_comment_page", (video_id, page_token)))
        if video_id in self.comment_errors:
            raise self.comment_errors[video_id]
        return self.comment_pages[video_id][page_token]

    def add_comments(self, video_id: str, pages: List[List[CommentInfo]], advertised: Optional[int] = None):
        tokens = [None] + [f"{video_id}-p{i}" for i in range(1, len(pages))]
        self.comment_pages[video_id] = {
            token: (page, tokens[i + 1] if i + 1 < len(tokens) else None)
            for i, (token, page) in enumerate(zip(tokens, pages))
        }
        total = sum(len(p) for p in pages)
        self.comment_counts[video_id] = total if advertised is None else advertised
