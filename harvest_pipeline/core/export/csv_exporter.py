"""
CSV Exporter
Renders comments and video metadata as CSV text.

Comments are ordered by like count, highest first; ties keep fetch order.
Video description and tags are written only on a video's first row.
Fields are quoted only when they contain a comma, a quote or a line break.
"""

import logging
from typing import List, Sequence, Tuple

import pandas as pd

from ..youtube.video_info import CommentInfo, VideoInfo
from .artifact import CSV_MIME_TYPE, ExportArtifact, safe_name

logger = logging.getLogger(__name__)

TAG_SEPARATOR = " | "
# RFC 4180. The csv writer quotes fields containing any terminator character,
# so both CR and LF inside a field get quoted.
ROW_TERMINATOR = "\r\n"

VIDEO_COMMENT_COLUMNS = ["Video Description", "Video Tags", "Author", "Published At", "Like Count", "Comment Text"]
CHANNEL_COMMENT_COLUMNS = ["Video Title"] + VIDEO_COMMENT_COLUMNS
VIDEO_COLUMNS = [
    "video_id", "title", "published_at", "duration", "view_count", "like_count",
    "comment_count", "definition", "is_for_kids", "topic_categories", "tags", "thumbnail_url",
]

VideoComments = Tuple[VideoInfo, List[CommentInfo]]


def sort_by_likes(comments: Sequence[CommentInfo]) -> List[CommentInfo]:
    """Highest like count first. sorted() is stable, so ties keep their order."""
    return sorted(comments, key=lambda c: c.like_count, reverse=True)


def _comment_rows(video: VideoInfo, comments: Sequence[CommentInfo]) -> List[List]:
    rows = []
    for index, c in enumerate(sort_by_likes(comments)):
        if index == 0:
            context = [video.description, TAG_SEPARATOR.join(video.tags)]
        else:
            context = ["", ""]
        rows.append(context + [c.author, c.published_at, c.like_count, c.text])
    return rows


def _to_csv(rows: List[List], columns: List[str]) -> str:
    df = pd.DataFrame(rows, columns=columns)
    text = df.to_csv(index=False, lineterminator=ROW_TERMINATOR)
    # Rows are CRLF-separated, without a trailing terminator
    return text[:-len(ROW_TERMINATOR)] if text.endswith(ROW_TERMINATOR) else text


def render_video_comments_csv(video: VideoInfo, comments: Sequence[CommentInfo]) -> str:
    """CSV for one video's comments. The header is written even without comments."""
    return _to_csv(_comment_rows(video, comments), VIDEO_COMMENT_COLUMNS)


def render_channel_comments_csv(groups: Sequence[VideoComments]) -> str:
    """
    One CSV for many videos, in the order given.

    The video title is repeated on every row so rows can be told apart;
    description and tags follow the first-row rule per video.
    """
    rows = []
    for video, comments in groups:
        rows.extend([video.title] + row for row in _comment_rows(video, comments))
    return _to_csv(rows, CHANNEL_COMMENT_COLUMNS)


def render_videos_csv(videos: Sequence[VideoInfo]) -> str:
    """Video metadata sheet, one row per video in the order given."""
    rows = []
    for v in videos:
        data = v.to_dict()
        data["tags"] = TAG_SEPARATOR.join(v.tags)
        data["topic_categories"] = TAG_SEPARATOR.join(v.topic_categories or ())
        rows.append([data[col] for col in VIDEO_COLUMNS])
    return _to_csv(rows, VIDEO_COLUMNS)


def video_comments_artifact(video: VideoInfo, comments: Sequence[CommentInfo]) -> ExportArtifact:
    filename = f"{safe_name(video.title).lower() or video.video_id}_comments.csv"
    content = render_video_comments_csv(video, comments)
    logger.info(f"Rendered {len(comments)} comments of {video.video_id} into {filename}")
    return ExportArtifact(filename, CSV_MIME_TYPE, content.encode("utf-8"))


def videos_artifact(channel_name: str, videos: Sequence[VideoInfo]) -> ExportArtifact:
    filename = f"{safe_name(channel_name).lower()}_videos.csv"
    return ExportArtifact(filename, CSV_MIME_TYPE, render_videos_csv(videos).encode("utf-8"))
