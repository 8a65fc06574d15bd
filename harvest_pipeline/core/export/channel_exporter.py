"""
Channel Comment Exporter
Collects comments for every video of a channel and packages them.
"""

import logging
from typing import List, Sequence

from ..youtube.channel_info import ChannelInfo
from ..youtube.comment_aggregator import CommentAggregator
from ..youtube.errors import CommentsDisabledError, HarvestError, NoExportableDataError
from ..youtube.progress import ProgressSink, ProgressSnapshot, NULL_PROGRESS
from ..youtube.video_info import CommentInfo, VideoInfo
from .archive_exporter import build_comments_archive
from .artifact import CSV_MIME_TYPE, ExportArtifact, safe_name
from .csv_exporter import VideoComments, render_channel_comments_csv, video_comments_artifact

logger = logging.getLogger(__name__)

EXPORT_FORMATS = ("csv", "zip")


class ChannelCommentExporter:
    """
    Service responsible for exporting a channel's comments.

    Responsibilities:
    - Fetch comments video by video, one at a time.
    - Skip videos that fail (disabled comments, API errors) without aborting.
    - Render a single CSV or a ZIP with one CSV per video.
    """

    def __init__(self, aggregator: CommentAggregator):
        self._aggregator = aggregator

    def collect(self, videos: Sequence[VideoInfo], progress: ProgressSink = NULL_PROGRESS) -> List[VideoComments]:
        """
        Fetches comments for every video advertising at least one comment.

        Returns (video, comments) pairs for the videos that could be fetched,
        in input order.
        """
        candidates = [v for v in videos if v.advertised_comments > 0]
        if not candidates:
            raise NoExportableDataError("No videos with comments found in this channel.")

        total = len(candidates)
        groups: List[VideoComments] = []
        for index, video in enumerate(candidates, start=1):
            progress.update(ProgressSnapshot(current=index, total=total, label=video.title))
            try:
                comments = self._aggregator.collect(video.video_id)
            except CommentsDisabledError:
                logger.info(f"Comments disabled for {video.title!r}, skipping")
                continue
            except HarvestError as e:
                logger.warning(f"Could not fetch comments for {video.title!r}: {e}")
                continue
            groups.append((video, comments))

        logger.info(f"Fetched comments for {len(groups)}/{total} videos")
        return groups

    def export(
        self,
        channel: ChannelInfo,
        videos: Sequence[VideoInfo],
        export_format: str = "zip",
        progress: ProgressSink = NULL_PROGRESS
    ) -> ExportArtifact:
        """
        Exports all comments of a channel as 'csv' (one file) or 'zip' (one file per video).

        Raises:
            NoExportableDataError: If no comments could be collected.
            ValueError: For an unknown export format.
        """
        if export_format not in EXPORT_FORMATS:
            raise ValueError(f"Unknown export format {export_format!r}, expected one of {EXPORT_FORMATS}")

        folder_name = safe_name(channel.title).lower()
        groups = self.collect(videos, progress)

        if export_format == "zip":
            return build_comments_archive(folder_name, groups)

        if not any(comments for _, comments in groups):
            raise NoExportableDataError("Could not fetch any comments from the videos in this channel.")
        content = render_channel_comments_csv(groups)
        return ExportArtifact(f"{folder_name}_all_comments.csv", CSV_MIME_TYPE, content.encode("utf-8"))

    def export_video(self, video: VideoInfo, progress: ProgressSink = NULL_PROGRESS) -> ExportArtifact:
        """Fetches and exports the comments of a single video. Errors propagate."""
        comments: List[CommentInfo] = self._aggregator.collect(video.video_id, progress)
        return video_comments_artifact(video, comments)
