"""
Comment and video export (CSV, ZIP)
"""

from .artifact import CSV_MIME_TYPE, ZIP_MIME_TYPE, ExportArtifact
from .archive_exporter import build_comments_archive
from .channel_exporter import ChannelCommentExporter
from .csv_exporter import (
    render_channel_comments_csv,
    render_video_comments_csv,
    render_videos_csv,
)

__all__ = [
    "CSV_MIME_TYPE",
    "ZIP_MIME_TYPE",
    "ExportArtifact",
    "ChannelCommentExporter",
    "build_comments_archive",
    "render_channel_comments_csv",
    "render_video_comments_csv",
    "render_videos_csv",
]
