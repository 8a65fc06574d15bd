"""
Archive Exporter
Packs one comments CSV per video into a single ZIP under one folder.
"""

import io
import logging
import zipfile
from typing import Sequence, Set

from ..youtube.errors import NoExportableDataError
from .artifact import ZIP_MIME_TYPE, ExportArtifact, safe_name
from .csv_exporter import VideoComments, render_video_comments_csv

logger = logging.getLogger(__name__)

MAX_FILENAME_LENGTH = 100


def _unique_name(base: str, taken: Set[str], max_length: int = MAX_FILENAME_LENGTH) -> str:
    """Numbers repeated names, trimming the base so the suffix fits within max_length."""
    name = base[:max_length]
    counter = 2
    while name in taken:
        suffix = f"_{counter}"
        name = base[:max_length - len(suffix)] + suffix
        counter += 1
    taken.add(name)
    return name


def build_comments_archive(folder_name: str, groups: Sequence[VideoComments]) -> ExportArtifact:
    """
    Builds `<folder_name>_comments.zip` holding `<folder_name>/<title>.csv` per video.

    Videos without comments get no file. Titles that sanitize to the same
    name are numbered in input order.

    Raises:
        NoExportableDataError: If no video contributed a file.
    """
    buffer = io.BytesIO()
    taken: Set[str] = set()
    files_added = 0

    with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED) as archive:
        for video, comments in groups:
            if not comments:
                logger.info(f"No comments for {video.title!r}, skipping file")
                continue
            base = safe_name(video.title, MAX_FILENAME_LENGTH) or video.video_id
            name = _unique_name(base, taken)
            archive.writestr(f"{folder_name}/{name}.csv", render_video_comments_csv(video, comments))
            files_added += 1

    if files_added == 0:
        raise NoExportableDataError("Could not fetch any comments to generate a ZIP file.")

    logger.info(f"Archive {folder_name}_comments.zip built with {files_added} files")
    return ExportArtifact(f"{folder_name}_comments.zip", ZIP_MIME_TYPE, buffer.getvalue())
