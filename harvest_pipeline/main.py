"""
Channel Comment Harvest - Pipeline Runner
Resolve -> mine videos (cached) -> export comments, driven by config.yaml.
"""

import logging
import sys
from pathlib import Path
from typing import List

from harvest_pipeline.core.config import AppConfig, ConfigLoader, ConfigValidationError
from harvest_pipeline.core.export import ChannelCommentExporter
from harvest_pipeline.core.export.csv_exporter import videos_artifact
from harvest_pipeline.core.youtube import ChannelInfo, VideoInfo, YouTubeClient
from harvest_pipeline.core.youtube.channel_resolver import ChannelResolver
from harvest_pipeline.core.youtube.comment_aggregator import CommentAggregator
from harvest_pipeline.core.youtube.errors import (
    ChannelResolutionError,
    HarvestError,
    NoExportableDataError,
)
from harvest_pipeline.core.youtube.metadata_miner import VideoMetadataMiner
from harvest_pipeline.core.youtube.progress import LoggingProgress
from shared.storage import StorageManager, VideoCache


def setup_logging():
    """Configure logging with file and console handlers."""
    # Ensure logs directory exists
    logs_dir = Path(__file__).parent / "logs"
    logs_dir.mkdir(exist_ok=True)

    log_file = logs_dir / "app.log"

    # Configure logging format
    log_format = "%(asctime)s - %(levelname)s - %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    # Configure root logger
    logging.basicConfig(
        level=logging.INFO,
        format=log_format,
        datefmt=date_format,
        handlers=[
            logging.FileHandler(log_file, mode='a', encoding='utf-8'),
            logging.StreamHandler()
        ]
    )

    # googleapiclient logs every discovery request at INFO
    logging.getLogger("googleapiclient.discovery").setLevel(logging.WARNING)

    return logging.getLogger(__name__)


def load_configuration(logger: logging.Logger) -> AppConfig:
    """Load and validate application configuration."""
    base_dir = Path(__file__).parent
    config_path = base_dir / "config.yaml"

    logger.info(f"Loading configuration from: {config_path}")

    try:
        loader = ConfigLoader(config_path)
        config = loader.load()

        logger.info("Configuration validated successfully")
        logger.info(f"  Channel: {config.channel}")
        logger.info(f"  Export Format: {config.export_format}")
        logger.info(f"  Refresh Cache: {config.refresh}")
        logger.info(f"  Storage Root: {config.storage_root}")

        return config

    except FileNotFoundError as e:
        logger.error(f"Configuration file not found: {e}")
        sys.exit(1)
    except ConfigValidationError as e:
        logger.error(f"Configuration validation failed: {e}")
        sys.exit(1)


def resolve_channel(logger: logging.Logger, client: YouTubeClient, config: AppConfig) -> ChannelInfo:
    """Resolve channel from configuration using YouTube API."""
    logger.info(f"Resolving channel: {config.channel}")
    try:
        channel_info = ChannelResolver(client).resolve(config.channel)

        logger.info("Channel resolved successfully")
        logger.info(f"  Title: {channel_info.title}")
        logger.info(f"  Channel ID: {channel_info.channel_id}")
        logger.info(f"  Subscribers: {channel_info.subscriber_count or 'hidden'}")
        logger.info(f"  Videos: {channel_info.video_count}")

        return channel_info
    except ChannelResolutionError as e:
        logger.error(f"Channel resolution failed: {e}")
        sys.exit(1)
    except HarvestError as e:
        logger.error(f"API error resolving channel: {e}")
        sys.exit(1)


def load_channel_videos(
    logger: logging.Logger,
    miner: VideoMetadataMiner,
    channel_info: ChannelInfo,
    config: AppConfig
) -> List[VideoInfo]:
    """Load the channel's videos, from the cache unless a refresh is requested."""
    try:
        return miner.load_videos(channel_info, refresh=config.refresh, progress=LoggingProgress("Videos: "))
    except HarvestError as e:
        logger.error(f"Could not fetch videos for {channel_info.title}: {e}")
        sys.exit(1)
    except (OSError, ValueError) as e:
        # Unreadable or corrupt cache record (JSONDecodeError is a ValueError)
        logger.error(
            f"Video cache for {channel_info.title} could not be read or written: {e}. "
            f"Set export.refresh: true to fetch the videos again."
        )
        sys.exit(1)


def main():
    """Main execution entry for the Harvest Pipeline."""
    logger = setup_logging()

    logger.info("="*60)
    logger.info("Channel Comment Harvest - PIPELINE")
    logger.info("="*60)

    # Phase 1: Load and validate configuration
    config = load_configuration(logger)

    storage_root = Path(config.storage_root)
    if not storage_root.is_absolute():
        storage_root = (Path(__file__).parent.parent / storage_root).resolve()
    storage = StorageManager(str(storage_root))

    client = YouTubeClient(config.api_key)

    # Phase 2: Resolve channel
    channel_info = resolve_channel(logger, client, config)

    # Phase 3: Video list (cache first)
    logger.info("="*60)
    logger.info("Phase 3: Video Metadata Mining")
    logger.info("="*60)

    miner = VideoMetadataMiner(client, VideoCache(storage.cache_store()))
    videos = load_channel_videos(logger, miner, channel_info, config)

    logger.info(f"Phase 3 complete: {len(videos)} videos available.")
    storage.persist_export(videos_artifact(channel_info.title, videos))

    # Phase 4: Comment export
    logger.info("="*60)
    logger.info("Phase 4: Comment Export")
    logger.info("="*60)

    exporter = ChannelCommentExporter(CommentAggregator(client, page_size=config.comment_page_size))
    try:
        artifact = exporter.export(
            channel_info,
            videos,
            export_format=config.export_format,
            progress=LoggingProgress("Comments: ")
        )
    except NoExportableDataError as e:
        logger.error(f"Nothing to export: {e}")
        sys.exit(1)

    written = storage.persist_export(artifact)

    print("\n" + "="*60)
    print(f"✅ Harvest Pipeline Complete")
    print(f"🎬 Videos: {len(videos)}")
    print(f"📦 Export: {written or artifact.filename + ' (already existed, not overwritten)'}")
    print("="*60 + "\n")


if __name__ == "__main__":
    main()
