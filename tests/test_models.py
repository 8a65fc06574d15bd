"""Tests for the video model and progress snapshots."""

import logging

import pytest

from helpers import make_video
from harvest_pipeline.core.youtube.progress import ProgressSnapshot


class TestVideoInfo:
    @pytest.mark.parametrize("duration,seconds,display", [
        ("PT4M13S", 253, "4:13"),
        ("PT1H2M3S", 3723, "1:02:03"),
        ("PT45S", 45, "0:45"),
        ("PT2H", 7200, "2:00:00"),
        ("P0D", 0, "0:00"),
        ("", 0, "0:00"),
    ])
    def test_duration(self, duration, seconds, display):
        video = make_video("v1", duration=duration)
        assert video.duration_seconds == seconds
        assert video.display_duration == display

    def test_advertised_comments(self):
        assert make_video("v1", comment_count="12").advertised_comments == 12
        assert make_video("v1", comment_count="").advertised_comments == 0

    def test_is_immutable(self):
        video = make_video("v1")
        with pytest.raises(AttributeError):
            video.title = "other"


class TestProgressSnapshot:
    def test_percent_is_capped(self):
        assert ProgressSnapshot(current=15, total=10).percent == 100.0
        assert ProgressSnapshot(current=5, total=10).percent == 50.0

    def test_unknown_total(self):
        assert ProgressSnapshot(current=5).percent is None

    def test_done(self):
        assert ProgressSnapshot(current=0, total=10, done=True).percent == 100.0


class TestLoggingProgress:
    def test_logs_counter_percent_and_label(self, caplog):
        from harvest_pipeline.core.youtube.progress import LoggingProgress

        with caplog.at_level(logging.INFO, logger="harvest_pipeline.core.youtube.progress"):
            LoggingProgress("Comments: ").update(ProgressSnapshot(current=1, total=4, label="Intro"))
            LoggingProgress().update(ProgressSnapshot(current=7))

        assert "Comments: 1/4 (25%) - Intro" in caplog.messages
        assert "7" in caplog.messages
