"""Tests for core/youtube/pagination.py"""

import pytest

from harvest_pipeline.core.youtube.pagination import PageStream, drain, hydrate, windows
from harvest_pipeline.core.youtube.progress import RecordingProgress


def page_source(pages):
    """In-memory endpoint: page i returns pages[i] and a cursor to page i+1."""
    requests = []

    def fetch_page(cursor, page_size):
        requests.append((cursor, page_size))
        index = 0 if cursor is None else int(cursor)
        next_cursor = str(index + 1) if index + 1 < len(pages) else None
        return pages[index], next_cursor

    return fetch_page, requests


class TestDrain:
    def test_collects_pages_in_order(self):
        pages = [["a", "b", "c"], ["d"], ["e", "f"]]
        fetch_page, requests = page_source(pages)

        result = drain(fetch_page, page_size=3)

        assert result == ["a", "b", "c", "d", "e", "f"]
        assert len(result) == sum(len(p) for p in pages)
        assert [cursor for cursor, _ in requests] == [None, "1", "2"]

    def test_single_page_without_cursor(self):
        fetch_page, requests = page_source([["only"]])
        assert drain(fetch_page, page_size=50) == ["only"]
        assert len(requests) == 1

    def test_empty_collection(self):
        fetch_page, _ = page_source([[]])
        assert drain(fetch_page, page_size=50) == []

    def test_duplicates_are_kept(self):
        fetch_page, _ = page_source([["a", "b"], ["b", "a"]])
        assert drain(fetch_page, page_size=2) == ["a", "b", "b", "a"]

    def test_page_size_is_forwarded(self):
        fetch_page, requests = page_source([["a"], ["b"]])
        drain(fetch_page, page_size=7)
        assert all(size == 7 for _, size in requests)

    def test_progress_after_every_page(self):
        fetch_page, _ = page_source([["a", "b"], [], ["c"]])
        progress = RecordingProgress()

        drain(fetch_page, page_size=2, progress=progress, label="ids")

        assert [s.current for s in progress.snapshots] == [2, 2, 3]
        assert all(s.label == "ids" for s in progress.snapshots)
        assert all(s.percent is None for s in progress.snapshots)


class TestPageStream:
    def test_is_lazy(self):
        fetch_page, requests = page_source([["a"], ["b"], ["c"]])
        stream = PageStream(fetch_page, page_size=1)
        assert requests == []

        iterator = iter(stream)
        assert next(iterator) == ["a"]
        assert len(requests) == 1

    def test_is_restartable(self):
        fetch_page, requests = page_source([["a"], ["b"]])
        stream = PageStream(fetch_page, page_size=1)

        assert list(stream) == [["a"], ["b"]]
        assert list(stream) == [["a"], ["b"]]
        assert [cursor for cursor, _ in requests] == [None, "1", None, "1"]

    def test_stopping_early_issues_no_further_requests(self):
        fetch_page, requests = page_source([["a"], ["b"], ["c"]])
        for page in PageStream(fetch_page, page_size=1):
            if page == ["b"]:
                break
        assert len(requests) == 2

    def test_rejects_invalid_page_size(self):
        with pytest.raises(ValueError):
            PageStream(lambda cursor, size: ([], None), page_size=0)


class TestWindows:
    def test_partition_with_remainder(self):
        assert list(windows(["a", "b", "c", "d", "e"], 2)) == [["a", "b"], ["c", "d"], ["e"]]

    def test_empty(self):
        assert list(windows([], 50)) == []

    def test_rejects_zero(self):
        with pytest.raises(ValueError):
            list(windows(["a"], 0))


class Record:
    def __init__(self, record_id):
        self.record_id = record_id


class TestHydrate:
    @pytest.mark.parametrize("window_size", [1, 2, 3, 7, 50])
    def test_output_follows_input_order(self, window_size):
        ids = [f"id{i}" for i in range(7)]
        requested = []

        def fetch_window(window):
            requested.append(list(window))
            return [Record(i) for i in reversed(window)]

        result = hydrate(ids, fetch_window, key=lambda r: r.record_id, window_size=window_size)

        assert [r.record_id for r in result] == ids
        assert all(len(w) <= window_size for w in requested)
        assert [i for w in requested for i in w] == ids

    def test_missing_ids_are_dropped(self):
        def fetch_window(window):
            return [Record(i) for i in window if i != "b"]

        result = hydrate(["a", "b", "c"], fetch_window, key=lambda r: r.record_id, window_size=2)
        assert [r.record_id for r in result] == ["a", "c"]

    def test_progress_reports_hydrated_over_requested(self):
        progress = RecordingProgress()
        ids = [str(i) for i in range(5)]

        hydrate(ids, lambda w: [Record(i) for i in w], key=lambda r: r.record_id,
                window_size=2, progress=progress)

        assert [(s.current, s.total) for s in progress.snapshots] == [(2, 5), (4, 5), (5, 5)]

    def test_one_request_per_window(self):
        calls = []

        def fetch_window(window):
            calls.append(window)
            return [Record(i) for i in window]

        hydrate([str(i) for i in range(101)], fetch_window, key=lambda r: r.record_id)
        assert [len(w) for w in calls] == [50, 50, 1]
