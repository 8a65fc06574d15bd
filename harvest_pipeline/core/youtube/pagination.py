"""
Pagination and Batching
Drains cursor-paginated list endpoints and hydrates ids in bounded windows.

Both helpers are transport-agnostic: they only see callables, so they can be
driven by the YouTube client or by an in-memory page source.
"""

import logging
from typing import Callable, Iterator, List, Optional, Sequence, Tuple, TypeVar

from .progress import ProgressSink, ProgressSnapshot, NULL_PROGRESS

logger = logging.getLogger(__name__)

T = TypeVar("T")

# videos.list accepts at most 50 ids per call
VIDEO_WINDOW_SIZE = 50

PageFetcher = Callable[[Optional[str], int], Tuple[List[T], Optional[str]]]


class PageStream:
    """
    Lazy, restartable sequence of pages.

    Each iteration starts from an absent cursor and requests one page per
    step, stopping once the endpoint returns no next cursor. Stopping the
    iteration early is the supported way to cancel a drain.
    """

    def __init__(self, fetch_page: PageFetcher, page_size: int):
        if page_size < 1:
            raise ValueError(f"page_size must be at least 1, got {page_size}")
        self._fetch_page = fetch_page
        self._page_size = page_size

    def __iter__(self) -> Iterator[List[T]]:
        cursor: Optional[str] = None
        while True:
            items, cursor = self._fetch_page(cursor, self._page_size)
            yield list(items)
            if not cursor:
                return


def drain(
    fetch_page: PageFetcher,
    page_size: int,
    progress: ProgressSink = NULL_PROGRESS,
    label: str = ""
) -> List[T]:
    """
    Collects every page of a paginated endpoint, in response order.

    The progress sink is notified after each page with the running total.
    """
    collected: List[T] = []
    for page_number, page in enumerate(PageStream(fetch_page, page_size), start=1):
        collected.extend(page)
        logger.debug(f"Page {page_number}: {len(page)} items ({len(collected)} total)")
        progress.update(ProgressSnapshot(current=len(collected), label=label))
    return collected


def windows(ids: Sequence[str], size: int) -> Iterator[List[str]]:
    """Splits ids into consecutive slices of at most `size` ids."""
    if size < 1:
        raise ValueError(f"window size must be at least 1, got {size}")
    for start in range(0, len(ids), size):
        yield list(ids[start:start + size])


def hydrate(
    ids: Sequence[str],
    fetch_window: Callable[[List[str]], List[T]],
    key: Callable[[T], str],
    window_size: int = VIDEO_WINDOW_SIZE,
    progress: ProgressSink = NULL_PROGRESS,
    label: str = ""
) -> List[T]:
    """
    Fetches full records for `ids`, one request per window.

    Results follow the order of `ids`. Records are matched back to their id
    with `key`; ids the API did not return (deleted or private videos) are
    skipped.
    """
    total = len(ids)
    hydrated: List[T] = []
    for window_number, window in enumerate(windows(ids, window_size), start=1):
        by_id = {key(record): record for record in fetch_window(window)}
        missing = [i for i in window if i not in by_id]
        if missing:
            logger.warning(f"Window {window_number}: {len(missing)} ids returned no details: {missing}")
        hydrated.extend(by_id[i] for i in window if i in by_id)
        progress.update(ProgressSnapshot(current=len(hydrated), total=total, label=label))
    return hydrated
