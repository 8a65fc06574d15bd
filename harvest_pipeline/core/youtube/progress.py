"""
Progress Reporting
A single sink abstraction passed down the call chain.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProgressSnapshot:
    """
    Transient progress state, recomputed at every page/window/video boundary.

    `total` is None when the size of the collection is unknown up front
    (e.g. while draining a playlist).
    """
    current: int
    total: Optional[int] = None
    label: str = ""
    done: bool = False

    @property
    def percent(self) -> Optional[float]:
        if self.done:
            return 100.0
        if not self.total:
            return None
        return min(100.0, self.current / self.total * 100)


class ProgressSink:
    """Receives progress snapshots. The base implementation ignores them."""

    def update(self, snapshot: ProgressSnapshot) -> None:
        pass


class LoggingProgress(ProgressSink):
    """Logs every snapshot at INFO level."""

    def __init__(self, prefix: str = ""):
        self._prefix = prefix

    def update(self, snapshot: ProgressSnapshot) -> None:
        percent = snapshot.percent
        if snapshot.total is not None:
            counter = f"{snapshot.current}/{snapshot.total}"
        else:
            counter = str(snapshot.current)
        suffix = f" ({percent:.0f}%)" if percent is not None else ""
        label = f" - {snapshot.label}" if snapshot.label else ""
        logger.info(f"{self._prefix}{counter}{suffix}{label}")


class RecordingProgress(ProgressSink):
    """Keeps every snapshot it receives, in order."""

    def __init__(self):
        self.snapshots: List[ProgressSnapshot] = []

    def update(self, snapshot: ProgressSnapshot) -> None:
        self.snapshots.append(snapshot)


NULL_PROGRESS = ProgressSink()
