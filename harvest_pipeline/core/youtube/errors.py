"""
Harvest Error Taxonomy
Every failure the core raises derives from HarvestError.
"""

from typing import Optional


class HarvestError(Exception):
    """Base class for all harvest pipeline errors."""
    pass


class ChannelResolutionError(HarvestError):
    """Exception raised for errors in channel resolution."""
    pass


class InvalidReferenceError(ChannelResolutionError):
    """The channel reference matches none of the accepted shapes."""

    def __init__(self, reference: str):
        super().__init__(f"Invalid YouTube channel reference format: {reference}")
        self.reference = reference


class NotFoundError(ChannelResolutionError):
    """The remote API confirmed that nothing matches the reference."""
    pass


class RemoteRequestError(HarvestError):
    """
    A remote call failed or returned a payload we could not read.

    Carries the HTTP status (None for malformed payloads), the upstream
    human-readable message and the machine-readable reason when the API
    supplied one (e.g. 'commentsDisabled', 'quotaExceeded').
    """

    def __init__(self, message: str, status: Optional[int] = None, reason: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.status = status
        self.reason = reason

    def __repr__(self) -> str:
        return f"RemoteRequestError(status={self.status!r}, reason={self.reason!r}, message={self.message!r})"


class CommentsDisabledError(HarvestError):
    """Comments are disabled for the requested video."""

    def __init__(self, video_id: str):
        super().__init__(f"Comments are disabled for this video: {video_id}")
        self.video_id = video_id


class NoExportableDataError(HarvestError):
    """An export produced zero usable rows or files."""
    pass
