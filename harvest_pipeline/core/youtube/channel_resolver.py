"""
Channel Resolver
Resolves channel references (ID, handle, legacy /c/ and /user/ URLs) into
canonical channel metadata.
"""

import dataclasses
import logging
import re
from typing import Any, Dict, List, Optional

from .channel_info import ChannelInfo, ChannelReference
from .errors import InvalidReferenceError, NotFoundError, RemoteRequestError
from .youtube_client import YouTubeClient

logger = logging.getLogger(__name__)

# Checked in order; the first match wins.
_URL_PATTERNS = (
    ("id", re.compile(r"youtube\.com/channel/([\w-]+)")),
    ("handle", re.compile(r"youtube\.com/@([\w.-]+)")),
    ("custom", re.compile(r"youtube\.com/c/([\w-]+)")),
    ("username", re.compile(r"youtube\.com/user/([\w-]+)")),
)
_BARE_CHANNEL_ID = re.compile(r"^UC[\w-]{22}$")
_BARE_HANDLE = re.compile(r"^@([\w.-]+)$")
_KEYWORD = re.compile(r'"([^"]*)"|(\S+)')


def classify(reference: str) -> ChannelReference:
    """
    Classifies a reference by its shape alone, without any remote call.

    Raises:
        InvalidReferenceError: If the reference matches none of the shapes.
    """
    identifier = (reference or "").strip()

    for kind, pattern in _URL_PATTERNS:
        match = pattern.search(identifier)
        if match:
            return ChannelReference(raw=identifier, kind=kind, value=match.group(1))

    if _BARE_CHANNEL_ID.match(identifier):
        return ChannelReference(raw=identifier, kind="id", value=identifier)

    match = _BARE_HANDLE.match(identifier)
    if match:
        return ChannelReference(raw=identifier, kind="handle", value=match.group(1))

    raise InvalidReferenceError(reference)


def parse_keywords(keywords: str) -> List[str]:
    """Splits branding keywords on whitespace, keeping "quoted phrases" whole."""
    tags = []
    for quoted, bare in _KEYWORD.findall(keywords or ""):
        tag = quoted or bare
        if tag:
            tags.append(tag)
    return tags


class ChannelResolver:
    """
    Turns a user-entered channel reference into a ChannelInfo.

    Direct ids and usernames take a single channels.list call. Handles go
    through a keyword search whose first result is accepted outright, then a
    channels.list by id, so two calls at most. Legacy custom URLs (/c/name)
    cannot be resolved by the API at all, so they also go through a search and
    are accepted only when a result's title equals the path value
    (case-insensitive). That last path is best-effort:
    a renamed channel, or one whose title differs from its old custom URL,
    will not resolve.
    """

    def __init__(self, client: YouTubeClient):
        self._client = client

    def resolve(self, reference: str) -> ChannelInfo:
        ref = classify(reference)
        logger.info(f"Resolving channel reference {ref.raw!r} as {ref.kind}: {ref.value}")

        if ref.kind == "id":
            items = self._client.list_channels(id=ref.value)
        elif ref.kind == "username":
            items = self._client.list_channels(forUsername=ref.value)
        elif ref.kind == "handle":
            channel_id = self._search_first(ref.value)
            items = self._client.list_channels(id=channel_id)
        else:
            channel_id = self._search_by_title(ref.value)
            items = self._client.list_channels(id=channel_id)

        if not items:
            raise NotFoundError(f"YouTube channel not found: {ref.raw}")

        channel = self._to_channel_info(items[0], ref)
        logger.info(f"Resolved {ref.raw!r} to {channel!r}")
        return channel

    def refresh(self, channel: ChannelInfo) -> ChannelInfo:
        """Re-resolves a channel from the reference it was added with."""
        reference = channel.url or channel.channel_id
        refreshed = self.resolve(reference)
        refreshed.error = None
        return refreshed

    def _search_first(self, handle: str) -> str:
        results = self._client.search_channels(handle)
        if not results:
            raise NotFoundError(f"Could not find a channel with handle: @{handle}")
        return self._search_result_id(results[0])

    def _search_by_title(self, name: str) -> str:
        results = self._client.search_channels(name)
        for item in results:
            title = item.get("snippet", {}).get("channelTitle", "")
            if title.lower() == name.lower():
                return self._search_result_id(item)
        raise NotFoundError(
            f"Could not resolve legacy custom URL: /c/{name}. Please try a different URL format."
        )

    @staticmethod
    def _search_result_id(item: Dict[str, Any]) -> str:
        channel_id = item.get("id", {}).get("channelId") or item.get("snippet", {}).get("channelId")
        if not channel_id:
            raise RemoteRequestError("Malformed search result: no channelId")
        return channel_id

    @staticmethod
    def _to_channel_info(data: Dict[str, Any], ref: ChannelReference) -> ChannelInfo:
        channel_id = data.get("id")
        if not channel_id:
            raise RemoteRequestError("Malformed channel payload: no id")
        snippet = data.get("snippet", {})
        statistics = data.get("statistics", {})
        uploads_playlist_id = data.get("contentDetails", {}).get("relatedPlaylists", {}).get("uploads")
        if not uploads_playlist_id:
            raise NotFoundError(f"Channel has no public uploads playlist: {channel_id}")

        thumbnails = snippet.get("thumbnails", {})
        thumbnail = thumbnails.get("medium") or thumbnails.get("default") or {}
        keywords = data.get("brandingSettings", {}).get("channel", {}).get("keywords", "")
        subscriber_count: Optional[str] = None
        if not statistics.get("hiddenSubscriberCount"):
            subscriber_count = statistics.get("subscriberCount")

        return ChannelInfo(
            channel_id=channel_id,
            title=snippet.get("title", "Unknown"),
            uploads_playlist_id=uploads_playlist_id,
            thumbnail_url=thumbnail.get("url", ""),
            url=ref.raw,
            description=snippet.get("description", ""),
            custom_url=snippet.get("customUrl", ""),
            subscriber_count=subscriber_count,
            video_count=statistics.get("videoCount"),
            tags=parse_keywords(keywords),
            reference=dataclasses.replace(ref, channel_id=channel_id)
        )
