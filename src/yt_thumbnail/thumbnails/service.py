"""Thumbnail service: best-quality selection and video lookup."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

import httpx

from yt_thumbnail.config import Settings
from yt_thumbnail.thumbnails.models import (
    ThumbnailSet,
    ThumbnailTier,
    ThumbnailVariant,
    parse_thumbnail_set,
)
from yt_thumbnail.youtube import extract_video_id
from yt_thumbnail.youtube_api.client import YouTubeClient

logger = logging.getLogger(__name__)


# Highest quality first
TIER_PRIORITY: tuple[ThumbnailTier, ...] = (
    ThumbnailTier.MAXRES,
    ThumbnailTier.STANDARD,
    ThumbnailTier.HIGH,
    ThumbnailTier.MEDIUM,
    ThumbnailTier.DEFAULT,
)


class NotFoundReason(str, Enum):
    """Why a lookup produced no thumbnail."""

    UNKNOWN_VIDEO = "unknown_video"
    NO_THUMBNAILS = "no_thumbnails"
    NO_USABLE_THUMBNAIL = "no_usable_thumbnail"


@dataclass(frozen=True)
class NotFound:
    """Lookup completed but there is nothing to return."""

    video_id: str
    reason: NotFoundReason


ThumbnailLookup = ThumbnailVariant | NotFound


def is_not_found(result: ThumbnailLookup | None) -> bool:
    return result is None or isinstance(result, NotFound)


def select_best_thumbnail(thumbnails: ThumbnailSet) -> ThumbnailVariant | None:
    """Pick the highest-ranked usable variant.

    Tiers that are absent or have a blank URL are skipped.
    """
    for tier in TIER_PRIORITY:
        variant = thumbnails.get(tier)
        if variant is not None and variant.is_usable:
            return variant

    logger.info("No youtube thumbnail found in thumbnail set")
    return None


class ThumbnailSelector:
    """Resolves a video ID to its best thumbnail with one API call."""

    def __init__(self, client: YouTubeClient):
        self._client = client

    @classmethod
    def from_settings(cls, settings: Settings) -> ThumbnailSelector:
        return cls(YouTubeClient(settings))

    def close(self) -> None:
        self._client.close()

    def best_thumbnail(self, video_id: str) -> ThumbnailLookup:
        """Fetch the video's snippet and return its best thumbnail.

        Returns:
            Selected ThumbnailVariant, or NotFound when the video is unknown
            or carries no usable thumbnail.

        Raises:
            httpx.HTTPError: the lookup failed; never retried.
            ValueError: the response body was not a videos list.
        """
        try:
            videos = self._client.list_videos(video_id, part="snippet")
        except httpx.HTTPStatusError as e:
            # str(e) carries the request URL, which includes the API key
            logger.error(
                f"Failed to fetch snippet of the videoId: {video_id}: "
                f"{type(e).__name__}: status {e.response.status_code}"
            )
            raise
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Failed to fetch snippet of the videoId: {video_id}: {type(e).__name__}")
            raise

        # A unique ID yields at most one video
        if not videos:
            logger.info(f"No such youtube video Id found: {video_id}")
            return NotFound(video_id, NotFoundReason.UNKNOWN_VIDEO)

        snippet = videos[0].get("snippet")
        thumbnails_data = snippet.get("thumbnails") if isinstance(snippet, dict) else None
        if not isinstance(thumbnails_data, dict):
            logger.info(f"Youtube video {video_id} has no snippet or no thumbnails, snippet: {snippet}")
            return NotFound(video_id, NotFoundReason.NO_THUMBNAILS)

        best = select_best_thumbnail(parse_thumbnail_set(thumbnails_data))
        if best is None:
            return NotFound(video_id, NotFoundReason.NO_USABLE_THUMBNAIL)

        logger.info(
            f"Youtube thumbnail quality selected ({best.tier.value}) - (wxh): {best.width}x{best.height}"
        )
        return best

    def thumbnail_for_url(self, url: str) -> ThumbnailLookup | None:
        """Parse a shared URL and look up its best thumbnail.

        Returns None when the URL contains no video ID.
        """
        video_id = extract_video_id(url)
        if video_id is None:
            return None
        return self.best_thumbnail(video_id)
