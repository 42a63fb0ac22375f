"""Thumbnail selection module."""

from yt_thumbnail.thumbnails.models import ThumbnailSet, ThumbnailTier, ThumbnailVariant
from yt_thumbnail.thumbnails.service import (
    TIER_PRIORITY,
    NotFound,
    NotFoundReason,
    ThumbnailSelector,
    select_best_thumbnail,
)

__all__ = [
    "ThumbnailSet",
    "ThumbnailTier",
    "ThumbnailVariant",
    "TIER_PRIORITY",
    "NotFound",
    "NotFoundReason",
    "ThumbnailSelector",
    "select_best_thumbnail",
]
