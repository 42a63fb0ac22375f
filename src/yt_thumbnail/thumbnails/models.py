"""Thumbnail data model.

Mirrors the `snippet.thumbnails` object of the YouTube Data API:

    {
      "default": {"url": "https://i.ytimg.com/vi/C2omic5yWRQ/default.jpg", "width": 120, "height": 90},
      "medium":  {"url": ".../mqdefault.jpg", "width": 320, "height": 180},
      "high":    {"url": ".../hqdefault.jpg", "width": 480, "height": 360},
      "standard": {"url": ".../sddefault.jpg", "width": 640, "height": 480},
      "maxres":  {"url": ".../maxresdefault.jpg", "width": 1280, "height": 720}
    }

Width and height may be missing for any entry.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ThumbnailTier(str, Enum):
    """Named thumbnail quality level."""

    DEFAULT = "default"
    MEDIUM = "medium"
    HIGH = "high"
    STANDARD = "standard"
    MAXRES = "maxres"


@dataclass(frozen=True)
class ThumbnailVariant:
    """One thumbnail image of a video."""

    tier: ThumbnailTier
    url: str | None = None
    width: int | None = None
    height: int | None = None

    @property
    def is_usable(self) -> bool:
        return bool(self.url and self.url.strip())


ThumbnailSet = dict[ThumbnailTier, ThumbnailVariant]


def _as_dimension(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


def parse_thumbnail_set(data: dict[str, Any]) -> ThumbnailSet:
    """Build a ThumbnailSet from the API's thumbnails object.

    Unknown tier keys and non-object entries are ignored.
    """
    thumbnails: ThumbnailSet = {}
    for key, entry in data.items():
        try:
            tier = ThumbnailTier(key)
        except ValueError:
            continue
        if not isinstance(entry, dict):
            continue
        url = entry.get("url")
        thumbnails[tier] = ThumbnailVariant(
            tier=tier,
            url=url if isinstance(url, str) else None,
            width=_as_dimension(entry.get("width")),
            height=_as_dimension(entry.get("height")),
        )
    return thumbnails
