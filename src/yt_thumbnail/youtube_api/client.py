"""YouTube Data API client."""

import logging
from typing import Any

import httpx

from yt_thumbnail.config import Settings

logger = logging.getLogger(__name__)


class YouTubeResponseError(ValueError):
    """Raised when the API answers with a body that is not a videos list."""


class YouTubeClient:
    """Synchronous YouTube Data API v3 client authenticated by API key."""

    def __init__(
        self,
        settings: Settings,
        transport: httpx.BaseTransport | None = None,
    ):
        self._settings = settings
        self._client = httpx.Client(
            base_url=settings.YOUTUBE_API_BASE,
            timeout=settings.YOUTUBE_TIMEOUT,
            headers={"User-Agent": settings.YOUTUBE_APP_NAME},
            transport=transport,
        )

    def __enter__(self) -> "YouTubeClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def _request(self, method: str, endpoint: str, **kwargs) -> dict[str, Any]:
        """Make API-key authenticated request. No retries."""
        params = dict(kwargs.pop("params", {}))
        params["key"] = self._settings.YOUTUBE_API_KEY

        response = self._client.request(method, endpoint, params=params, **kwargs)
        if response.status_code >= 400:
            logger.warning(
                f"YouTube API {response.status_code} on {endpoint}: {response.text[:200]}"
            )
        response.raise_for_status()
        data = response.json()
        if not isinstance(data, dict):
            raise YouTubeResponseError(
                f"Expected JSON object from {endpoint}, got {type(data).__name__}"
            )
        return data

    def list_videos(self, video_id: str, part: str = "snippet") -> list[dict[str, Any]]:
        """List videos by ID. GET /videos

        Returns the `items` array; empty when the ID is unknown.
        """
        data = self._request("GET", "/videos", params={"part": part, "id": video_id})
        items = data.get("items", [])
        if not isinstance(items, list) or not all(isinstance(item, dict) for item in items):
            raise YouTubeResponseError("Malformed items in /videos response")
        return items
