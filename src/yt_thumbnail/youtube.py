"""YouTube URL parsing utilities."""

import logging
import re

logger = logging.getLogger(__name__)


# Video ID after ?v=, /embed/, /1/, /v/ or a youtu.be short link,
# up to the first &, newline, ? or #
_VIDEO_ID_PATTERN = re.compile(
    r"(?:[?]v=|/embed/|/1/|/v/|(?:https://|http://|)(?:www\.|)?youtu\.be/)"
    r"([^&\n?#]+)"
)


class InvalidInputError(ValueError):
    """Raised when a blank URL is passed to the parser."""


class ParseError(ValueError):
    """Raised when a matched URL yields no readable video ID."""

    def __init__(self, url: str):
        super().__init__(f"Unable to parse youtube url to fetch video id: {url}")
        self.url = url


def extract_video_id(url: str | None) -> str | None:
    """Extract video ID from a shared YouTube URL.

    Supports:
    - https://www.youtube.com/watch?v=VIDEO_ID
    - https://m.youtube.com/watch?v=VIDEO_ID
    - https://www.youtube.com/embed/VIDEO_ID
    - https://www.youtube.com/v/VIDEO_ID
    - https://www.youtube.com/user/NAME#p/a/u/1/VIDEO_ID
    - https://youtu.be/VIDEO_ID (scheme and www. optional)
    - URLs with additional params (t=, feature=, etc.)

    Returns:
        Video ID exactly as it appears in the URL, or None if no known
        pattern matches.

    Raises:
        InvalidInputError: url is empty or whitespace only.
    """
    if url is None or not url.strip():
        raise InvalidInputError("URL cannot be empty")

    match = _VIDEO_ID_PATTERN.search(url)
    if match is None:
        logger.error(f"Could not extract youtube video Id for youtube url: {url}")
        return None

    video_id = match.group(1)
    if not video_id:
        raise ParseError(url)

    logger.info(f"Video Id from youtube url: {video_id}")
    return video_id
