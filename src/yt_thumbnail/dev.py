"""Development entrypoint: resolves one shared URL to its best thumbnail."""

import logging
import sys

from yt_thumbnail.config import get_settings
from yt_thumbnail.thumbnails.service import NotFound, ThumbnailSelector


def main(argv: list[str] | None = None) -> int:
    """Print the best thumbnail for the URL given on the command line."""
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 1:
        print("usage: python -m yt_thumbnail.dev <youtube-url>", file=sys.stderr)
        return 2

    settings = get_settings()
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=settings.LOG_LEVEL,
    )
    # httpx logs full request URLs at INFO, including the API key
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logger = logging.getLogger(__name__)
    logger.info(f"Starting in {settings.ENV} mode")

    selector = ThumbnailSelector.from_settings(settings)
    try:
        result = selector.thumbnail_for_url(args[0])
    finally:
        selector.close()

    if result is None:
        print(f"No video id in url: {args[0]}")
        return 1
    if isinstance(result, NotFound):
        print(f"No thumbnail for {result.video_id}: {result.reason.value}")
        return 1

    print(f"{result.url} {result.width}x{result.height}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
