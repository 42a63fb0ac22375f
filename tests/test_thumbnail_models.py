"""Tests for thumbnail models and parsing."""

from yt_thumbnail.thumbnails.models import (
    ThumbnailTier,
    ThumbnailVariant,
    parse_thumbnail_set,
)


class TestThumbnailVariant:
    """Test usability of a variant."""

    def test_usable_with_url(self):
        variant = ThumbnailVariant(ThumbnailTier.HIGH, url="https://i.ytimg.com/vi/x/hqdefault.jpg")
        assert variant.is_usable is True

    def test_not_usable_without_url(self):
        assert ThumbnailVariant(ThumbnailTier.HIGH).is_usable is False

    def test_not_usable_with_blank_url(self):
        assert ThumbnailVariant(ThumbnailTier.HIGH, url="  ").is_usable is False

    def test_dimensions_optional(self):
        """Width and height may be absent."""
        variant = ThumbnailVariant(ThumbnailTier.DEFAULT, url="https://i.ytimg.com/vi/x/default.jpg")
        assert variant.width is None
        assert variant.height is None
        assert variant.is_usable is True


class TestParseThumbnailSet:
    """Test parse_thumbnail_set function."""

    def test_parse_full_set(self):
        """All five tiers from an API response."""
        data = {
            "default": {"url": "https://i.ytimg.com/vi/C2omic5yWRQ/default.jpg", "width": 120, "height": 90},
            "medium": {"url": "https://i.ytimg.com/vi/C2omic5yWRQ/mqdefault.jpg", "width": 320, "height": 180},
            "high": {"url": "https://i.ytimg.com/vi/C2omic5yWRQ/hqdefault.jpg", "width": 480, "height": 360},
            "standard": {"url": "https://i.ytimg.com/vi/C2omic5yWRQ/sddefault.jpg", "width": 640, "height": 480},
            "maxres": {"url": "https://i.ytimg.com/vi/C2omic5yWRQ/maxresdefault.jpg", "width": 1280, "height": 720},
        }
        thumbnails = parse_thumbnail_set(data)

        assert set(thumbnails) == set(ThumbnailTier)
        maxres = thumbnails[ThumbnailTier.MAXRES]
        assert maxres.tier == ThumbnailTier.MAXRES
        assert maxres.url.endswith("maxresdefault.jpg")
        assert (maxres.width, maxres.height) == (1280, 720)

    def test_missing_dimensions(self):
        """Entries without width/height are kept."""
        thumbnails = parse_thumbnail_set({"high": {"url": "https://i.ytimg.com/vi/x/hqdefault.jpg"}})
        high = thumbnails[ThumbnailTier.HIGH]
        assert high.width is None
        assert high.height is None

    def test_non_integer_dimensions_dropped(self):
        """Bad dimension values become None."""
        thumbnails = parse_thumbnail_set(
            {"high": {"url": "https://i.ytimg.com/vi/x/hqdefault.jpg", "width": "480", "height": 360.0}}
        )
        high = thumbnails[ThumbnailTier.HIGH]
        assert high.width is None
        assert high.height == 360

    def test_unknown_tiers_and_bad_entries_ignored(self):
        """Unknown keys and non-object entries are skipped."""
        thumbnails = parse_thumbnail_set(
            {"huge": {"url": "https://example.com/huge.jpg"}, "medium": "not-an-object"}
        )
        assert thumbnails == {}

    def test_non_string_url_is_absent(self):
        thumbnails = parse_thumbnail_set({"default": {"url": None, "width": 120, "height": 90}})
        assert thumbnails[ThumbnailTier.DEFAULT].url is None
        assert thumbnails[ThumbnailTier.DEFAULT].is_usable is False
