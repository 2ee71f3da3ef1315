"""Tests for media URL -> storage identifier resolution."""

import pytest

from storefront.vendors.aws.media_reference import resolve_media_identifier


class TestResolveMediaIdentifier:
    """Tests for resolve_media_identifier."""

    @pytest.mark.parametrize(
        "url, expected",
        [
            ("https://media.test/upload/v1700000000/deals/abc123.jpg", "deals/abc123"),
            ("https://media.test/upload/deals/abc123.png", "deals/abc123"),
            ("https://bucket.s3.us-east-1.amazonaws.com/upload/deals/9f8e.webp", "deals/9f8e"),
            ("https://media.test/upload/v12/banner.jpeg", "banner"),
        ],
    )
    def test_resolves_identifier(self, url, expected):
        assert resolve_media_identifier(url) == expected

    @pytest.mark.parametrize(
        "url",
        [
            "https://media.test/images/deals/abc123.jpg",
            "https://media.test/upload/deals/abc123",
            "",
            None,
            42,
        ],
    )
    def test_non_matching_input_returns_none(self, url):
        assert resolve_media_identifier(url) is None
