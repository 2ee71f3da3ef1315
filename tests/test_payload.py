"""Tests for request payload normalization."""

import pytest

from storefront.deals.requests.payload import (
    parse_flag,
    parse_products,
    parse_removed_images,
)
from storefront.util.exceptions import ValidationException


class TestParseProducts:
    """dealProducts arrives as a JSON string or a native list."""

    def test_json_string(self):
        products = parse_products('[{"productId": "p1", "price": 10, "quantity": 2}]')

        assert products == [{"productId": "p1", "price": 10, "quantity": 2}]

    def test_native_list(self):
        assert parse_products([{"productId": "p1"}]) == [{"productId": "p1"}]

    def test_absent_or_blank_is_none(self):
        assert parse_products(None) is None
        assert parse_products("  ") is None

    def test_malformed_json_raises(self):
        with pytest.raises(ValidationException) as exc:
            parse_products("[{not json")

        assert exc.value.status_code == 400

    def test_json_object_is_not_a_list(self):
        with pytest.raises(ValidationException):
            parse_products('{"productId": "p1"}')

    def test_entries_must_be_objects(self):
        with pytest.raises(ValidationException):
            parse_products('["p1", "p2"]')


class TestParseRemovedImages:
    """removedImages never fails a request."""

    def test_json_string(self):
        assert parse_removed_images('["https://a/upload/x.jpg"]') == ["https://a/upload/x.jpg"]

    def test_malformed_json_is_empty(self):
        assert parse_removed_images("[broken") == []

    def test_non_string_entries_dropped(self):
        assert parse_removed_images(["https://a/upload/x.jpg", 3, None, ""]) == ["https://a/upload/x.jpg"]

    def test_absent_is_empty(self):
        assert parse_removed_images(None) == []


class TestParseFlag:

    @pytest.mark.parametrize("value", [True, "true", "1", "yes", "on", "TRUE"])
    def test_truthy(self, value):
        assert parse_flag(value) is True

    @pytest.mark.parametrize("value", [False, None, "", "false", "0", "no"])
    def test_falsy(self, value):
        assert parse_flag(value) is False
