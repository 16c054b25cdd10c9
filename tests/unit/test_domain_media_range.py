"""Unit tests for Accept header parsing.

Tests cover:
- Order preservation without weights
- Weight ordering (stable for equal weights)
- q=0 and invalid weights
- Empty and missing headers
"""

import pytest

from src.domain.value_objects.media_range import (
    MediaRange,
    parse_accept_header,
    parse_media_ranges,
)

V1 = "application/vnd.flipfoundry.greeting.v1+json"
V2 = "application/vnd.flipfoundry.greeting.v2+json"


@pytest.mark.unit
class TestParseAcceptHeader:
    """Test parse_accept_header()."""

    @pytest.mark.parametrize("header", [None, "", "   ", ",", " , ,"])
    def test_empty_header_yields_no_candidates(self, header):
        """Test missing or empty headers produce an empty list."""
        assert parse_accept_header(header) == []

    def test_single_media_type(self):
        """Test a single media type is returned as-is."""
        assert parse_accept_header(V2) == [V2]

    def test_preserves_client_order_without_weights(self):
        """Test equal-weight ranges keep the written order."""
        assert parse_accept_header(f"{V1}, {V2}") == [V1, V2]
        assert parse_accept_header(f"{V2}, {V1}") == [V2, V1]

    def test_orders_by_weight(self):
        """Test higher q values come first."""
        header = f"{V1};q=0.5, {V2};q=0.9"

        assert parse_accept_header(header) == [V2, V1]

    def test_default_weight_is_one(self):
        """Test ranges without q outrank weighted ones."""
        header = f"{V1};q=0.8, {V2}"

        assert parse_accept_header(header) == [V2, V1]

    def test_equal_weights_are_stable(self):
        """Test ranges with the same explicit q keep the written order."""
        header = f"{V2};q=0.5, application/json, {V1};q=0.5"

        assert parse_accept_header(header) == ["application/json", V2, V1]

    def test_strips_parameters(self):
        """Test parameters are removed from returned media types."""
        header = f"{V1}; charset=utf-8; q=0.7"

        assert parse_accept_header(header) == [V1]

    @pytest.mark.parametrize("weight", ["0", "0.0", "abc", "-1", "1.5", "nan", ""])
    def test_unacceptable_or_invalid_weight_drops_range(self, weight):
        """Test q=0, out-of-range and unparseable weights drop the range."""
        header = f"{V1};q={weight}, {V2}"

        assert parse_accept_header(header) == [V2]

    def test_uppercase_q_parameter(self):
        """Test the q parameter name is case-insensitive."""
        assert parse_accept_header(f"{V1};Q=0.2, {V2};q=0.3") == [V2, V1]


@pytest.mark.unit
class TestParseMediaRanges:
    """Test parse_media_ranges()."""

    def test_returns_weights(self):
        """Test parsed ranges carry their weight."""
        ranges = parse_media_ranges(f"{V1};q=0.4, {V2}")

        assert ranges == [
            MediaRange(media_type=V2, quality=1.0),
            MediaRange(media_type=V1, quality=0.4),
        ]
