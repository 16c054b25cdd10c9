"""Unit tests for greeting and departing producers."""

import re
from datetime import datetime

import pytest

from src.presentation.routers.api.flip.departing import depart_v1, format_departure_time
from src.presentation.routers.api.flip.greeting import greet_v1, greet_v2
from src.schemas.departing_schemas import DepartV1Response
from src.schemas.greeting_schemas import GreetingV1Response, GreetingV2Response


@pytest.mark.unit
class TestGreetingProducers:
    """Test greeting producers."""

    async def test_greet_v1_default_recipient(self):
        """Test v1 greets the world when no name is given."""
        greeting = await greet_v1({})

        assert isinstance(greeting, GreetingV1Response)
        assert greeting.content == "Hello, World!"

    async def test_greet_v1_named(self):
        """Test v1 greets the given name."""
        greeting = await greet_v1({"name": "Ada"})

        assert greeting.content == "Hello, Ada!"

    async def test_greet_v2_shape(self):
        """Test v2 separates message and recipient and stamps the time."""
        greeting = await greet_v2({"name": "Ada"})

        assert isinstance(greeting, GreetingV2Response)
        assert greeting.message == "Hello, Ada!"
        assert greeting.recipient == "Ada"
        assert greeting.issued_at.tzinfo is not None

    async def test_blank_name_uses_default(self):
        """Test whitespace-only names fall back to the default."""
        greeting = await greet_v2({"name": "   "})

        assert greeting.recipient == "World"

    async def test_ids_increase_across_versions(self):
        """Test greeting ids are unique across versions."""
        first = await greet_v1({})
        second = await greet_v2({})

        assert second.id > first.id


@pytest.mark.unit
class TestDepartingProducers:
    """Test departing producers."""

    async def test_depart_v1(self):
        """Test v1 says goodbye with a formatted date."""
        departure = await depart_v1({})

        assert isinstance(departure, DepartV1Response)
        assert departure.content == "Goodbye"
        assert re.fullmatch(r"\d{2}/\d{2}/\d{4} \d{2}:\d{2}:\d{2}:\d{1,3}", departure.date)

    @pytest.mark.parametrize(
        ("moment", "expected"),
        [
            (datetime(2025, 1, 29, 9, 5, 3, 7000), "01/29/2025 09:05:03:7"),
            (datetime(2025, 12, 1, 23, 59, 59, 999999), "12/01/2025 23:59:59:999"),
            (datetime(2025, 6, 15, 0, 0, 0), "06/15/2025 00:00:00:0"),
        ],
    )
    def test_format_departure_time(self, moment, expected):
        """Test milliseconds are appended without padding."""
        assert format_departure_time(moment) == expected
