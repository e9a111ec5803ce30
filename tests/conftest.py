"""Shared fixtures for scoring tests."""

from collections.abc import Callable
from typing import Any

import pytest

from seatsniper.scoring.models import EventContext, Listing, Platform


@pytest.fixture
def make_listing() -> Callable[..., Listing]:
    """Factory for listings with sensible defaults."""
    counter = {"n": 0}

    def _make(**overrides: Any) -> Listing:
        counter["n"] += 1
        data: dict[str, Any] = {
            "platform_listing_id": f"listing-{counter['n']:03d}",
            "platform": Platform.STUBHUB,
            "event_id": "event-001",
            "section": "Section 215",
            "row": "10",
            "quantity": 2,
            "price_per_ticket": 100.0,
            "deep_link": f"https://example.com/listing/{counter['n']}",
        }
        data.update(overrides)
        return Listing(**data)

    return _make


@pytest.fixture
def event_context() -> EventContext:
    """A popular event two weeks out."""
    return EventContext(
        event_id="event-001",
        event_name="Arena Tour - Night One",
        popularity=75,
        days_until_event=14,
    )
