"""Tests for price vs average and price vs history scoring."""

from datetime import datetime

import pytest

from seatsniper.scoring.models import HistoricalPrice
from seatsniper.scoring.price_analyzer import (
    analyze_historical,
    analyze_price,
    is_historical_low,
    is_price_outlier,
    price_delta_percent,
    weighted_average_price,
)


@pytest.fixture
def history() -> list[HistoricalPrice]:
    """Two snapshots: older avg 100 / low 60, newer avg 90 / low 70.

    Weighted average = (90 * 1.0 + 100 * 0.9) / 1.9 = 94.74
    Lowest = 60
    """
    return [
        HistoricalPrice(
            date=datetime(2026, 9, 1),
            section="215",
            average_price=100.0,
            lowest_price=60.0,
            highest_price=180.0,
            listing_count=40,
        ),
        HistoricalPrice(
            date=datetime(2026, 9, 8),
            section="215",
            average_price=90.0,
            lowest_price=70.0,
            highest_price=150.0,
            listing_count=32,
        ),
    ]


class TestAnalyzePrice:
    """Tests for price vs current market average."""

    @pytest.mark.parametrize(
        "price,expected",
        [(50, 100), (100, 50), (150, 0), (80, 70), (120, 30), (10, 100), (400, 0)],
    )
    def test_linear_mapping(self, price: float, expected: int) -> None:
        assert analyze_price(price, 100) == expected

    def test_no_average_is_neutral(self) -> None:
        assert analyze_price(80, 0) == 50
        assert analyze_price(80, -5) == 50

    def test_delta_percent(self) -> None:
        assert price_delta_percent(75, 100) == pytest.approx(-25.0)
        assert price_delta_percent(120, 100) == pytest.approx(20.0)
        assert price_delta_percent(120, 0) == 0.0


class TestAnalyzeHistorical:
    """Tests for price vs section history."""

    def test_weighted_average_favors_recent(self, history: list[HistoricalPrice]) -> None:
        assert weighted_average_price(history) == pytest.approx(94.7368, abs=1e-3)

    def test_at_or_below_low(self, history: list[HistoricalPrice]) -> None:
        assert analyze_historical(60, history) == 100
        assert analyze_historical(45, history) == 100

    def test_between_low_and_average(self, history: list[HistoricalPrice]) -> None:
        """Position (94.74 - 80) / (94.74 - 60) = 0.424 -> 50 + 21.2 = 71."""
        assert analyze_historical(80, history) == 71

    def test_above_average(self, history: list[HistoricalPrice]) -> None:
        """Overage (100 - 94.74) / 94.74 = 5.6% -> 50 - 5.6 = 44."""
        assert analyze_historical(100, history) == 44
        assert analyze_historical(500, history) == 0

    def test_no_history_is_neutral(self) -> None:
        assert analyze_historical(80, []) == 50


class TestFlags:
    """Tests for historical low and outlier checks."""

    def test_historical_low_tolerance(self, history: list[HistoricalPrice]) -> None:
        assert is_historical_low(62, history) is True
        assert is_historical_low(64, history) is False
        assert is_historical_low(64, history, tolerance=0.10) is True
        assert is_historical_low(10, []) is False

    def test_price_outlier(self) -> None:
        assert is_price_outlier(75, 100) is True
        assert is_price_outlier(80, 100) is False
        assert is_price_outlier(10, 0) is False
