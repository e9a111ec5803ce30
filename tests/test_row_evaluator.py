"""Tests for row label parsing and row position scoring."""

import pytest

from seatsniper.scoring.models import SectionTier
from seatsniper.scoring.row_evaluator import (
    ROW_RULES,
    UNKNOWN_ROW_RANK,
    estimate_total_rows,
    evaluate_row,
    is_front_row,
    parse_row_to_rank,
)


class TestParseRowToRank:
    """Tests for row label parsing."""

    @pytest.mark.parametrize(
        "label,expected",
        [
            ("1", 1),
            ("15", 15),
            ("007", 7),
            ("A", 1),
            ("K", 11),
            ("Z", 26),
            ("AA", 27),
            ("AB", 28),
            ("AZ", 52),
            ("BA", 53),
        ],
    )
    def test_numeric_and_letter_rows(self, label: str, expected: int) -> None:
        assert parse_row_to_rank(label) == expected

    @pytest.mark.parametrize("label", ["GA", "GENERAL ADMISSION", "PIT"])
    def test_general_admission_is_front(self, label: str) -> None:
        """GA must not be read as a double-letter row (which would be 183)."""
        assert parse_row_to_rank(label) == 1

    def test_case_insensitive_and_trimmed(self) -> None:
        assert parse_row_to_rank("  k ") == 11
        assert parse_row_to_rank("aa") == 27
        assert parse_row_to_rank(" Pit ") == 1
        assert parse_row_to_rank("general   admission") == 1

    @pytest.mark.parametrize("label", ["", "   ", "XYZ", "A1", "12A", "Row 5", "#$", "VIP BOX"])
    def test_unparseable_returns_sentinel(self, label: str) -> None:
        assert parse_row_to_rank(label) == UNKNOWN_ROW_RANK

    def test_none_returns_sentinel(self) -> None:
        assert parse_row_to_rank(None) == UNKNOWN_ROW_RANK

    def test_row_zero_is_not_a_position(self) -> None:
        """Ranks are >= 1 or exactly -1."""
        assert parse_row_to_rank("0") == UNKNOWN_ROW_RANK
        assert parse_row_to_rank("000") == UNKNOWN_ROW_RANK

    def test_rule_order(self) -> None:
        names = [name for name, _rule in ROW_RULES]
        assert names.index("keyword") < names.index("double_letter")


class TestEvaluateRow:
    """Tests for row position scoring."""

    def test_front_row_scores_100(self) -> None:
        assert evaluate_row(1, 20) == 100

    def test_single_row_section(self) -> None:
        assert evaluate_row(1, 1) == 100

    def test_back_row_floor(self) -> None:
        assert evaluate_row(20, 20) == 20
        assert evaluate_row(20, 20) >= 20

    def test_unknown_inputs_are_neutral(self) -> None:
        assert evaluate_row(5, 0) == 50
        assert evaluate_row(0, 20) == 50
        assert evaluate_row(UNKNOWN_ROW_RANK, 20) == 50
        assert evaluate_row(5, -3) == 50

    def test_rank_clamped_to_total_rows(self) -> None:
        assert evaluate_row(100, 20) == evaluate_row(20, 20)

    def test_strictly_decreasing(self) -> None:
        scores = [evaluate_row(rank, 20) for rank in range(1, 21)]
        for front, back in zip(scores, scores[1:]):
            assert front > back

    def test_front_loaded_curve(self) -> None:
        """Row 2 = 20 + sqrt(18/19) * 80 = 97.9; row 10 = 20 + sqrt(10/19) * 80 = 78.0."""
        assert evaluate_row(2, 20) == 98
        assert evaluate_row(10, 20) == 78
        assert evaluate_row(2, 20) - evaluate_row(10, 20) > 10

    def test_above_linear_interpolation(self) -> None:
        for rank in range(2, 20):
            linear = 100 - (rank - 1) / 19 * 80
            assert evaluate_row(rank, 20) > linear

    def test_always_integer(self) -> None:
        assert isinstance(evaluate_row(7, 25), int)


class TestIsFrontRow:
    """Tests for front row detection."""

    @pytest.mark.parametrize("rank", [1, 2, 3])
    def test_front_rows(self, rank: int) -> None:
        assert is_front_row(rank) is True

    @pytest.mark.parametrize("rank", [0, -1, 4, 10])
    def test_not_front_rows(self, rank: int) -> None:
        assert is_front_row(rank) is False


class TestEstimateTotalRows:
    """Tests for the tier row-count lookup."""

    @pytest.mark.parametrize(
        "tier,expected",
        [(1, 20), (2, 30), (3, 25), (4, 20), (5, 15), (99, 25), (0, 25)],
    )
    def test_lookup(self, tier: int, expected: int) -> None:
        assert estimate_total_rows(tier) == expected

    def test_accepts_section_tier(self) -> None:
        assert estimate_total_rows(SectionTier.UPPER_PREMIUM) == 30
        assert estimate_total_rows(SectionTier.OBSTRUCTED) == 15
