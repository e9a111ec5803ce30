"""Tests for section tier resolution and section quality scores."""

import pytest
from pydantic import ValidationError

from seatsniper.scoring.models import Listing, Platform, SectionTier, parse_section_tier
from seatsniper.scoring.section_ranker import (
    is_premium_section,
    normalize_section_name,
    rank_section,
    tier_from_section_name,
)


class TestRankSection:
    """Tests for tier -> score mapping."""

    @pytest.mark.parametrize(
        "tier,expected",
        [
            (SectionTier.PREMIUM, 100),
            (SectionTier.UPPER_PREMIUM, 80),
            (SectionTier.MID_TIER, 60),
            (SectionTier.UPPER_LEVEL, 40),
            (SectionTier.OBSTRUCTED, 20),
            (None, 50),
        ],
    )
    def test_scores(self, tier: SectionTier, expected: int) -> None:
        assert rank_section(tier) == expected

    def test_premium_sections(self) -> None:
        assert is_premium_section(SectionTier.PREMIUM)
        assert is_premium_section(SectionTier.UPPER_PREMIUM)
        assert not is_premium_section(SectionTier.MID_TIER)


class TestTierFromSectionName:
    """Tests for section name lookup and inference."""

    def test_exact_match(self) -> None:
        tiers = {"Floor A": SectionTier.PREMIUM}
        assert tier_from_section_name("Floor A", tiers) == SectionTier.PREMIUM

    def test_normalized_match(self) -> None:
        tiers = {"102": SectionTier.UPPER_LEVEL}
        assert tier_from_section_name("Section 102", tiers) == SectionTier.UPPER_LEVEL
        assert tier_from_section_name("sec 102", tiers) == SectionTier.UPPER_LEVEL

    def test_digits_match(self) -> None:
        tiers = {"7": SectionTier.OBSTRUCTED}
        assert tier_from_section_name("Sec. 7B", tiers) == SectionTier.OBSTRUCTED

    def test_venue_map_wins_over_inference(self) -> None:
        tiers = {"Floor A": SectionTier.MID_TIER}
        assert tier_from_section_name("Floor A", tiers) == SectionTier.MID_TIER

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("Floor A", SectionTier.PREMIUM),
            ("VIP Lounge", SectionTier.PREMIUM),
            ("Lower Level 12", SectionTier.UPPER_PREMIUM),
            ("Terrace", SectionTier.UPPER_PREMIUM),
            ("Balcony Right", SectionTier.UPPER_LEVEL),
            ("Obstructed View 5", SectionTier.OBSTRUCTED),
            ("115", SectionTier.UPPER_PREMIUM),
            ("Section 220", SectionTier.MID_TIER),
            ("312", SectionTier.UPPER_LEVEL),
            ("Section 12", SectionTier.MID_TIER),
            ("Mystery", SectionTier.MID_TIER),
        ],
    )
    def test_inference(self, name: str, expected: SectionTier) -> None:
        assert tier_from_section_name(name) == expected

    def test_normalize(self) -> None:
        assert normalize_section_name("  section   104 ") == "104"
        assert normalize_section_name("Floor  A") == "FLOOR A"


class TestParseSectionTier:
    """Tests for tier parsing at the ingestion boundary."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (SectionTier.PREMIUM, SectionTier.PREMIUM),
            (3, SectionTier.MID_TIER),
            ("5", SectionTier.OBSTRUCTED),
            ("premium", SectionTier.PREMIUM),
            ("Upper Premium", SectionTier.UPPER_PREMIUM),
            ("mid-tier", SectionTier.MID_TIER),
            (" UPPER_LEVEL ", SectionTier.UPPER_LEVEL),
        ],
    )
    def test_valid(self, value: object, expected: SectionTier) -> None:
        assert parse_section_tier(value) == expected

    @pytest.mark.parametrize("value", [0, 6, 99, "VIP", "", True, 2.5, None])
    def test_invalid(self, value: object) -> None:
        with pytest.raises(ValueError):
            parse_section_tier(value)

    def test_listing_rejects_unknown_tier(self) -> None:
        with pytest.raises(ValidationError):
            Listing(
                platform_listing_id="x",
                platform=Platform.STUBHUB,
                event_id="e",
                section="101",
                price_per_ticket=50,
                section_tier=99,
            )

    def test_listing_accepts_tier_name(self) -> None:
        listing = Listing(
            platform_listing_id="x",
            platform=Platform.STUBHUB,
            event_id="e",
            section="101",
            price_per_ticket=50,
            section_tier="upper premium",
        )
        assert listing.section_tier == SectionTier.UPPER_PREMIUM
