"""Value score engine - scores and ranks a batch of listings for one event.

Value Score components:
| Component          | Weight | Source                           |
|--------------------|--------|----------------------------------|
| Price vs average   | 35%    | price_analyzer.analyze_price      |
| Section quality    | 25%    | section_ranker.rank_section       |
| Row position       | 15%    | row_evaluator.evaluate_row        |
| Historical pricing | 15%    | price_analyzer.analyze_historical |
| Resale potential   | 10%    | resale_predictor.predict_resale   |

Ranking: value score descending, ties broken by lower price per ticket.

Usage:
    engine = ValueScoreEngine()
    picks = engine.get_top_value_picks(listings, context)
"""

import logging
from typing import Optional

from seatsniper.scoring.calculator import to_score
from seatsniper.scoring.models import (
    RECOMMENDATION_LABELS,
    EventContext,
    Listing,
    ScoredListing,
    TopValueListing,
    ValueRecommendation,
    ValueScoreBreakdown,
    ValueScoreConfig,
    ValueScoreFlags,
)
from seatsniper.scoring.price_analyzer import (
    analyze_historical,
    analyze_price,
    is_historical_low,
    is_price_outlier,
    price_delta_percent,
)
from seatsniper.scoring.resale_predictor import estimate_roi, predict_resale
from seatsniper.scoring.row_evaluator import (
    estimate_total_rows,
    evaluate_row,
    is_front_row,
    parse_row_to_rank,
)
from seatsniper.scoring.section_ranker import (
    is_premium_section,
    rank_section,
    tier_from_section_name,
)

logger = logging.getLogger(__name__)


def calculate_average_price(listings: list[Listing]) -> float:
    """Mean price per ticket across a batch (0 for an empty batch)."""
    if not listings:
        return 0.0
    return sum(listing.price_per_ticket for listing in listings) / len(listings)


def rank_sort_key(scored: ScoredListing) -> tuple[int, float]:
    """Sort key: highest value score first, then cheapest."""
    return (-scored.value_score, scored.listing.price_per_ticket)


class ValueScoreEngine:
    """Scores listings and picks the best values for alerting."""

    def __init__(self, config: Optional[ValueScoreConfig] = None) -> None:
        self.config = config or ValueScoreConfig()

    # --- Single listing ---

    def score_listing(
        self,
        listing: Listing,
        context: EventContext,
        average_price: Optional[float] = None,
    ) -> ScoredListing:
        """Calculate the value score for one listing.

        Args:
            listing: Listing to score
            context: Event-level popularity, timing and venue data
            average_price: Market average to compare against; falls back to
                context.average_price, then to neutral price scoring

        Returns:
            ScoredListing with breakdown, recommendation and flags
        """
        if average_price is None:
            average_price = context.average_price or 0.0

        weights = self.config.weights
        price = listing.price_per_ticket

        tier = listing.section_tier
        if tier is None:
            tier = tier_from_section_name(listing.section, context.section_tiers)

        row_rank = parse_row_to_rank(listing.row)
        total_rows = estimate_total_rows(tier)
        history = context.historical_prices.get(listing.section, [])

        breakdown = ValueScoreBreakdown(
            price=analyze_price(price, average_price),
            section=rank_section(tier),
            row=evaluate_row(row_rank, total_rows),
            historical=analyze_historical(price, history),
            resale=predict_resale(context.popularity, context.days_until_event, tier),
        )

        value_score = to_score(
            breakdown.price * weights.price_vs_average
            + breakdown.section * weights.section_quality
            + breakdown.row * weights.row_position
            + breakdown.historical * weights.historical_pricing
            + breakdown.resale * weights.resale_potential
        )

        return ScoredListing(
            listing=listing,
            section_tier=tier,
            row_rank=row_rank,
            value_score=value_score,
            breakdown=breakdown,
            recommendation=self.get_recommendation(value_score),
            reasoning=self._build_reasoning(
                breakdown, value_score, price, average_price, is_front_row(row_rank)
            ),
            flags=ValueScoreFlags(
                is_historical_low=is_historical_low(
                    price, history, self.config.historical_low_tolerance
                ),
                is_premium_section=is_premium_section(tier),
                is_front_row=is_front_row(row_rank),
                is_price_outlier=is_price_outlier(
                    price, average_price, self.config.price_outlier_threshold
                ),
            ),
            roi=estimate_roi(
                context.popularity,
                context.days_until_event,
                price_delta_percent(price, average_price),
            ),
        )

    # --- Batch operations ---

    def score_listings(
        self,
        listings: list[Listing],
        context: EventContext,
    ) -> list[ScoredListing]:
        """Score every listing in a batch for one event."""
        if not listings:
            return []

        average_price = context.average_price
        if average_price is None:
            average_price = calculate_average_price(listings)

        scored = [self.score_listing(listing, context, average_price) for listing in listings]

        logger.debug(
            f"Scored {len(scored)} listings for event {context.event_id} "
            f"(avg price {average_price:.2f})"
        )
        return scored

    def rank_listings(
        self,
        scored: list[ScoredListing],
        limit: Optional[int] = None,
    ) -> list[ScoredListing]:
        """Sort by value score descending, cheaper first on ties."""
        ranked = sorted(scored, key=rank_sort_key)
        if limit is not None:
            ranked = ranked[: max(0, limit)]
        return ranked

    def filter_by_min_score(
        self,
        scored: list[ScoredListing],
        min_score: int,
    ) -> list[ScoredListing]:
        """Keep listings scoring at least min_score."""
        return [item for item in scored if item.value_score >= min_score]

    def get_top_value_picks(
        self,
        listings: list[Listing],
        context: EventContext,
        limit: Optional[int] = None,
        min_score: Optional[int] = None,
    ) -> list[TopValueListing]:
        """Score, rank and label the best listings for an alert.

        Args:
            listings: Listings for a single event
            context: Event-level scoring inputs
            limit: Maximum picks (defaults to config.top_n)
            min_score: Drop picks below this score (defaults to config.min_score)

        Returns:
            Picks ranked 1..N with no gaps
        """
        if limit is None:
            limit = self.config.top_n
        if min_score is None:
            min_score = self.config.min_score

        scored = self.score_listings(listings, context)
        if min_score is not None:
            scored = self.filter_by_min_score(scored, min_score)

        ranked = self.rank_listings(scored, limit)
        picks = [self.to_top_value_listing(item, rank) for rank, item in enumerate(ranked, start=1)]

        if picks:
            logger.info(
                f"Found {len(picks)} value picks for event {context.event_id} "
                f"(top score {picks[0].value_score})"
            )
        return picks

    # --- Helpers ---

    def get_recommendation(self, score: int) -> ValueRecommendation:
        """Map a value score to its recommendation band."""
        if score >= self.config.excellent_threshold:
            return ValueRecommendation.EXCELLENT
        if score >= self.config.good_threshold:
            return ValueRecommendation.GOOD
        if score >= self.config.fair_threshold:
            return ValueRecommendation.FAIR
        if score >= self.config.below_average_threshold:
            return ValueRecommendation.BELOW_AVERAGE
        return ValueRecommendation.POOR

    @staticmethod
    def to_top_value_listing(scored: ScoredListing, rank: int) -> TopValueListing:
        """Convert a scored listing into an alert pick."""
        listing = scored.listing
        return TopValueListing(
            rank=rank,
            section=listing.section,
            row=listing.row,
            price_per_ticket=listing.price_per_ticket,
            quantity=listing.quantity,
            value_score=scored.value_score,
            recommendation=RECOMMENDATION_LABELS[scored.recommendation],
            platform=listing.platform,
            deep_link=listing.deep_link,
        )

    @staticmethod
    def _build_reasoning(
        breakdown: ValueScoreBreakdown,
        value_score: int,
        price: float,
        average_price: float,
        front_row: bool,
    ) -> str:
        reasons: list[str] = []

        if breakdown.price >= 75 and average_price > 0:
            percent_below = round((average_price - price) / average_price * 100)
            if percent_below > 0:
                reasons.append(f"{percent_below}% below average price")
        elif breakdown.price <= 40:
            reasons.append("Above average price")

        if breakdown.section >= 80:
            reasons.append("Premium seating location")
        elif breakdown.section <= 40:
            reasons.append("Upper level or obstructed view")

        if front_row:
            reasons.append("Front row position")

        if breakdown.historical >= 90:
            reasons.append("Near historical low price")

        if breakdown.resale >= 80:
            reasons.append("High resale potential")

        if not reasons:
            if value_score >= 70:
                reasons.append("Solid overall value based on multiple factors")
            elif value_score >= 50:
                reasons.append("Average value - compare with other options")
            else:
                reasons.append("Below average value - consider waiting for better deals")

        return ". ".join(reasons) + "."
