"""Resale demand prediction and ROI estimation.

Resale score factors (weighted sum):
| Factor     | Weight | Notes                                   |
|------------|--------|-----------------------------------------|
| Popularity | 50%    | Stepped, very popular events get a bonus |
| Timing     | 30%    | Sweet spot 7-30 days before the event    |
| Section    | 20%    | Better tiers resell more easily          |
"""

from seatsniper.scoring.calculator import clamp, round_half_up, to_score
from seatsniper.scoring.models import (
    Confidence,
    ROIEstimate,
    SectionTier,
    parse_section_tier,
)

POPULARITY_WEIGHT = 0.5
TIMING_WEIGHT = 0.3
SECTION_WEIGHT = 0.2

SECTION_RESALE_SCORES: dict[SectionTier, int] = {
    SectionTier.PREMIUM: 100,
    SectionTier.UPPER_PREMIUM: 85,
    SectionTier.MID_TIER: 70,
    SectionTier.UPPER_LEVEL: 50,
    SectionTier.OBSTRUCTED: 30,
}

# ROI classification thresholds
HIGH_CONFIDENCE_RESALE = 80
HIGH_CONFIDENCE_DISCOUNT = -15.0
MEDIUM_CONFIDENCE_RESALE = 60
# Premiums up to this many percent count as "near average"
PREMIUM_TOLERANCE = 10.0


def score_popularity(popularity: float) -> int:
    """Score event popularity (already clamped to 0-100)."""
    if popularity >= 90:
        return 100
    if popularity >= 80:
        return 90
    if popularity >= 60:
        return 70
    if popularity >= 40:
        return 50
    if popularity >= 20:
        return 30
    return 20


def score_timing(days_until_event: int) -> int:
    """Score time remaining before the event.

    Too close means few buyers and panic pricing; too far means buyers
    feel no urgency yet.
    """
    if days_until_event < 1:
        return 20
    if days_until_event < 3:
        return 40
    if days_until_event < 7:
        return 60
    if days_until_event <= 30:
        return 100
    if days_until_event <= 60:
        return 80
    if days_until_event <= 90:
        return 60
    if days_until_event <= 180:
        return 40
    return 30


def score_section_resale(tier: SectionTier) -> int:
    """Score how easily a section tier resells."""
    return SECTION_RESALE_SCORES[tier]


def predict_resale(
    popularity_score: float,
    days_until_event: int,
    tier: SectionTier | int | str,
) -> int:
    """Predict resale desirability.

    Args:
        popularity_score: Event demand proxy, clamped to 0-100
        days_until_event: Days remaining; negative (past event) counts as 0
        tier: Section tier

    Returns:
        Resale score 0-100

    Raises:
        ValueError: If tier is not one of the defined section tiers
    """
    section_tier = parse_section_tier(tier)
    popularity = clamp(popularity_score, 0, 100)
    days = max(0, days_until_event)

    total = (
        score_popularity(popularity) * POPULARITY_WEIGHT
        + score_timing(days) * TIMING_WEIGHT
        + score_section_resale(section_tier) * SECTION_WEIGHT
    )

    return to_score(total)


def estimate_roi(
    popularity_score: float,
    days_until_event: int,
    price_delta_percent: float,
) -> ROIEstimate:
    """Estimate resale return for buying at the current price.

    Demand is judged with a mid-tier section so the estimate reflects the
    event rather than a specific seat.

    Args:
        popularity_score: Event demand proxy (0-100)
        days_until_event: Days remaining before the event
        price_delta_percent: Price vs market average in percent
            (negative = below average)

    Returns:
        ROIEstimate with a signed integer percent and confidence tier
    """
    resale_score = predict_resale(popularity_score, days_until_event, SectionTier.MID_TIER)
    discount = abs(price_delta_percent)

    if resale_score >= HIGH_CONFIDENCE_RESALE and price_delta_percent < HIGH_CONFIDENCE_DISCOUNT:
        return ROIEstimate(
            estimated_roi=round_half_up(20 + discount * 0.5),
            confidence=Confidence.HIGH,
            recommendation="Strong resale potential - high demand with good price",
        )

    if resale_score >= MEDIUM_CONFIDENCE_RESALE and price_delta_percent < 0:
        return ROIEstimate(
            estimated_roi=round_half_up(10 + discount * 0.3),
            confidence=Confidence.MEDIUM,
            recommendation="Moderate resale potential",
        )

    if price_delta_percent > PREMIUM_TOLERANCE:
        # Paying a premium eats the resale margin
        return ROIEstimate(
            estimated_roi=min(-1, round_half_up(-price_delta_percent * 0.5)),
            confidence=Confidence.MEDIUM,
            recommendation="Caution - price above average may limit resale",
        )

    return ROIEstimate(
        estimated_roi=0,
        confidence=Confidence.LOW,
        recommendation="Uncertain resale outcome",
    )
