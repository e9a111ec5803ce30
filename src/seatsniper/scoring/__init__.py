"""Listing value scoring module."""

from seatsniper.scoring.engine import ValueScoreEngine, calculate_average_price
from seatsniper.scoring.models import (
    Confidence,
    EventComparison,
    EventContext,
    HistoricalPrice,
    Listing,
    Platform,
    ROIEstimate,
    ScoredListing,
    SectionTier,
    TopValueListing,
    ValueRecommendation,
    ValueScoreConfig,
    ValueScoreWeights,
    parse_section_tier,
)
from seatsniper.scoring.price_comparator import compare_prices
from seatsniper.scoring.resale_predictor import estimate_roi, predict_resale
from seatsniper.scoring.row_evaluator import (
    UNKNOWN_ROW_RANK,
    estimate_total_rows,
    evaluate_row,
    is_front_row,
    parse_row_to_rank,
)

__all__ = [
    # Models
    "Confidence",
    "EventComparison",
    "EventContext",
    "HistoricalPrice",
    "Listing",
    "Platform",
    "ROIEstimate",
    "ScoredListing",
    "SectionTier",
    "TopValueListing",
    "ValueRecommendation",
    "ValueScoreConfig",
    "ValueScoreWeights",
    "parse_section_tier",
    # Row evaluator
    "UNKNOWN_ROW_RANK",
    "parse_row_to_rank",
    "evaluate_row",
    "is_front_row",
    "estimate_total_rows",
    # Resale predictor
    "predict_resale",
    "estimate_roi",
    # Engine
    "ValueScoreEngine",
    "calculate_average_price",
    # Price comparator
    "compare_prices",
]
