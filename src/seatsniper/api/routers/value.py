"""Value scoring API endpoints.

Endpoints:
- POST /value/top-picks - score a listing batch and return ranked picks
- POST /value/compare - compare one event's prices across platforms
- GET /value/roi - estimate resale ROI for an event and price position
- GET /value/row-rank - parse a row label and score its position
"""

from typing import Optional

from fastapi import APIRouter, HTTPException, Query, status
from pydantic import BaseModel, Field

from seatsniper.config import get_settings
from seatsniper.scoring import (
    EventComparison,
    EventContext,
    Listing,
    ROIEstimate,
    TopValueListing,
    ValueScoreConfig,
    ValueScoreEngine,
    compare_prices,
    estimate_roi,
    estimate_total_rows,
    evaluate_row,
    is_front_row,
    parse_row_to_rank,
    parse_section_tier,
)

router = APIRouter(prefix="/value", tags=["value"])


class TopPicksRequest(BaseModel):
    """Listing batch for one event."""

    context: EventContext
    listings: list[Listing]
    limit: Optional[int] = Field(None, ge=1, le=100, description="Maximum picks")
    min_score: Optional[int] = Field(
        None, ge=0, le=100, description="Minimum value score (default: ALERT_SCORE_THRESHOLD)"
    )


class TopPicksResponse(BaseModel):
    """Ranked picks for an event."""

    event_id: str
    scored_count: int
    picks: list[TopValueListing]


class CompareRequest(BaseModel):
    """Listings for one event from several platforms."""

    event_id: str
    event_name: str = ""
    listings: list[Listing]


class RowRankResponse(BaseModel):
    """Parsed row label with its position score."""

    label: str
    rank: int
    total_rows: int
    score: int
    is_front_row: bool


@router.post("/top-picks", response_model=TopPicksResponse)
async def top_picks(request: TopPicksRequest) -> TopPicksResponse:
    """Score listings and return the best values, ranked 1..N."""
    settings = get_settings()
    engine = ValueScoreEngine(
        ValueScoreConfig(
            top_n=settings.top_picks_count,
            min_score=settings.alert_score_threshold,
        )
    )

    picks = engine.get_top_value_picks(
        request.listings,
        request.context,
        limit=request.limit,
        min_score=request.min_score,
    )

    return TopPicksResponse(
        event_id=request.context.event_id,
        scored_count=len(request.listings),
        picks=picks,
    )


@router.post("/compare", response_model=EventComparison)
async def compare(request: CompareRequest) -> EventComparison:
    """Cheapest platform per section, plus the overall best deal."""
    comparison = compare_prices(request.listings, request.event_id, request.event_name)
    if comparison is None:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="Price comparison needs listings from at least two platforms",
        )
    return comparison


@router.get("/roi", response_model=ROIEstimate)
async def roi(
    popularity: float = Query(..., description="Event popularity (0-100)"),
    days_until_event: int = Query(..., description="Days until the event"),
    price_delta_percent: float = Query(
        ..., description="Price vs market average in percent (negative = cheaper)"
    ),
) -> ROIEstimate:
    """Estimate resale ROI."""
    return estimate_roi(popularity, days_until_event, price_delta_percent)


@router.get("/row-rank", response_model=RowRankResponse)
async def row_rank(
    label: str = Query(..., description="Row label, e.g. 'K' or 'GA'"),
    tier: str = Query("MID_TIER", description="Section tier name or ordinal"),
) -> RowRankResponse:
    """Parse a row label and score its position in a section of the given tier."""
    try:
        section_tier = parse_section_tier(tier)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )

    rank = parse_row_to_rank(label)
    total_rows = estimate_total_rows(section_tier)

    return RowRankResponse(
        label=label,
        rank=rank,
        total_rows=total_rows,
        score=evaluate_row(rank, total_rows),
        is_front_row=is_front_row(rank),
    )
