"""Data models for listing value scoring."""

from datetime import datetime
from enum import Enum, IntEnum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class SectionTier(IntEnum):
    """Seating section classes. Lower ordinal = better seat class."""

    PREMIUM = 1  # Floor, VIP, club level
    UPPER_PREMIUM = 2  # Lower bowl center
    MID_TIER = 3  # Lower bowl sides, upper bowl center
    UPPER_LEVEL = 4  # Upper bowl sides, balcony
    OBSTRUCTED = 5  # Limited view, behind stage


def parse_section_tier(value: "SectionTier | int | str") -> SectionTier:
    """Convert loosely-typed tier data into a SectionTier.

    Accepts an existing SectionTier, an int ordinal, a numeric string or a
    tier name ("premium", "Upper Premium", "mid-tier").

    Raises:
        ValueError: If the value does not name one of the five tiers.
    """
    if isinstance(value, SectionTier):
        return value

    if isinstance(value, bool):
        raise ValueError(f"Unknown section tier: {value!r}")

    if isinstance(value, int):
        try:
            return SectionTier(value)
        except ValueError:
            raise ValueError(f"Unknown section tier: {value!r}") from None

    if isinstance(value, str):
        text = value.strip()
        if text.isdigit():
            return parse_section_tier(int(text))
        name = "_".join(text.replace("-", " ").upper().split())
        try:
            return SectionTier[name]
        except KeyError:
            raise ValueError(f"Unknown section tier: {value!r}") from None

    raise ValueError(f"Unknown section tier: {value!r}")


class Platform(str, Enum):
    """Resale marketplaces listings are aggregated from."""

    STUBHUB = "stubhub"
    TICKETMASTER = "ticketmaster"
    SEATGEEK = "seatgeek"
    VIVIDSEATS = "vividseats"


class Confidence(str, Enum):
    """Confidence tier of an ROI estimate."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class ValueRecommendation(str, Enum):
    """Score band a listing falls into."""

    EXCELLENT = "excellent"  # Buy immediately
    GOOD = "good"  # Strong buy
    FAIR = "fair"  # Average value
    BELOW_AVERAGE = "below_average"  # Wait for better
    POOR = "poor"  # Overpriced


# Short labels shown to subscribers
RECOMMENDATION_LABELS: dict[ValueRecommendation, str] = {
    ValueRecommendation.EXCELLENT: "Exceptional deal",
    ValueRecommendation.GOOD: "Good value",
    ValueRecommendation.FAIR: "Fair price",
    ValueRecommendation.BELOW_AVERAGE: "Below average",
    ValueRecommendation.POOR: "Pass",
}


class Listing(BaseModel):
    """Normalized resale listing from a platform adapter."""

    model_config = ConfigDict(allow_inf_nan=False)

    platform_listing_id: str = Field(..., description="Listing ID on the source platform")
    platform: Platform = Field(..., description="Source marketplace")
    event_id: str = Field(..., description="Event the listing belongs to")

    # Seat location (opaque text from the platform)
    section: str = Field(..., description="Section label")
    row: str = Field("", description="Row label")

    # Pricing
    quantity: int = Field(1, ge=1, description="Tickets in the listing")
    price_per_ticket: float = Field(..., ge=0, description="Price per ticket")
    fees: float = Field(0.0, ge=0, description="Platform fees for the whole listing")

    deep_link: str = Field("", description="Purchase URL supplied by the deep-link builder")
    section_tier: Optional[SectionTier] = Field(
        None, description="Section tier; resolved from the section name when missing"
    )

    @field_validator("section_tier", mode="before")
    @classmethod
    def coerce_tier(cls, value):
        if value is None:
            return None
        return parse_section_tier(value)

    @property
    def total_price(self) -> float:
        """Price for all tickets including fees."""
        return self.price_per_ticket * self.quantity + self.fees


class HistoricalPrice(BaseModel):
    """Aggregated price snapshot for one section on one date."""

    model_config = ConfigDict(allow_inf_nan=False)

    date: datetime
    section: str
    average_price: float = Field(..., ge=0)
    lowest_price: float = Field(..., ge=0)
    highest_price: float = Field(..., ge=0)
    listing_count: int = Field(0, ge=0)


class EventContext(BaseModel):
    """Event-level inputs shared by every listing in a batch."""

    model_config = ConfigDict(allow_inf_nan=False)

    event_id: str
    event_name: str = ""

    # Resale signal (clamped during scoring, never rejected)
    popularity: float = Field(50.0, description="Demand proxy, 0-100")
    days_until_event: int = Field(..., description="Negative for events already held")

    average_price: Optional[float] = Field(
        None, description="Market average; batch mean is used when missing"
    )
    section_tiers: dict[str, SectionTier] = Field(
        default_factory=dict, description="Venue section name -> tier"
    )
    historical_prices: dict[str, list[HistoricalPrice]] = Field(
        default_factory=dict, description="Section -> price history"
    )

    @field_validator("section_tiers", mode="before")
    @classmethod
    def coerce_tiers(cls, value):
        if isinstance(value, dict):
            return {name: parse_section_tier(tier) for name, tier in value.items()}
        return value


class ROIEstimate(BaseModel):
    """Estimated resale return for a purchase."""

    estimated_roi: int = Field(..., description="Signed percent")
    confidence: Confidence
    recommendation: str = ""


class ValueScoreBreakdown(BaseModel):
    """Component scores (each 0-100)."""

    price: int
    section: int
    row: int
    historical: int
    resale: int


class ValueScoreFlags(BaseModel):
    """Special conditions worth calling out in an alert."""

    is_historical_low: bool = False
    is_premium_section: bool = False
    is_front_row: bool = False
    is_price_outlier: bool = False


class ScoredListing(BaseModel):
    """A listing with its value score."""

    listing: Listing
    section_tier: SectionTier
    row_rank: int
    value_score: int = Field(..., ge=0, le=100)
    breakdown: ValueScoreBreakdown
    recommendation: ValueRecommendation
    reasoning: str
    flags: ValueScoreFlags
    roi: ROIEstimate


class TopValueListing(BaseModel):
    """Ranked pick handed to the notification layer."""

    rank: int = Field(..., ge=1)
    section: str
    row: str
    price_per_ticket: float
    quantity: int
    value_score: int = Field(..., ge=0, le=100)
    recommendation: str
    platform: Platform
    deep_link: str


class PlatformPrice(BaseModel):
    """Cheapest offer one platform has for a section."""

    platform: Platform
    price: float
    url: str
    quantity: int


class BestDeal(BaseModel):
    """Cheapest platform for a section and how much it saves over the runner-up."""

    platform: Platform
    price: float
    url: str
    savings: float = Field(..., ge=0, description="Dollars saved per ticket")
    savings_percent: int = Field(..., ge=0, description="Savings vs the runner-up price")


class SectionComparison(BaseModel):
    """Per-platform prices for one normalized section."""

    section: str
    prices: list[PlatformPrice]
    best_deal: BestDeal


class OverallBestDeal(BaseModel):
    """Cheapest ticket across every compared section."""

    section: str
    platform: Platform
    price: float
    url: str


class EventComparison(BaseModel):
    """Cross-platform price comparison for one event."""

    event_id: str
    event_name: str = ""
    platforms_compared: list[Platform]
    sections: list[SectionComparison]
    overall_best_deal: Optional[OverallBestDeal] = None


class ValueScoreWeights(BaseModel):
    """Weights for each value score component (must sum to 1.0)."""

    price_vs_average: float = Field(0.35, ge=0, description="Price vs current market average")
    section_quality: float = Field(0.25, ge=0, description="Section tier quality")
    row_position: float = Field(0.15, ge=0, description="Row position within the section")
    historical_pricing: float = Field(0.15, ge=0, description="Price vs section history")
    resale_potential: float = Field(0.10, ge=0, description="Predicted resale demand")

    @model_validator(mode="after")
    def check_sum(self) -> "ValueScoreWeights":
        total = (
            self.price_vs_average
            + self.section_quality
            + self.row_position
            + self.historical_pricing
            + self.resale_potential
        )
        if abs(total - 1.0) > 0.001:
            raise ValueError(f"Value score weights must sum to 1.0, got {total:.3f}")
        return self


class ValueScoreConfig(BaseModel):
    """Configuration for the value score engine."""

    weights: ValueScoreWeights = Field(default_factory=ValueScoreWeights)

    # Alert selection
    top_n: int = Field(5, ge=1, description="Picks included in an alert")
    min_score: Optional[int] = Field(
        None, ge=0, le=100, description="Drop picks scoring below this"
    )

    # Recommendation bands (lower bounds, inclusive)
    excellent_threshold: int = Field(85, description="Score for 'excellent'")
    good_threshold: int = Field(70, description="Score for 'good'")
    fair_threshold: int = Field(55, description="Score for 'fair'")
    below_average_threshold: int = Field(40, description="Score for 'below_average'")

    # Flag thresholds
    historical_low_tolerance: float = Field(
        0.05, description="Within this fraction of the all-time low counts as a low"
    )
    price_outlier_threshold: float = Field(
        0.25, description="Fraction below average that flags a price outlier"
    )
