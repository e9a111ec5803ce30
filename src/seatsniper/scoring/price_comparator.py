"""Cross-platform price comparison.

Listings for the same event are grouped by a normalized section name
("Sec. 101" and "section 101" match), keeping each platform's cheapest
offer per section. A section's best deal is its cheapest platform:

    savings         = runner-up price - best price
    savings_percent = savings / runner-up price * 100, rounded

Sections come back in section-number order; names without a number sort last.
"""

import logging
import re
from typing import Optional

from seatsniper.scoring.calculator import round_half_up
from seatsniper.scoring.models import (
    BestDeal,
    EventComparison,
    Listing,
    OverallBestDeal,
    Platform,
    PlatformPrice,
    SectionComparison,
)

logger = logging.getLogger(__name__)

MIN_PLATFORMS = 2
UNNUMBERED_SECTION = 999

_SEC_ABBREVIATION = re.compile(r"\bsec\.?\b")
_GA_ABBREVIATION = re.compile(r"\bga\b")
_ROW_SUFFIX = re.compile(r"row\s*\d+")
_SECTION_NUMBER = re.compile(r"(?:section|sec)?\s*(\d+)", re.IGNORECASE)


def normalize_comparison_section(section: str) -> str:
    """Canonical section key, so naming differences between platforms line up."""
    name = section.lower()
    name = _SEC_ABBREVIATION.sub("section", name)
    name = _GA_ABBREVIATION.sub("general admission", name)
    name = _ROW_SUFFIX.sub("", name)
    name = re.sub(r"[^\w\s]", "", name)
    return " ".join(name.split())


def extract_section_number(section: str) -> int:
    """First number in a section name, or UNNUMBERED_SECTION."""
    match = _SECTION_NUMBER.search(section)
    return int(match.group(1)) if match else UNNUMBERED_SECTION


def find_best_deal(prices: list[PlatformPrice]) -> BestDeal:
    """Cheapest entry of a non-empty price list, with savings over the next one."""
    ordered = sorted(prices, key=lambda entry: entry.price)
    best = ordered[0]

    savings = 0.0
    savings_percent = 0
    if len(ordered) > 1:
        runner_up = ordered[1].price
        savings = runner_up - best.price
        if runner_up > 0:
            savings_percent = round_half_up(savings / runner_up * 100)

    return BestDeal(
        platform=best.platform,
        price=best.price,
        url=best.url,
        savings=round(savings, 2),
        savings_percent=savings_percent,
    )


def compare_prices(
    listings: list[Listing],
    event_id: str,
    event_name: str = "",
) -> Optional[EventComparison]:
    """Compare one event's listings across platforms.

    Args:
        listings: Listings from every platform for the event
        event_id: Event being compared
        event_name: Display name for the event

    Returns:
        EventComparison, or None when fewer than two platforms have listings
    """
    platforms: list[Platform] = []
    for listing in listings:
        if listing.platform not in platforms:
            platforms.append(listing.platform)

    if len(platforms) < MIN_PLATFORMS:
        logger.debug(f"Skipping comparison for {event_id}: {len(platforms)} platform(s)")
        return None

    # section key -> platform -> cheapest offer
    by_section: dict[str, dict[Platform, PlatformPrice]] = {}
    for listing in listings:
        key = normalize_comparison_section(listing.section)
        offers = by_section.setdefault(key, {})
        current = offers.get(listing.platform)
        if current is None or listing.price_per_ticket < current.price:
            offers[listing.platform] = PlatformPrice(
                platform=listing.platform,
                price=listing.price_per_ticket,
                url=listing.deep_link,
                quantity=listing.quantity,
            )

    sections: list[SectionComparison] = []
    overall: Optional[OverallBestDeal] = None
    for key, offers in by_section.items():
        prices = sorted(offers.values(), key=lambda entry: entry.price)
        best_deal = find_best_deal(prices)
        sections.append(SectionComparison(section=key, prices=prices, best_deal=best_deal))

        if overall is None or best_deal.price < overall.price:
            overall = OverallBestDeal(
                section=key,
                platform=best_deal.platform,
                price=best_deal.price,
                url=best_deal.url,
            )

    sections.sort(key=lambda item: extract_section_number(item.section))

    logger.info(
        f"Compared {len(listings)} listings for {event_id} across "
        f"{len(platforms)} platforms in {len(sections)} sections"
    )

    return EventComparison(
        event_id=event_id,
        event_name=event_name,
        platforms_compared=platforms,
        sections=sections,
        overall_best_deal=overall,
    )
