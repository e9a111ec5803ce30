"""Section quality scoring and tier resolution.

Venue data maps section names to tiers. When a listing's section is not
in the venue map the tier is inferred from common naming patterns
("Floor A", "Upper 312", "Obstructed View 5") and arena numbering
(100s lower bowl, 200s mid, 300s upper).
"""

import logging
import re
from typing import Optional

from seatsniper.scoring.models import SectionTier

logger = logging.getLogger(__name__)

SECTION_SCORES: dict[SectionTier, int] = {
    SectionTier.PREMIUM: 100,
    SectionTier.UPPER_PREMIUM: 80,
    SectionTier.MID_TIER: 60,
    SectionTier.UPPER_LEVEL: 40,
    SectionTier.OBSTRUCTED: 20,
}
DEFAULT_SECTION_SCORE = 50

# Checked in order; first keyword hit decides the tier
TIER_KEYWORDS: list[tuple[SectionTier, tuple[str, ...]]] = [
    (SectionTier.PREMIUM, ("floor", "pit", "vip", "club", "courtside", "field", "diamond")),
    (SectionTier.UPPER_PREMIUM, ("lower", "terrace", "box")),
    (SectionTier.UPPER_LEVEL, ("upper", "balcony", "gallery", "mezzanine")),
    (SectionTier.OBSTRUCTED, ("obstructed", "limited", "partial", "behind")),
]

_SECTION_PREFIX = re.compile(r"\b(SECTION|SEC)\b\.?\s*")
_FIRST_NUMBER = re.compile(r"(\d+)")


def rank_section(tier: Optional[SectionTier]) -> int:
    """Convert a section tier to a 0-100 quality score."""
    if tier is None:
        return DEFAULT_SECTION_SCORE
    return SECTION_SCORES.get(tier, DEFAULT_SECTION_SCORE)


def is_premium_section(tier: SectionTier) -> bool:
    """Premium and upper premium sections."""
    return tier in (SectionTier.PREMIUM, SectionTier.UPPER_PREMIUM)


def normalize_section_name(name: str) -> str:
    """Upper-case, collapse whitespace and drop a leading SECTION/SEC."""
    collapsed = " ".join(name.upper().split())
    return _SECTION_PREFIX.sub("", collapsed).strip()


def infer_tier_from_name(name: str) -> SectionTier:
    """Guess a tier from the section name alone."""
    lower = name.lower()

    for tier, keywords in TIER_KEYWORDS:
        if any(keyword in lower for keyword in keywords):
            return tier

    match = _FIRST_NUMBER.search(name)
    if match:
        number = int(match.group(1))
        if 100 <= number < 200:
            return SectionTier.UPPER_PREMIUM
        if 200 <= number < 300:
            return SectionTier.MID_TIER
        if number >= 300:
            return SectionTier.UPPER_LEVEL

    return SectionTier.MID_TIER


def tier_from_section_name(
    name: str,
    section_tiers: Optional[dict[str, SectionTier]] = None,
) -> SectionTier:
    """Resolve a section name to a tier.

    Lookup order: exact name, normalized name, digits only, then
    name-based inference.
    """
    section_tiers = section_tiers or {}

    if name in section_tiers:
        return section_tiers[name]

    normalized = normalize_section_name(name)
    if normalized in section_tiers:
        return section_tiers[normalized]

    digits = re.sub(r"\D", "", name)
    if digits and digits in section_tiers:
        return section_tiers[digits]

    tier = infer_tier_from_name(name)
    if section_tiers:
        logger.debug(f"Section '{name}' not in venue map, inferred {tier.name}")
    return tier
