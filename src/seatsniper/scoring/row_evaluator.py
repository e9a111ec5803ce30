"""Row label parsing and row position scoring.

Row labels arrive as opaque text from the platforms ("15", "K", "AA",
"GA"). They are parsed into a numeric rank (1 = front of section) by an
ordered rule table; the first rule that matches wins. Unparseable labels
yield UNKNOWN_ROW_RANK.

Position scoring applies a square-root curve to the distance from the back
of the section, so the front half scores well above a linear scale:

    position = (rank - 1) / (total_rows - 1)      0 = front, 1 = back
    score = 20 + 80 * sqrt(1 - position)
"""

import math
import re
from typing import Callable, Optional

from seatsniper.scoring.calculator import round_half_up

UNKNOWN_ROW_RANK = -1

# Returned when the position within the section cannot be determined
NEUTRAL_ROW_SCORE = 50

FRONT_ROW_SCORE = 100
BACK_ROW_FLOOR = 20
FRONT_ROW_MAX_RANK = 3

GENERAL_ADMISSION_KEYWORDS: frozenset[str] = frozenset({"GA", "GENERAL ADMISSION", "PIT"})

# Typical row counts by section tier ordinal, for sections without venue data
TOTAL_ROWS_BY_TIER: dict[int, int] = {
    1: 20,  # Premium (floor, VIP) - often smaller
    2: 30,  # Lower bowl
    3: 25,  # Mid level
    4: 20,  # Upper level
    5: 15,  # Obstructed/gallery
}
DEFAULT_TOTAL_ROWS = 25

_NUMERIC = re.compile(r"^\d+$", re.ASCII)
_SINGLE_LETTER = re.compile(r"^[A-Z]$")
_DOUBLE_LETTER = re.compile(r"^[A-Z]{2}$")


def _letter_value(char: str) -> int:
    return ord(char) - ord("A") + 1


def _numeric_row(label: str) -> Optional[int]:
    if not _NUMERIC.match(label):
        return None
    rank = int(label)
    # Row "0" is not a position
    return rank if rank >= 1 else UNKNOWN_ROW_RANK


def _keyword_row(label: str) -> Optional[int]:
    return 1 if label in GENERAL_ADMISSION_KEYWORDS else None


def _single_letter_row(label: str) -> Optional[int]:
    if not _SINGLE_LETTER.match(label):
        return None
    return _letter_value(label)


def _double_letter_row(label: str) -> Optional[int]:
    # AA=27, AB=28 ... AZ=52, BA=53
    if not _DOUBLE_LETTER.match(label):
        return None
    return 26 + (_letter_value(label[0]) - 1) * 26 + _letter_value(label[1])


# Order matters: keywords must run before the double-letter rule ("GA")
ROW_RULES: list[tuple[str, Callable[[str], Optional[int]]]] = [
    ("numeric", _numeric_row),
    ("keyword", _keyword_row),
    ("single_letter", _single_letter_row),
    ("double_letter", _double_letter_row),
]


def normalize_row_label(label: Optional[str]) -> str:
    """Trim, upper-case and collapse inner whitespace."""
    if not label:
        return ""
    return " ".join(label.upper().split())


def parse_row_to_rank(label: Optional[str]) -> int:
    """Parse a row label to a numeric rank.

    Args:
        label: Free-text row label from the platform

    Returns:
        Rank >= 1, or UNKNOWN_ROW_RANK (-1) if the label is not understood
    """
    normalized = normalize_row_label(label)
    if not normalized:
        return UNKNOWN_ROW_RANK

    for _name, rule in ROW_RULES:
        rank = rule(normalized)
        if rank is not None:
            return rank

    return UNKNOWN_ROW_RANK


def evaluate_row(row_rank: int, total_rows: int) -> int:
    """Score a row's position within its section.

    Args:
        row_rank: Position of the row (1 = front row)
        total_rows: Rows in the section

    Returns:
        Score 0-100; NEUTRAL_ROW_SCORE when either input is unknown
    """
    if row_rank < 1 or total_rows < 1:
        return NEUTRAL_ROW_SCORE

    row_rank = min(row_rank, total_rows)
    if row_rank == 1:
        return FRONT_ROW_SCORE

    position = (row_rank - 1) / (total_rows - 1)
    score = BACK_ROW_FLOOR + math.sqrt(1 - position) * (FRONT_ROW_SCORE - BACK_ROW_FLOOR)

    return round_half_up(max(BACK_ROW_FLOOR, score))


def is_front_row(rank: int) -> bool:
    """Is this one of the first three rows?"""
    return 1 <= rank <= FRONT_ROW_MAX_RANK


def estimate_total_rows(tier_ordinal: int) -> int:
    """Estimate rows in a section from its tier when the real count is unknown."""
    return TOTAL_ROWS_BY_TIER.get(tier_ordinal, DEFAULT_TOTAL_ROWS)
