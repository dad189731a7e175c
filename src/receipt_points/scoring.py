"""Point scoring for receipts.

Points are awarded by the following rules, evaluated in order:

1. One point for every ASCII alphanumeric character in the retailer name.
2. 50 points if the total is a round dollar amount with no cents.
3. 25 points if the total is a multiple of 0.25.
4. 5 points for every two items, when there are more than two items.
5. For each item whose trimmed description length is a multiple of 3,
   the price multiplied by 0.2 and rounded up.
6. 6 points if the day in the purchase date is odd.
7. 10 points if the purchase hour is between 14 and 16 inclusive.

Rules 6 and 7 need the purchase date and time to parse as
``YYYY-MM-DD HH:MM``. If they don't, scoring stops after rule 5.

Rule 7 accepts any time from 14:00 through 16:59. The rule is usually
phrased as "after 2:00pm and before 4:00pm", so 16:xx is arguably a bug,
but existing clients depend on the inclusive behavior.
"""

from __future__ import annotations

import logging
import math
import re
import string
from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from receipt_points.models import Item, Receipt

logger = logging.getLogger(__name__)

ALPHANUMERIC = frozenset(string.ascii_letters + string.digits)

ROUND_TOTAL_POINTS = 50
QUARTER_MULTIPLE_POINTS = 25
ITEM_PAIR_POINTS = 5
ODD_DAY_POINTS = 6
AFTERNOON_POINTS = 10

AFTERNOON_START_HOUR = 14
AFTERNOON_END_HOUR = 16

PURCHASED_AT_FORMAT = "%Y-%m-%d %H:%M"

_DECIMAL_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_PURCHASED_AT_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2} [0-9]{2}:[0-9]{2}")


@dataclass(frozen=True)
class PointsBreakdown:
    """Points awarded by each rule for a single receipt."""

    retailer: int = 0
    round_total: int = 0
    quarter_multiple: int = 0
    item_pairs: int = 0
    descriptions: int = 0
    odd_day: int = 0
    afternoon: int = 0
    purchased_at_parsed: bool = False

    @property
    def total(self) -> int:
        return (
            self.retailer
            + self.round_total
            + self.quarter_multiple
            + self.item_pairs
            + self.descriptions
            + self.odd_day
            + self.afternoon
        )


def score(receipt: Receipt) -> int:
    """Return the total points for a receipt."""
    return score_breakdown(receipt).total


def score_breakdown(receipt: Receipt) -> PointsBreakdown:
    """Score a receipt, keeping each rule's contribution separate."""
    total = parse_amount(receipt.total)
    points = {
        "retailer": count_alphanumeric(receipt.retailer),
        "round_total": ROUND_TOTAL_POINTS if total.is_integer() else 0,
        "quarter_multiple": (
            QUARTER_MULTIPLE_POINTS if math.fmod(total, 0.25) == 0 else 0
        ),
        "item_pairs": item_pair_points(len(receipt.items)),
        "descriptions": description_points(receipt.items),
    }

    purchased_at = parse_purchased_at(receipt.purchase_date, receipt.purchase_time)
    if purchased_at is None:
        logger.debug(
            "Unparseable purchase timestamp %r %r; skipping date and time rules",
            receipt.purchase_date,
            receipt.purchase_time,
        )
        return PointsBreakdown(**points)

    if purchased_at.day % 2 != 0:
        points["odd_day"] = ODD_DAY_POINTS
    if AFTERNOON_START_HOUR <= purchased_at.hour <= AFTERNOON_END_HOUR:
        points["afternoon"] = AFTERNOON_POINTS
    return PointsBreakdown(**points, purchased_at_parsed=True)


def count_alphanumeric(text: str) -> int:
    """Count the ASCII letters and digits in text."""
    return sum(1 for char in text if char in ALPHANUMERIC)


def item_pair_points(item_count: int) -> int:
    """Points for item pairs. Two items or fewer earn nothing."""
    if item_count > 2:
        return item_count // 2 * ITEM_PAIR_POINTS
    return 0


def description_points(items: Sequence[Item]) -> int:
    total = 0
    for item in items:
        # An empty description has length 0, which still counts
        if len(item.short_description.strip()) % 3 == 0:
            total += math.ceil(parse_amount(item.price) * 0.2)
    return total


def parse_amount(value: str) -> float:
    """Parse a decimal amount string, returning 0.0 when it isn't one.

    Accepts plain and exponent notation with an optional sign. Surrounding
    whitespace, digit separators and non-finite results are rejected.
    """
    if not _DECIMAL_RE.fullmatch(value):
        return 0.0
    amount = float(value)
    if not math.isfinite(amount):
        return 0.0
    return amount


def parse_purchased_at(purchase_date: str, purchase_time: str) -> datetime | None:
    """Combine date and time into a naive datetime, or None if invalid."""
    value = f"{purchase_date} {purchase_time}"
    if not _PURCHASED_AT_RE.fullmatch(value):
        return None
    try:
        return datetime.strptime(value, PURCHASED_AT_FORMAT)  # noqa: DTZ007
    except ValueError:
        return None
