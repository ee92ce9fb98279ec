"""Calendar helpers: seasonal periods and the rolling month window.

Wet season runs October through March, dry season April through September.
"""
from __future__ import annotations
from outorga.domain.enums import Period

PERIOD_MONTHS: dict[Period, frozenset[int]] = {
    Period.WET: frozenset({10, 11, 12, 1, 2, 3}),
    Period.DRY: frozenset(range(4, 10)),
}

HISTORY_MONTHS = 12

MONTH_ABBR = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
              "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def month_in_period(month: int, period: Period) -> bool:
    return month in PERIOD_MONTHS[Period(period)]


def month_window(anchor_month: int, anchor_year: int, size: int = HISTORY_MONTHS) -> list[tuple[int, int]]:
    """Return ``size`` consecutive (month, year) pairs starting at the anchor."""
    if not 1 <= anchor_month <= 12:
        raise ValueError(f"month must be in 1..12, got {anchor_month}")
    pairs = []
    for i in range(size):
        offset = anchor_month - 1 + i
        pairs.append((offset % 12 + 1, anchor_year + offset // 12))
    return pairs


def month_label(month: int, year: int) -> str:
    return f"{MONTH_ABBR[month - 1]}-{year}"
