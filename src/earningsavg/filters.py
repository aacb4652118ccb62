"""Record filters: report-month proximity and currency allow-list."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from datetime import date

from earningsavg.models.earnings import EarningsRecord


def month_distance(record_month: int, current_month: int) -> int:
    """Distance between two 0-based months of the year.

    Years are ignored and the scale does not wrap: December and January are
    11 apart, and a report two years away in the current month counts as 0.
    """
    return abs(record_month - current_month)


def filter_nearest_month(
    records: Sequence[EarningsRecord],
    today: date,
) -> list[EarningsRecord]:
    """Keep the records whose report month is closest to ``today``'s month.

    Every record at the minimal distance is kept. Records without a
    parseable ``report_date`` cannot be ranked and are dropped.
    """
    current = today.month - 1
    ranked = [(record, record.report_month()) for record in records]
    distances = [month_distance(m, current) for _, m in ranked if m is not None]
    if not distances:
        return []

    nearest = min(distances)
    return [
        record
        for record, month in ranked
        if month is not None and month_distance(month, current) == nearest
    ]


def filter_by_currencies(
    records: Sequence[EarningsRecord],
    currencies: Iterable[str] | None,
) -> list[EarningsRecord]:
    """Keep records whose currency is in ``currencies`` (exact match).

    A missing or empty allow-list keeps everything.
    """
    if not currencies:
        return list(records)
    allowed = set(currencies)
    return [r for r in records if r.currency in allowed]
