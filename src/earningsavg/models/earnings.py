"""Earnings calendar record model."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class EarningsRecord:
    """One row of the upstream earnings calendar.

    All fields are kept as the provider's text; any of them may be None
    when the column is missing or the cell is empty.

    Attributes:
        symbol: Ticker symbol.
        name: Company name.
        report_date: Expected report date, ``YYYY-MM-DD``.
        fiscal_date_ending: Fiscal period end, ``YYYY-MM-DD``.
        estimate: Consensus EPS estimate as text.
        currency: Currency the estimate is denominated in.
    """

    symbol: str | None = None
    name: str | None = None
    report_date: str | None = None
    fiscal_date_ending: str | None = None
    estimate: str | None = None
    currency: str | None = None

    def report_month(self) -> int | None:
        """Return the 0-based month (0-11) of ``report_date``, or None."""
        if not self.report_date:
            return None
        try:
            return date.fromisoformat(self.report_date.strip()).month - 1
        except ValueError:
            return None

    def estimate_value(self) -> float | None:
        """Return ``estimate`` as a finite float, or None if it doesn't parse."""
        return parse_decimal(self.estimate)


def parse_decimal(value: object) -> float | None:
    """Parse a provider number (usually text) into a finite float.

    Returns None for missing, empty, non-numeric, NaN or infinite values.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        number = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number
