"""Normalized request model."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AverageEarningsRequest:
    """Validated query parameters.

    Attributes:
        target_currency: Currency the average is reported in.
        currencies: Allow-list of record currencies, None for no filtering.
    """

    target_currency: str
    currencies: tuple[str, ...] | None = None
