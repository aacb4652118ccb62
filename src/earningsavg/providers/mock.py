"""Mock provider for testing and CI, no API key required."""

from __future__ import annotations

from earningsavg.errors import InvalidExchangeRate, UpstreamFetchError
from earningsavg.models.earnings import EarningsRecord
from earningsavg.providers.base import BaseEarningsProvider


class MockProvider(BaseEarningsProvider):
    """In-memory provider that returns pre-loaded records and rates.

    Every call is appended to ``calls`` so tests can assert ordering and
    call counts.
    """

    def __init__(self) -> None:
        self._records: list[EarningsRecord] = []
        self._rates: dict[tuple[str, str], float] = {}
        self._earnings_error: Exception | None = None
        self.calls: list[tuple[str, ...]] = []

    # --- Pre-load helpers ---

    def set_records(self, records: list[EarningsRecord]) -> None:
        self._records = list(records)

    def set_rate(self, from_currency: str, to_currency: str, rate: float) -> None:
        self._rates[(from_currency, to_currency)] = rate

    def fail_earnings(self, error: Exception | None = None) -> None:
        """Make the next earnings fetches raise ``error``."""
        self._earnings_error = error or UpstreamFetchError("simulated upstream failure")

    # --- Provider implementation ---

    def get_earnings_calendar(self, horizon: str = "3month") -> list[EarningsRecord]:
        self.calls.append(("earnings", horizon))
        if self._earnings_error is not None:
            raise self._earnings_error
        return list(self._records)

    def get_exchange_rate(self, from_currency: str, to_currency: str) -> float:
        self.calls.append(("rate", from_currency, to_currency))
        key = (from_currency, to_currency)
        if key in self._rates:
            return self._rates[key]
        if from_currency == to_currency:
            return 1.0
        raise InvalidExchangeRate(f"No mock rate for {from_currency}->{to_currency}")
