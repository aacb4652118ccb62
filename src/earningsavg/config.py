"""Earnings average configuration."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ProviderType(Enum):
    """Supported data provider backends."""

    ALPHA_VANTAGE = "alphavantage"
    MOCK = "mock"


class SourceCurrencyPolicy(Enum):
    """How the source leg of the exchange-rate lookup is chosen.

    ``FIRST_RECORD`` converts the whole batch with the rate of the first
    surviving record's currency (one rate call per request).
    ``PER_RECORD`` resolves one rate per distinct record currency.
    """

    FIRST_RECORD = "first_record"
    PER_RECORD = "per_record"


DEFAULT_BASE_URL = "https://www.alphavantage.co"


@dataclass
class EarningsAverageConfig:
    """Configuration for AverageEarningsService.

    Attributes:
        provider: Data provider backend.
        api_key: Alpha Vantage API key.
        base_url: Alpha Vantage base URL (``/query`` is appended).
        horizon: Earnings calendar horizon requested upstream.
        request_timeout: Per-request timeout in seconds, None for the
            transport default.
        default_target_currency: Used when ``targetCur`` is absent. None
            makes ``targetCur`` mandatory.
        nearest_month_only: Keep only records reporting in the month
            closest to the current one.
        source_currency_policy: Exchange-rate source selection.
    """

    provider: ProviderType = ProviderType.ALPHA_VANTAGE
    api_key: str | None = None
    base_url: str = DEFAULT_BASE_URL
    horizon: str = "3month"
    request_timeout: float | None = None
    default_target_currency: str | None = "USD"
    nearest_month_only: bool = True
    source_currency_policy: SourceCurrencyPolicy = SourceCurrencyPolicy.FIRST_RECORD
