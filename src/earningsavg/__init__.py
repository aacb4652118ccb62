"""earningsavg: average upcoming earnings estimates in a target currency.

Fetches the earnings calendar from Alpha Vantage, narrows it to the nearest
report month and the requested currencies, converts estimates with a live
spot rate, and returns their mean.

Quick start::

    from earningsavg import create_service_from_env
    service = create_service_from_env()
    response = service.handle({"cur": ["EUR"], "targetCur": "USD"})
    response.body  # {"averageEarnings": ...}
"""

from __future__ import annotations

import os

from earningsavg.aggregation import (
    ExchangeRates,
    average_converted_estimates,
    resolve_exchange_rates,
)
from earningsavg.config import (
    DEFAULT_BASE_URL,
    EarningsAverageConfig,
    ProviderType,
    SourceCurrencyPolicy,
)
from earningsavg.errors import (
    ConfigurationError,
    EarningsAverageError,
    EarningsAverageErrorCode,
    InvalidExchangeRate,
    InvalidParameter,
    NoValidEstimates,
    UpstreamFetchError,
)
from earningsavg.filters import filter_by_currencies, filter_nearest_month, month_distance
from earningsavg.models.earnings import EarningsRecord
from earningsavg.models.request import AverageEarningsRequest
from earningsavg.models.response import HandlerResponse
from earningsavg.service import AverageEarningsService
from earningsavg.validation import validate_request

__version__ = "0.1.0"

__all__ = [
    # Service
    "AverageEarningsService",
    "create_service_from_env",
    # Config
    "EarningsAverageConfig",
    "ProviderType",
    "SourceCurrencyPolicy",
    "DEFAULT_BASE_URL",
    # Errors
    "EarningsAverageError",
    "EarningsAverageErrorCode",
    "InvalidParameter",
    "ConfigurationError",
    "UpstreamFetchError",
    "InvalidExchangeRate",
    "NoValidEstimates",
    # Models
    "EarningsRecord",
    "AverageEarningsRequest",
    "HandlerResponse",
    # Pipeline stages
    "validate_request",
    "filter_nearest_month",
    "filter_by_currencies",
    "month_distance",
    "resolve_exchange_rates",
    "average_converted_estimates",
    "ExchangeRates",
]

_FALSY = {"0", "false", "no", "off"}


def create_service_from_env() -> AverageEarningsService:
    """Zero-config factory. Reads provider settings from env vars.

    Environment variables:
        EARNINGS_PROVIDER: "alphavantage" or "mock" (default: "alphavantage").
        ALPHA_VANTAGE_API_KEY: Alpha Vantage API key.
        ALPHA_VANTAGE_URL: Base URL (default: "https://www.alphavantage.co").
        EARNINGS_REQUEST_TIMEOUT: Seconds per upstream call (default: none).
        EARNINGS_DEFAULT_TARGET_CURRENCY: Fallback for a missing targetCur
            (default: "USD"; empty makes targetCur mandatory).
        EARNINGS_NEAREST_MONTH_ONLY: Month-proximity filter on/off (default: on).
        EARNINGS_SOURCE_CURRENCY_POLICY: "first_record" or "per_record"
            (default: "first_record").
    """
    timeout = os.getenv("EARNINGS_REQUEST_TIMEOUT", "").strip()
    nearest = os.getenv("EARNINGS_NEAREST_MONTH_ONLY", "true").strip().lower()

    config = EarningsAverageConfig(
        provider=ProviderType(os.getenv("EARNINGS_PROVIDER", "alphavantage").strip().lower()),
        api_key=os.getenv("ALPHA_VANTAGE_API_KEY"),
        base_url=os.getenv("ALPHA_VANTAGE_URL") or DEFAULT_BASE_URL,
        request_timeout=float(timeout) if timeout else None,
        default_target_currency=os.getenv("EARNINGS_DEFAULT_TARGET_CURRENCY", "USD").strip() or None,
        nearest_month_only=nearest not in _FALSY,
        source_currency_policy=SourceCurrencyPolicy(
            os.getenv("EARNINGS_SOURCE_CURRENCY_POLICY", "first_record").strip().lower()
        ),
    )

    return AverageEarningsService(config)
