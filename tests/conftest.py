"""Shared fixtures for earningsavg tests."""

from __future__ import annotations

import sys
from datetime import date
from pathlib import Path

import pytest

# Ensure src/ is on the path for editable-style imports
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from earningsavg.config import EarningsAverageConfig, ProviderType
from earningsavg.models.earnings import EarningsRecord
from earningsavg.providers.mock import MockProvider
from earningsavg.service import AverageEarningsService

# January -> 0-based current month 0
TODAY = date(2024, 1, 15)

ENV_KEYS = [
    "EARNINGS_PROVIDER",
    "ALPHA_VANTAGE_API_KEY",
    "ALPHA_VANTAGE_URL",
    "EARNINGS_REQUEST_TIMEOUT",
    "EARNINGS_DEFAULT_TARGET_CURRENCY",
    "EARNINGS_NEAREST_MONTH_ONLY",
    "EARNINGS_SOURCE_CURRENCY_POLICY",
]


def make_record(
    symbol: str = "SAP",
    estimate: str | None = "1.00",
    currency: str | None = "EUR",
    report_date: str | None = "2024-01-25",
) -> EarningsRecord:
    return EarningsRecord(
        symbol=symbol,
        name=f"{symbol} Corp",
        report_date=report_date,
        fiscal_date_ending="2023-12-31",
        estimate=estimate,
        currency=currency,
    )


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch) -> None:
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def mock_provider() -> MockProvider:
    return MockProvider()


@pytest.fixture
def eur_records() -> list[EarningsRecord]:
    return [
        make_record("SAP", "10", "EUR"),
        make_record("SIE", "20", "EUR"),
    ]


@pytest.fixture
def make_service(mock_provider):
    def _make(**overrides) -> AverageEarningsService:
        config = EarningsAverageConfig(provider=ProviderType.MOCK, **overrides)
        return AverageEarningsService(config, provider=mock_provider, clock=lambda: TODAY)
    return _make
