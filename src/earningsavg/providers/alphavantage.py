"""Alpha Vantage data provider.

Uses two endpoints of the ``/query`` API:

* ``EARNINGS_CALENDAR`` returns CSV (header row + one row per company).
* ``CURRENCY_EXCHANGE_RATE`` returns JSON with the rate nested under
  ``"Realtime Currency Exchange Rate" -> "5. Exchange Rate"``.
"""

from __future__ import annotations

import io
import logging
from typing import Any

import certifi
import pandas as pd
import requests

from earningsavg.config import DEFAULT_BASE_URL
from earningsavg.errors import (
    ConfigurationError,
    InvalidExchangeRate,
    UpstreamFetchError,
)
from earningsavg.models.earnings import EarningsRecord, parse_decimal
from earningsavg.providers.base import BaseEarningsProvider

logger = logging.getLogger(__name__)

# CSV header -> EarningsRecord field
EARNINGS_COLUMNS: dict[str, str] = {
    "symbol": "symbol",
    "name": "name",
    "reportDate": "report_date",
    "fiscalDateEnding": "fiscal_date_ending",
    "estimate": "estimate",
    "currency": "currency",
}

RATE_BLOCK_KEY = "Realtime Currency Exchange Rate"
RATE_FIELD_KEY = "5. Exchange Rate"


def _cell(value: Any) -> str | None:
    # pandas fills short rows with NaN even with keep_default_na=False
    if not isinstance(value, str):
        return None
    value = value.strip()
    return value or None


def parse_earnings_csv(text: str) -> list[EarningsRecord]:
    """Parse an earnings calendar CSV payload into records.

    The first row is the header. Unknown columns are ignored and missing
    ones leave the matching field as None. A header with none of the known
    columns (e.g. a JSON error body) is rejected.

    Raises:
        UpstreamFetchError: If the payload is empty or not a recognizable CSV.
    """
    if not text or not text.strip():
        raise UpstreamFetchError("Empty earnings calendar payload")

    try:
        frame = pd.read_csv(
            io.StringIO(text),
            dtype=str,
            keep_default_na=False,
            index_col=False,
            skipinitialspace=True,
            on_bad_lines="skip",
        )
    except (pd.errors.ParserError, pd.errors.EmptyDataError, ValueError) as exc:
        raise UpstreamFetchError(f"Malformed earnings calendar CSV: {exc}") from exc

    columns = {str(c).strip(): c for c in frame.columns}
    known = [name for name in EARNINGS_COLUMNS if name in columns]
    if not known:
        preview = text.strip().splitlines()[0][:120]
        raise UpstreamFetchError(
            f"Earnings calendar payload has no recognized columns: {preview!r}"
        )

    records: list[EarningsRecord] = []
    for row in frame.to_dict(orient="records"):
        values = {
            EARNINGS_COLUMNS[name]: _cell(row.get(columns[name]))
            for name in known
        }
        records.append(EarningsRecord(**values))
    return records


def parse_exchange_rate(payload: Any) -> float:
    """Extract the spot rate from a ``CURRENCY_EXCHANGE_RATE`` response.

    Raises:
        InvalidExchangeRate: If the rate block is missing or the rate is not
            a finite number.
    """
    if not isinstance(payload, dict):
        raise InvalidExchangeRate(
            f"Unexpected exchange rate payload type: {type(payload).__name__}"
        )

    block = payload.get(RATE_BLOCK_KEY)
    if not isinstance(block, dict):
        # Alpha Vantage reports throttling/bad keys as top-level messages
        detail = payload.get("Error Message") or payload.get("Note") or payload.get("Information")
        raise InvalidExchangeRate(
            f"Exchange rate payload missing '{RATE_BLOCK_KEY}'"
            + (f": {detail}" if detail else "")
        )

    raw = block.get(RATE_FIELD_KEY)
    rate = parse_decimal(raw)
    if rate is None:
        raise InvalidExchangeRate(f"Invalid exchange rate: {raw!r}")
    return rate


class AlphaVantageProvider(BaseEarningsProvider):
    """Fetch the earnings calendar and spot FX rates from Alpha Vantage."""

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float | None = None,
        session: requests.Session | None = None,
    ) -> None:
        if not api_key:
            raise ConfigurationError(
                "Alpha Vantage API key required. Set ALPHA_VANTAGE_API_KEY or pass api_key."
            )
        self.api_key = api_key
        self.query_url = f"{base_url.rstrip('/')}/query"
        self.timeout = timeout

        if session is None:
            session = requests.Session()
            session.verify = certifi.where()
        self.session = session

    # ------------------------------------------------------------- earnings

    def get_earnings_calendar(self, horizon: str = "3month") -> list[EarningsRecord]:
        response = self._get({"function": "EARNINGS_CALENDAR", "horizon": horizon})
        records = parse_earnings_csv(response.text)
        logger.info("Fetched %d earnings records (horizon=%s)", len(records), horizon)
        return records

    # ------------------------------------------------------------------ fx

    def get_exchange_rate(self, from_currency: str, to_currency: str) -> float:
        response = self._get({
            "function": "CURRENCY_EXCHANGE_RATE",
            "from_currency": from_currency,
            "to_currency": to_currency,
        })
        try:
            payload = response.json()
        except ValueError as exc:
            raise UpstreamFetchError(
                f"Exchange rate response for {from_currency}->{to_currency} is not JSON"
            ) from exc

        rate = parse_exchange_rate(payload)
        logger.info("Resolved exchange rate %s->%s = %s", from_currency, to_currency, rate)
        return rate

    # ------------------------------------------------------------ internal

    def _get(self, params: dict[str, str]) -> requests.Response:
        function = params["function"]
        try:
            response = self.session.get(
                self.query_url,
                params={**params, "apikey": self.api_key},
                timeout=self.timeout,
            )
            response.raise_for_status()
            return response
        except requests.RequestException as exc:
            # Request URLs carry the key as a query parameter
            detail = str(exc).replace(self.api_key, "***")
            raise UpstreamFetchError(
                f"Alpha Vantage {function} request failed: {detail}"
            ) from exc
