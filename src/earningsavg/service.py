"""AverageEarningsService: fetch -> filter -> convert -> aggregate."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from datetime import date
from typing import Any

from earningsavg.aggregation import average_converted_estimates, resolve_exchange_rates
from earningsavg.config import EarningsAverageConfig, ProviderType
from earningsavg.errors import EarningsAverageError, InvalidParameter
from earningsavg.filters import filter_by_currencies, filter_nearest_month
from earningsavg.models.request import AverageEarningsRequest
from earningsavg.models.response import HandlerResponse
from earningsavg.providers import create_provider
from earningsavg.providers.base import BaseEarningsProvider
from earningsavg.validation import validate_request

logger = logging.getLogger(__name__)


class AverageEarningsService:
    """Computes the average upcoming earnings estimate in a target currency.

    Usage::

        from earningsavg import create_service_from_env
        service = create_service_from_env()
        response = service.handle({"cur": ["EUR"], "targetCur": "USD"})
    """

    def __init__(
        self,
        config: EarningsAverageConfig,
        provider: BaseEarningsProvider | None = None,
        clock: Callable[[], date] | None = None,
    ) -> None:
        self.config = config

        if provider is None:
            kwargs: dict[str, Any] = {}
            if config.provider is ProviderType.ALPHA_VANTAGE:
                kwargs["api_key"] = config.api_key
                kwargs["base_url"] = config.base_url
                kwargs["timeout"] = config.request_timeout
            provider = create_provider(config.provider, **kwargs)
        self.provider = provider
        self._clock = clock or date.today

    # -------------------------------------------------------------- pipeline

    def average_earnings(self, request: AverageEarningsRequest) -> float:
        """Run the pipeline for an already-validated request.

        Raises:
            EarningsAverageError: Any fetch, rate or aggregation failure.
        """
        records = self.provider.get_earnings_calendar(self.config.horizon)

        if self.config.nearest_month_only:
            records = filter_nearest_month(records, self._clock())
            logger.info("%d records in the nearest report month", len(records))

        records = filter_by_currencies(records, request.currencies)
        logger.info(
            "%d records after currency filter %s",
            len(records),
            list(request.currencies) if request.currencies else "(none)",
        )

        rates = resolve_exchange_rates(
            records,
            request.target_currency,
            self.provider,
            self.config.source_currency_policy,
        )
        return average_converted_estimates(records, rates)

    # --------------------------------------------------------------- request

    def handle(self, params: Mapping[str, Any] | None) -> HandlerResponse:
        """Validate raw query parameters and run the pipeline.

        Only parameter errors produce a specific message (400); every other
        failure is logged and reported as an opaque 500.
        """
        try:
            request = validate_request(params, self.config.default_target_currency)
        except InvalidParameter as exc:
            logger.warning("Rejected request: %s", exc.message)
            return HandlerResponse.bad_request(exc.message)

        try:
            average = self.average_earnings(request)
        except EarningsAverageError as exc:
            logger.error(
                "Average earnings failed [%s]: %s", exc.code.value, exc.message,
                exc_info=True,
            )
            return HandlerResponse.internal_error()
        except Exception:  # noqa: BLE001
            logger.exception("Unexpected error computing average earnings")
            return HandlerResponse.internal_error()

        return HandlerResponse.ok(average)
