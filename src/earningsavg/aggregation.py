"""Exchange-rate resolution and estimate aggregation."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from earningsavg.config import SourceCurrencyPolicy
from earningsavg.errors import InvalidExchangeRate, NoValidEstimates
from earningsavg.models.earnings import EarningsRecord
from earningsavg.providers.base import BaseEarningsProvider

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExchangeRates:
    """Rates resolved for one request.

    Attributes:
        target_currency: Currency every estimate is converted into.
        batch_rate: Single rate applied to every record, if set.
        by_currency: Per-source-currency rates, used when ``batch_rate``
            is None.
    """

    target_currency: str
    batch_rate: float | None = None
    by_currency: dict[str, float] = field(default_factory=dict)

    def rate_for(self, record: EarningsRecord) -> float | None:
        if self.batch_rate is not None:
            return self.batch_rate
        if record.currency is None:
            return None
        return self.by_currency.get(record.currency)


def resolve_exchange_rates(
    records: Sequence[EarningsRecord],
    target_currency: str,
    provider: BaseEarningsProvider,
    policy: SourceCurrencyPolicy = SourceCurrencyPolicy.FIRST_RECORD,
) -> ExchangeRates:
    """Fetch the rate(s) needed to convert ``records`` into ``target_currency``.

    Under ``FIRST_RECORD`` the first record's currency is taken as the
    source for the whole batch, so mixed-currency batches are converted as
    if every record shared that currency. ``PER_RECORD`` makes one call per
    distinct currency, in first-seen order.

    Raises:
        NoValidEstimates: If ``records`` is empty.
        InvalidExchangeRate: If the source currency is missing or the
            provider returns an unusable rate.
    """
    if not records:
        raise NoValidEstimates("No earnings records left after filtering")

    if policy is SourceCurrencyPolicy.FIRST_RECORD:
        source = records[0].currency
        if not source:
            raise InvalidExchangeRate(
                f"First record ({records[0].symbol}) has no currency to convert from"
            )
        rate = provider.get_exchange_rate(source, target_currency)
        return ExchangeRates(target_currency=target_currency, batch_rate=rate)

    by_currency: dict[str, float] = {}
    for record in records:
        if record.currency and record.currency not in by_currency:
            by_currency[record.currency] = provider.get_exchange_rate(
                record.currency, target_currency
            )
    if not by_currency:
        raise InvalidExchangeRate("No record carries a currency to convert from")
    return ExchangeRates(target_currency=target_currency, by_currency=by_currency)


def average_converted_estimates(
    records: Sequence[EarningsRecord],
    rates: ExchangeRates,
) -> float:
    """Mean of ``estimate * rate`` over records with a numeric estimate.

    Records whose estimate does not parse (or that have no rate under the
    per-record policy) are left out, not counted as zero.

    Raises:
        NoValidEstimates: If no record can be converted.
    """
    converted: list[float] = []
    for record in records:
        estimate = record.estimate_value()
        rate = rates.rate_for(record)
        if estimate is None or rate is None:
            continue
        converted.append(estimate * rate)

    if not converted:
        logger.info("No valid estimate values among %d records", len(records))
        raise NoValidEstimates()

    skipped = len(records) - len(converted)
    if skipped:
        logger.debug("Skipped %d records without a usable estimate", skipped)
    return sum(converted) / len(converted)
