"""Tests for exchange-rate resolution and aggregation."""

import pytest

from earningsavg.aggregation import (
    ExchangeRates,
    average_converted_estimates,
    resolve_exchange_rates,
)
from earningsavg.config import SourceCurrencyPolicy
from earningsavg.errors import InvalidExchangeRate, NoValidEstimates

from conftest import make_record


class TestResolveFirstRecord:
    def test_uses_first_record_currency(self, mock_provider):
        mock_provider.set_rate("GBP", "USD", 1.25)
        records = [make_record("A", currency="GBP"), make_record("B", currency="EUR")]

        rates = resolve_exchange_rates(records, "USD", mock_provider)

        assert rates.batch_rate == 1.25
        assert mock_provider.calls == [("rate", "GBP", "USD")]

    def test_mixed_batch_converted_with_single_rate(self, mock_provider):
        mock_provider.set_rate("GBP", "USD", 2.0)
        records = [make_record("A", "1", "GBP"), make_record("B", "3", "EUR")]

        rates = resolve_exchange_rates(records, "USD", mock_provider)

        # EUR record is converted as if it were GBP
        assert average_converted_estimates(records, rates) == pytest.approx(4.0)

    def test_empty_records(self, mock_provider):
        with pytest.raises(NoValidEstimates):
            resolve_exchange_rates([], "USD", mock_provider)
        assert mock_provider.calls == []

    def test_first_record_without_currency(self, mock_provider):
        with pytest.raises(InvalidExchangeRate):
            resolve_exchange_rates([make_record(currency=None)], "USD", mock_provider)

    def test_provider_error_propagates(self, mock_provider):
        with pytest.raises(InvalidExchangeRate):
            resolve_exchange_rates([make_record(currency="XXX")], "USD", mock_provider)


class TestResolvePerRecord:
    def test_one_call_per_distinct_currency(self, mock_provider):
        mock_provider.set_rate("GBP", "USD", 2.0)
        mock_provider.set_rate("EUR", "USD", 1.0)
        records = [
            make_record("A", "1", "GBP"),
            make_record("B", "3", "EUR"),
            make_record("C", "5", "GBP"),
        ]

        rates = resolve_exchange_rates(
            records, "USD", mock_provider, SourceCurrencyPolicy.PER_RECORD,
        )

        assert mock_provider.calls == [("rate", "GBP", "USD"), ("rate", "EUR", "USD")]
        # (2 + 3 + 10) / 3
        assert average_converted_estimates(records, rates) == pytest.approx(5.0)

    def test_records_without_currency_skipped(self, mock_provider):
        mock_provider.set_rate("EUR", "USD", 1.5)
        records = [make_record("A", "2", None), make_record("B", "4", "EUR")]

        rates = resolve_exchange_rates(
            records, "USD", mock_provider, SourceCurrencyPolicy.PER_RECORD,
        )
        assert average_converted_estimates(records, rates) == pytest.approx(6.0)

    def test_no_currency_anywhere(self, mock_provider):
        with pytest.raises(InvalidExchangeRate):
            resolve_exchange_rates(
                [make_record(currency=None)], "USD", mock_provider,
                SourceCurrencyPolicy.PER_RECORD,
            )


class TestAverage:
    def test_worked_example(self, eur_records):
        rates = ExchangeRates(target_currency="USD", batch_rate=1.1)
        assert average_converted_estimates(eur_records, rates) == pytest.approx(16.5)

    def test_non_numeric_excluded_not_zero(self):
        records = [
            make_record("A", "10"),
            make_record("B", "n/a"),
            make_record("C", None),
            make_record("D", "30"),
        ]
        rates = ExchangeRates(target_currency="USD", batch_rate=1.0)
        assert average_converted_estimates(records, rates) == pytest.approx(20.0)

    def test_matches_sum_over_count(self):
        estimates = ["0.12", "-0.4", "3.75", "1.01"]
        records = [make_record(str(i), e) for i, e in enumerate(estimates)]
        rate = 0.9134
        expected = sum(float(e) * rate for e in estimates) / len(estimates)
        rates = ExchangeRates(target_currency="USD", batch_rate=rate)
        assert average_converted_estimates(records, rates) == expected

    def test_all_invalid_raises(self):
        records = [make_record("A", "abc"), make_record("B", "")]
        with pytest.raises(NoValidEstimates):
            average_converted_estimates(
                records, ExchangeRates(target_currency="USD", batch_rate=1.0),
            )
