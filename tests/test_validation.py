"""Tests for query parameter validation."""

import pytest

from earningsavg.errors import EarningsAverageErrorCode, InvalidParameter
from earningsavg.validation import validate_request


class TestCurrencies:
    def test_list_accepted(self):
        request = validate_request({"cur": ["EUR", "GBP"], "targetCur": "USD"})
        assert request.currencies == ("EUR", "GBP")
        assert request.target_currency == "USD"

    def test_absent_means_no_filter(self):
        assert validate_request({"targetCur": "USD"}).currencies is None

    def test_empty_list_means_no_filter(self):
        assert validate_request({"cur": [], "targetCur": "USD"}).currencies is None

    def test_bare_string_rejected(self):
        with pytest.raises(InvalidParameter) as exc_info:
            validate_request({"cur": "EUR", "targetCur": "USD"})
        assert exc_info.value.parameter == "cur"
        assert exc_info.value.message == "cur parameter must be an array"
        assert exc_info.value.code == EarningsAverageErrorCode.INVALID_PARAMETER

    def test_non_string_members_rejected(self):
        with pytest.raises(InvalidParameter, match="cur parameter must be an array"):
            validate_request({"cur": ["EUR", 3]})

    def test_cur_checked_before_target(self):
        with pytest.raises(InvalidParameter) as exc_info:
            validate_request({"cur": "EUR", "targetCur": 5})
        assert exc_info.value.parameter == "cur"


class TestTargetCurrency:
    def test_defaults_to_usd(self):
        assert validate_request({"cur": ["EUR"]}).target_currency == "USD"

    def test_none_params(self):
        request = validate_request(None)
        assert request.target_currency == "USD"
        assert request.currencies is None

    def test_custom_default(self):
        assert validate_request({}, default_target_currency="EUR").target_currency == "EUR"

    def test_strict_mode_requires_target(self):
        with pytest.raises(InvalidParameter, match="targetCur parameter must be a string"):
            validate_request({"cur": ["EUR"]}, default_target_currency=None)

    @pytest.mark.parametrize("value", [5, ["USD"], {"c": "USD"}])
    def test_non_string_rejected(self, value):
        with pytest.raises(InvalidParameter) as exc_info:
            validate_request({"targetCur": value})
        assert exc_info.value.parameter == "targetCur"
