"""Earnings average error types."""

from __future__ import annotations

from enum import Enum


class EarningsAverageErrorCode(Enum):
    """Error classification codes."""

    INVALID_PARAMETER = "invalid_parameter"
    AUTH_FAILED = "auth_failed"
    UPSTREAM_FETCH = "upstream_fetch"
    INVALID_EXCHANGE_RATE = "invalid_exchange_rate"
    NO_VALID_ESTIMATES = "no_valid_estimates"


class EarningsAverageError(Exception):
    """Base exception with a structured error code.

    Attributes:
        message: Human-readable error description.
        code: Structured error code for programmatic handling.
    """

    def __init__(
        self,
        message: str,
        code: EarningsAverageErrorCode = EarningsAverageErrorCode.UPSTREAM_FETCH,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code


class InvalidParameter(EarningsAverageError):
    """A query parameter has the wrong shape. Safe to show to the caller."""

    MESSAGES = {
        "cur": "cur parameter must be an array",
        "targetCur": "targetCur parameter must be a string",
    }

    def __init__(self, parameter: str) -> None:
        super().__init__(
            self.MESSAGES.get(parameter, f"{parameter} parameter is invalid"),
            code=EarningsAverageErrorCode.INVALID_PARAMETER,
        )
        self.parameter = parameter


class ConfigurationError(EarningsAverageError):
    def __init__(self, message: str) -> None:
        super().__init__(message, code=EarningsAverageErrorCode.AUTH_FAILED)


class UpstreamFetchError(EarningsAverageError):
    """Network or decoding failure talking to the data provider."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code=EarningsAverageErrorCode.UPSTREAM_FETCH)


class InvalidExchangeRate(EarningsAverageError):
    def __init__(self, message: str) -> None:
        super().__init__(message, code=EarningsAverageErrorCode.INVALID_EXCHANGE_RATE)


class NoValidEstimates(EarningsAverageError):
    def __init__(self, message: str = "No valid estimate values found") -> None:
        super().__init__(message, code=EarningsAverageErrorCode.NO_VALID_ESTIMATES)
