"""Earnings average models."""

from earningsavg.models.earnings import EarningsRecord, parse_decimal
from earningsavg.models.request import AverageEarningsRequest
from earningsavg.models.response import HandlerResponse

__all__ = [
    "EarningsRecord",
    "parse_decimal",
    "AverageEarningsRequest",
    "HandlerResponse",
]
