"""Query parameter validation."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from earningsavg.errors import InvalidParameter
from earningsavg.models.request import AverageEarningsRequest


def validate_request(
    params: Mapping[str, Any] | None,
    default_target_currency: str | None = "USD",
) -> AverageEarningsRequest:
    """Check the shape of ``cur`` and ``targetCur`` and normalize them.

    ``cur`` must be a list/tuple of strings when present; an empty list
    means no currency filtering. ``targetCur`` must be a string; when absent
    ``default_target_currency`` is used, and a None default makes it
    mandatory. ``cur`` is checked first.

    Raises:
        InvalidParameter: On the first malformed parameter.
    """
    params = params or {}

    currencies = params.get("cur")
    if currencies is not None:
        if not isinstance(currencies, (list, tuple)):
            raise InvalidParameter("cur")
        if not all(isinstance(c, str) for c in currencies):
            raise InvalidParameter("cur")

    target = params.get("targetCur")
    if target is None:
        target = default_target_currency
    if not isinstance(target, str):
        raise InvalidParameter("targetCur")

    return AverageEarningsRequest(
        target_currency=target,
        currencies=tuple(currencies) if currencies else None,
    )
