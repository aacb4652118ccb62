"""API Gateway / Lambda entry point.

The service is built from environment variables on first use and reused by
later invocations in the same process.
"""

from __future__ import annotations

import logging
from typing import Any

from earningsavg import create_service_from_env
from earningsavg.errors import EarningsAverageError
from earningsavg.models.response import HandlerResponse
from earningsavg.service import AverageEarningsService

logger = logging.getLogger(__name__)

_service: AverageEarningsService | None = None


def get_service() -> AverageEarningsService:
    global _service
    if _service is None:
        _service = create_service_from_env()
    return _service


def reset_service() -> None:
    """Drop the cached service so the next call re-reads the environment."""
    global _service
    _service = None


def query_params(event: dict[str, Any] | None) -> dict[str, Any]:
    """Collect query parameters from a proxy event.

    ``multiValueQueryStringParameters["cur"]`` wins over the single-value
    map, so ``?cur=EUR&cur=GBP`` arrives as a list.
    """
    event = event or {}
    params = dict(event.get("queryStringParameters") or {})
    multi = event.get("multiValueQueryStringParameters") or {}
    if multi.get("cur") is not None:
        params["cur"] = list(multi["cur"])
    return params


def handler(event: dict[str, Any] | None, context: Any = None) -> dict[str, Any]:
    params = query_params(event)
    try:
        service = get_service()
    except (EarningsAverageError, ValueError):
        logger.exception("Could not build the earnings service")
        return HandlerResponse.internal_error().to_lambda()
    return service.handle(params).to_lambda()
