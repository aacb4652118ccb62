"""Handler response model."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class HandlerResponse:
    """HTTP-style response produced by the service.

    Attributes:
        status_code: 200, 400 or 500.
        body: JSON-serializable payload.
    """

    status_code: int
    body: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def ok(cls, average: float) -> HandlerResponse:
        return cls(status_code=200, body={"averageEarnings": average})

    @classmethod
    def bad_request(cls, message: str) -> HandlerResponse:
        return cls(status_code=400, body={"error": message})

    @classmethod
    def internal_error(cls) -> HandlerResponse:
        return cls(status_code=500, body={"error": "Internal Server Error"})

    def to_lambda(self) -> dict[str, Any]:
        """Render as an API Gateway proxy result."""
        return {
            "statusCode": self.status_code,
            "headers": {"Content-Type": "application/json"},
            "body": json.dumps(self.body),
        }
