"""Abstract base class for earnings data providers."""

from __future__ import annotations

from abc import ABC, abstractmethod

from earningsavg.models.earnings import EarningsRecord


class BaseEarningsProvider(ABC):
    """Abstract base for earnings calendar + FX providers.

    A provider performs exactly one outbound call per method invocation and
    returns parsed, typed values. Failures surface as ``EarningsAverageError``
    subclasses; nothing is retried or cached here.
    """

    @abstractmethod
    def get_earnings_calendar(self, horizon: str = "3month") -> list[EarningsRecord]:
        """Fetch upcoming earnings estimates.

        Args:
            horizon: Look-ahead window understood by the provider.

        Returns:
            Records in provider order.
        """
        ...

    @abstractmethod
    def get_exchange_rate(self, from_currency: str, to_currency: str) -> float:
        """Fetch the live spot rate converting ``from_currency`` into ``to_currency``."""
        ...
