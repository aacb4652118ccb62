"""Earnings data provider registry."""

from __future__ import annotations

from earningsavg.config import ProviderType
from earningsavg.providers.base import BaseEarningsProvider

# Lazy registry: classes imported on demand so the mock path never pulls
# in the HTTP stack.
PROVIDER_CLASSES: dict[ProviderType, str] = {
    ProviderType.ALPHA_VANTAGE: "earningsavg.providers.alphavantage.AlphaVantageProvider",
    ProviderType.MOCK: "earningsavg.providers.mock.MockProvider",
}


def create_provider(
    provider_type: ProviderType,
    **kwargs,
) -> BaseEarningsProvider:
    """Instantiate a provider by type, forwarding kwargs to its constructor."""
    import importlib

    dotted = PROVIDER_CLASSES[provider_type]
    module_path, cls_name = dotted.rsplit(".", 1)
    module = importlib.import_module(module_path)
    cls = getattr(module, cls_name)
    return cls(**kwargs)


__all__ = ["BaseEarningsProvider", "PROVIDER_CLASSES", "create_provider"]
