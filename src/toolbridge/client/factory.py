# src/toolbridge/client/factory.py

from toolbridge.observability.base import MetricsHook, NoOpMetricsHook

from .config import RegistryConfig
from .registry import RegistryClient


def create_registry_client(
    config: RegistryConfig,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> RegistryClient:
    """Create a registry client from config.

    Args:
        config: Registry configuration (API key, provider, endpoint).
        metrics_hook: Optional metrics hook for observability.

    Returns:
        Configured RegistryClient.

    Raises:
        ConfigurationError: If the API key is missing or the provider is
            unknown. No request is made in that case.

    Example:
        >>> config = RegistryConfig(api_key="prm_...", provider="openai")
        >>> async with create_registry_client(config) as client:
        ...     tools = await client.list_tools()
    """
    return RegistryClient(
        api_key=config.api_key,
        provider=config.provider,
        base_url=config.base_url,
        timeout=config.timeout,
        metrics_hook=metrics_hook,
    )
