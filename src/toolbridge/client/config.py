# src/toolbridge/client/config.py

from dataclasses import dataclass

from toolbridge.formatting.base import Provider

DEFAULT_BASE_URL = "https://api.primrose.dev"


@dataclass(frozen=True)
class RegistryConfig:
    """Configuration for the registry client.

    Immutable. Explicit. No magic defaults from environment.
    """

    api_key: str | None
    provider: Provider | str = Provider.GENERIC
    base_url: str = DEFAULT_BASE_URL
    timeout: float = 30.0  # Transport setting only, there are no retries
