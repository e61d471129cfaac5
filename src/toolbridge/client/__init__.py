# src/toolbridge/client/__init__.py

"""Registry client layer for toolbridge.

Thin async wrapper over the tool registry's HTTP API.

Design principles:
- Stateless: Only immutable configuration is held between calls
- Single attempt: No retries, no backoff, errors go straight to the caller
- Typed failures: Every non-2xx response becomes a RegistryError

Example:
    >>> from toolbridge.client import RegistryConfig, create_registry_client
    >>>
    >>> config = RegistryConfig(api_key="prm_...", provider="anthropic")
    >>> async with create_registry_client(config) as client:
    ...     tools = await client.list_tools(mcp_server="hubspot")
    ...     result = await client.call_tool("hubspot_create_contact", {"email": "a@b.c"})
"""

from .config import DEFAULT_BASE_URL, RegistryConfig
from .errors import ConfigurationError, ErrorCode, RegistryError
from .factory import create_registry_client
from .registry import RegistryClient

__all__ = [
    # Factory
    "create_registry_client",
    # Client
    "RegistryClient",
    # Config
    "RegistryConfig",
    "DEFAULT_BASE_URL",
    # Errors
    "ConfigurationError",
    "ErrorCode",
    "RegistryError",
]
