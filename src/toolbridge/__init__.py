# Client
from .client import (
    ConfigurationError,
    ErrorCode,
    RegistryClient,
    RegistryConfig,
    RegistryError,
    create_registry_client,
)

# Formatting
from .formatting import (
    FormattedTool,
    Provider,
    format_for_provider,
    tools_to_provider_schema,
)

# Observability
from .observability import LoggingMetricsHook, MetricsHook, NoOpMetricsHook

# Tools
from .tools import ToolCall, ToolDefinition, ToolParameter, ToolParameters

__all__ = [
    # Client
    "ConfigurationError",
    "ErrorCode",
    "RegistryClient",
    "RegistryConfig",
    "RegistryError",
    "create_registry_client",
    # Formatting
    "FormattedTool",
    "Provider",
    "format_for_provider",
    "tools_to_provider_schema",
    # Observability
    "LoggingMetricsHook",
    "MetricsHook",
    "NoOpMetricsHook",
    # Tools
    "ToolCall",
    "ToolDefinition",
    "ToolParameter",
    "ToolParameters",
]
