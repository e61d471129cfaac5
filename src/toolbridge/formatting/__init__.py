# src/toolbridge/formatting/__init__.py

"""Schema conversion layer for toolbridge.

Projects canonical tool definitions into each provider's tool-schema format.

Design principles:
- Pure: No I/O, no hidden state, same input gives same output
- Read-only: Tool definitions are never mutated
- No validation: Whatever the registry sent is projected as-is

Example:
    >>> from toolbridge.formatting import Provider, format_for_provider
    >>>
    >>> formatted = format_for_provider(tool, Provider.GOOGLE)
    >>> formatted["parameters"]["type"]
    'OBJECT'
"""

from ._tool_schema import (
    format_for_amazon,
    format_for_anthropic,
    format_for_generic,
    format_for_google,
    format_for_meta,
    format_for_mistral,
    format_for_openai,
    format_for_provider,
    tools_to_provider_schema,
)
from .base import (
    AmazonTool,
    AnthropicTool,
    FormattedTool,
    GenericTool,
    GoogleTool,
    OpenAITool,
    Provider,
)

__all__ = [
    # Dispatch
    "format_for_provider",
    "tools_to_provider_schema",
    # Per-provider rules
    "format_for_amazon",
    "format_for_anthropic",
    "format_for_generic",
    "format_for_google",
    "format_for_meta",
    "format_for_mistral",
    "format_for_openai",
    # Types
    "Provider",
    "FormattedTool",
    "AmazonTool",
    "AnthropicTool",
    "GenericTool",
    "GoogleTool",
    "OpenAITool",
]
