# src/toolbridge/formatting/_tool_schema.py

"""Conversion of canonical tool definitions to provider-specific schemas.

This is infrastructure, not behavior. Pure data transformation: no I/O, no
validation, no failure path. Malformed or missing parameter types are passed
through as received (Google only upper-cases plain string types).
"""

import logging
from collections.abc import Callable
from typing import Any

from toolbridge.tools.tool import ToolDefinition, ToolParameter

from .base import (
    AmazonTool,
    AnthropicTool,
    FormattedTool,
    GenericTool,
    GoogleObjectSchema,
    GoogleTool,
    ObjectSchema,
    OpenAITool,
    Provider,
)

logger = logging.getLogger(__name__)


def _object_schema(tool: ToolDefinition) -> ObjectSchema:
    schema: ObjectSchema = {
        "type": "object",
        "properties": tool.properties_schema(),
    }
    if tool.parameters.required is not None:
        schema["required"] = list(tool.parameters.required)
    return schema


def format_for_anthropic(tool: ToolDefinition) -> AnthropicTool:
    """Convert a tool definition to Anthropic tool use format."""
    return {
        "name": tool.name,
        "description": tool.description,
        "input_schema": _object_schema(tool),
    }


def format_for_openai(tool: ToolDefinition) -> OpenAITool:
    """Convert a tool definition to OpenAI function calling format.

    Meta and Mistral accept the same shape.
    """
    return {
        "type": "function",
        "function": {
            "name": tool.name,
            "description": tool.description,
            "parameters": _object_schema(tool),
        },
    }


# Meta and Mistral take the OpenAI shape as is.
format_for_meta = format_for_openai
format_for_mistral = format_for_openai


def format_for_amazon(tool: ToolDefinition) -> AmazonTool:
    """Convert a tool definition to the Bedrock Converse ``toolSpec`` format."""
    return {
        "toolSpec": {
            "name": tool.name,
            "description": tool.description,
            "inputSchema": {"json": _object_schema(tool)},
        }
    }


def format_for_generic(tool: ToolDefinition) -> GenericTool:
    """Canonical shape, re-emitted with the root type pinned to ``object``."""
    return {
        "name": tool.name,
        "description": tool.description,
        "parameters": _object_schema(tool),
    }


def _google_type(node: ToolParameter, out: dict[str, Any]) -> None:
    # Only string types are upper-cased; a missing type stays missing and
    # anything else (e.g. a union list) is carried through unchanged.
    if isinstance(node.type, str):
        out["type"] = node.type.upper()
    elif node.type is not None:
        out["type"] = node.type


def _google_items(items: ToolParameter) -> dict[str, Any]:
    # Only type and description survive for array items. Nested enum,
    # properties and required are dropped, unlike at the property level.
    # Consumers depend on this shape, keep it.
    result: dict[str, Any] = {}
    _google_type(items, result)
    if items.description is not None:
        result["description"] = items.description
    return result


def _google_properties(
    properties: dict[str, ToolParameter],
) -> dict[str, dict[str, Any]]:
    result: dict[str, dict[str, Any]] = {}

    for key, prop in properties.items():
        google_prop: dict[str, Any] = {}
        _google_type(prop, google_prop)

        if prop.description is not None:
            google_prop["description"] = prop.description

        if prop.enum is not None:
            google_prop["enum"] = list(prop.enum)

        if prop.items is not None:
            google_prop["items"] = _google_items(prop.items)

        if prop.properties is not None:
            google_prop["properties"] = _google_properties(prop.properties)

        if prop.required is not None:
            google_prop["required"] = list(prop.required)

        result[key] = google_prop

    return result


def format_for_google(tool: ToolDefinition) -> GoogleTool:
    """Convert a tool definition to Gemini function declaration format.

    Gemini expects upper-case type names (``STRING``, ``ARRAY``, ``OBJECT``)
    throughout the tree, so properties are rebuilt recursively rather than
    passed through.
    """
    parameters: GoogleObjectSchema = {
        "type": "OBJECT",
        "properties": _google_properties(tool.parameters.properties),
    }
    if tool.parameters.required is not None:
        parameters["required"] = list(tool.parameters.required)

    return {
        "name": tool.name,
        "description": tool.description,
        "parameters": parameters,
    }


_FORMATTERS: dict[Provider, Callable[[ToolDefinition], FormattedTool]] = {
    Provider.ANTHROPIC: format_for_anthropic,
    Provider.OPENAI: format_for_openai,
    Provider.GOOGLE: format_for_google,
    Provider.AMAZON: format_for_amazon,
    Provider.META: format_for_meta,
    Provider.MISTRAL: format_for_mistral,
    Provider.GENERIC: format_for_generic,
}


def format_for_provider(
    tool: ToolDefinition, provider: Provider | str
) -> FormattedTool:
    """Convert one tool definition to the wire shape of ``provider``.

    Args:
        tool: Canonical tool definition. Never mutated.
        provider: Provider tag, as enum member or plain string.

    Returns:
        A freshly built dict in the provider's format. Unrecognized tags get
        the generic format; the client rejects them at construction, so this
        branch is a fallback only.
    """
    try:
        formatter = _FORMATTERS[Provider(provider)]
    except ValueError:
        logger.warning("Unknown provider %r, using generic tool format", provider)
        formatter = format_for_generic
    return formatter(tool)


def tools_to_provider_schema(
    tools: list[ToolDefinition], provider: Provider | str
) -> list[FormattedTool]:
    """Convert tool definitions to ``provider`` format, preserving order."""
    logger.debug("Formatting %d tools for provider=%s", len(tools), provider)
    return [format_for_provider(tool, provider) for tool in tools]
