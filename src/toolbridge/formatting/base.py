# src/toolbridge/formatting/base.py

from enum import Enum
from typing import Any, Literal, NotRequired, TypedDict


class Provider(str, Enum):
    """LLM platform whose tool-schema wire format is targeted."""

    ANTHROPIC = "anthropic"
    OPENAI = "openai"
    GOOGLE = "google"
    AMAZON = "amazon"
    META = "meta"
    MISTRAL = "mistral"
    GENERIC = "generic"


class ObjectSchema(TypedDict):
    type: Literal["object"]
    properties: dict[str, Any]
    required: NotRequired[list[str]]


class GoogleObjectSchema(TypedDict):
    type: Literal["OBJECT"]
    properties: dict[str, Any]
    required: NotRequired[list[str]]


class AnthropicTool(TypedDict):
    name: str
    description: str
    input_schema: ObjectSchema


class OpenAIFunction(TypedDict):
    name: str
    description: str
    parameters: ObjectSchema


class OpenAITool(TypedDict):
    """Function-calling shape shared by OpenAI, Meta and Mistral."""

    type: Literal["function"]
    function: OpenAIFunction


class GoogleTool(TypedDict):
    name: str
    description: str
    parameters: GoogleObjectSchema


class AmazonInputSchema(TypedDict):
    json: ObjectSchema


class AmazonToolSpec(TypedDict):
    name: str
    description: str
    inputSchema: AmazonInputSchema


class AmazonTool(TypedDict):
    toolSpec: AmazonToolSpec


class GenericTool(TypedDict):
    name: str
    description: str
    parameters: ObjectSchema


FormattedTool = AnthropicTool | OpenAITool | GoogleTool | AmazonTool | GenericTool
