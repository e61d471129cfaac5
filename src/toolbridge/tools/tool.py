from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ToolParameter(BaseModel):
    """One node of a tool's parameter schema tree.

    Keys the registry sends beyond the known ones are kept as extras so the
    identity converters can pass them through untouched. ``type`` is not
    checked: a missing type or a union list like ``["string", "null"]`` is
    kept as received.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    type: Any = None
    description: str | None = None
    enum: list[Any] | None = None
    items: "ToolParameter | None" = None
    properties: dict[str, "ToolParameter"] | None = None
    required: list[str] | None = None


class ToolParameters(BaseModel):
    model_config = ConfigDict(extra="allow", frozen=True)

    type: str = "object"
    properties: dict[str, ToolParameter] = Field(default_factory=dict)
    required: list[str] | None = None


class ToolDefinition(BaseModel):
    """Canonical, provider-neutral definition of a registry tool."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    parameters: ToolParameters = Field(default_factory=ToolParameters)

    def properties_schema(self) -> dict[str, dict[str, Any]]:
        """Properties as plain dicts, exactly as received."""
        return {
            key: prop.model_dump(exclude_unset=True)
            for key, prop in self.parameters.properties.items()
        }


class ToolsResponse(BaseModel):
    tools: list[ToolDefinition]


class ToolCall(BaseModel):
    """Body of a tool invocation request."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    tool_name: str = Field(alias="tool")
    arguments: dict[str, Any] = Field(default_factory=dict, alias="params")

    def to_request_body(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)
