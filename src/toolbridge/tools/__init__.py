from .tool import ToolCall, ToolDefinition, ToolParameter, ToolParameters, ToolsResponse

__all__ = [
    "ToolCall",
    "ToolDefinition",
    "ToolParameter",
    "ToolParameters",
    "ToolsResponse",
]
