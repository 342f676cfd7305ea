"""Error handling utilities for BlueprintExportBridge."""

from fastmcp.exceptions import ToolError

EDITOR_NOT_RUNNING_MESSAGE = "Unreal Editor is not running or BlueprintExporter plugin is not active."


class ExportFailedError(ToolError):
    """The editor was reachable but reported that the export failed."""

    def __init__(self, reason: str):
        super().__init__(f"Export failed: {reason}")
        self.reason = reason


class EditorUnavailableError(ToolError):
    """The editor listener could not be reached."""

    def __init__(self):
        super().__init__(EDITOR_NOT_RUNNING_MESSAGE)


class InvalidEnvelopeError(ValueError):
    """The editor returned a body that is not a usable export envelope."""


def create_error_message(error: Exception) -> str:
    """Format a caught exception as the text returned to the agent.

    Args:
        error: The exception raised while handling a tool call

    Returns:
        Human-readable error text
    """
    return f"Error: {error}"


def tool_error_from_exception(error: Exception) -> ToolError:
    """Wrap an arbitrary exception in a ToolError the MCP layer flags as an error result."""
    if isinstance(error, ToolError):
        return error
    return ToolError(create_error_message(error))
