"""BlueprintExportBridge - Main FastMCP server implementation."""

from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

from fastmcp import FastMCP

from . import tools as tool_handlers
from .client.editor_http import EditorClient
from .config import BridgeSettings, MCPTransport, setup_logging
from .constants import SERVER_NAME
from .prompts import convert_blueprint_prompt, inspect_data_type_prompt

# Initialize settings and logging
settings = BridgeSettings()
setup_logging(settings)
logger = logging.getLogger(__name__)

# Initialize FastMCP server
mcp = FastMCP(SERVER_NAME)

# Client for the editor listener; rebuilt by main() when CLI flags override settings
editor_client = EditorClient(settings=settings)

READ_ONLY_ANNOTATIONS = {
    "readOnlyHint": True,
    "destructiveHint": False,
    "idempotentHint": True,
    "openWorldHint": False
}


@mcp.tool(annotations={"title": "Ping Editor", **READ_ONLY_ANNOTATIONS})
async def ping_editor() -> str:
    """Check if Unreal Editor is running with the BlueprintExporter plugin."""
    logger.info("Tool call requested: ping_editor")
    return await tool_handlers.ping_editor(editor_client)


@mcp.tool(annotations={"title": "Export Blueprint", **READ_ONLY_ANNOTATIONS})
async def export_blueprint(path: str) -> str:
    """Export a blueprint's complete graph data (variables, components, functions, events) to JSON. Returns the full graph data directly. `path` is the asset path, e.g. /Game/Core/Inventory/BP_InventoryVisual."""
    logger.info("Tool call requested: export_blueprint")
    return await tool_handlers.export_blueprint(editor_client, path)


@mcp.tool(annotations={"title": "List Blueprints", **READ_ONLY_ANNOTATIONS})
async def list_blueprints(filter: Optional[str] = None) -> str:
    """List available blueprints in the project, optionally filtered by name. `filter` is an optional string to match blueprint names."""
    logger.info("Tool call requested: list_blueprints")
    return await tool_handlers.list_blueprints(editor_client, filter)


@mcp.tool(annotations={"title": "Export Struct", **READ_ONLY_ANNOTATIONS})
async def export_struct(path: str) -> str:
    """Export a UserDefinedStruct's field definitions (names, types, defaults) to JSON. `path` is the asset path, e.g. /Game/Data/Structs/S_MyStruct."""
    logger.info("Tool call requested: export_struct")
    return await tool_handlers.export_struct(editor_client, path)


@mcp.tool(annotations={"title": "Export Enum", **READ_ONLY_ANNOTATIONS})
async def export_enum(path: str) -> str:
    """Export a UserDefinedEnum's values (names, display names, numeric values) to JSON. `path` is the asset path, e.g. /Game/Data/Enums/E_MyEnum."""
    logger.info("Tool call requested: export_enum")
    return await tool_handlers.export_enum(editor_client, path)


# Prompt handlers - fully static, no editor connection required

@mcp.prompt()
def convert_blueprint_to_angelscript(blueprint_path: str, notes: str = "") -> str:
    """Convert a Blueprint into an equivalent AngelScript class.

    Args:
        blueprint_path: The path to the Blueprint asset (e.g., '/Game/Core/Inventory/BP_InventoryVisual')
        notes: Optional extra instructions for the conversion

    Returns:
        Prompt text for LLM interaction
    """
    return convert_blueprint_prompt(blueprint_path, notes)


@mcp.prompt()
def inspect_data_type(asset_path: str, kind: str = "struct") -> str:
    """Summarise a UserDefinedStruct or UserDefinedEnum.

    Args:
        asset_path: The path to the struct or enum asset
        kind: 'struct' or 'enum' (default: 'struct')

    Returns:
        Prompt text for LLM interaction
    """
    return inspect_data_type_prompt(asset_path, kind)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command-line overrides for the bridge settings."""
    parser = argparse.ArgumentParser(
        prog="blueprint-export-bridge",
        description="MCP server that exports Unreal Editor Blueprints, structs and enums as JSON."
    )
    parser.add_argument("--editor-host", help="Host running the BlueprintExporter listener")
    parser.add_argument("--editor-port", type=int, help="Port of the BlueprintExporter listener")
    parser.add_argument("--editor-timeout", type=int, help="Timeout in seconds for requests to the editor")
    parser.add_argument("--transport", choices=[t.value for t in MCPTransport], help="MCP transport")
    parser.add_argument("--host", help="Bind host for sse/http transports")
    parser.add_argument("--port", type=int, help="Bind port for sse/http transports")
    parser.add_argument("--log-level", help="Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)")
    return parser.parse_args(argv)


def settings_from_args(args: argparse.Namespace) -> BridgeSettings:
    """Build settings from the environment, with CLI flags taking precedence."""
    overrides = {key: value for key, value in vars(args).items() if value is not None}
    return BridgeSettings(**overrides)


def main(argv: Optional[Sequence[str]] = None):
    """Run the bridge server."""
    global settings, editor_client

    settings = settings_from_args(parse_args(argv))
    setup_logging(settings)
    editor_client = EditorClient(settings=settings)

    logger.info(f"Starting BlueprintExportBridge (transport={settings.transport.value}, editor={settings.editor_base_url})")

    run_kwargs = {"transport": settings.transport.value}
    if settings.transport != MCPTransport.stdio:
        # Only add host/port for non-stdio transports
        run_kwargs["host"] = settings.host
        run_kwargs["port"] = settings.port
        if settings.transport == MCPTransport.http:
            run_kwargs["stateless_http"] = True

    mcp.run(**run_kwargs)


if __name__ == "__main__":
    main()
