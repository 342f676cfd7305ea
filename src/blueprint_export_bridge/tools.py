"""Tool handling and execution logic for BlueprintExportBridge.

Each handler performs one request against the editor listener and returns the
JSON text handed back to the agent. Failures are raised as ``ToolError`` so the
MCP layer marks the result with ``isError``.
"""

import asyncio
import json
import logging
from pathlib import Path
from typing import Any, Optional

from fastmcp.exceptions import ToolError

from .client.editor_http import EditorClient
from .constants import JSON_INDENT
from .errors import EditorUnavailableError, ExportFailedError, InvalidEnvelopeError, tool_error_from_exception
from .models import ExportFailed, ExportKind

logger = logging.getLogger(__name__)


def format_json(data: Any) -> str:
    """Serialize JSON data the way it is returned to the agent."""
    return json.dumps(data, indent=JSON_INDENT, ensure_ascii=False)


def _load_json_file(output_path: str) -> Any:
    # Non-ANSI exports are written as UTF-16LE with a BOM; json.loads detects it from the bytes
    return json.loads(Path(output_path).read_bytes())


async def read_output_file(output_path: str) -> Any:
    """Read and decode the JSON file the editor wrote.

    Raises:
        OSError: If the file is missing or unreadable
        ValueError: If the file does not contain valid JSON
    """
    logger.debug(f"Reading export output file: {output_path}")
    return await asyncio.to_thread(_load_json_file, output_path)


async def ping_editor(client: EditorClient) -> str:
    """Check that the editor listener answers.

    Any failure collapses into a single "not running" message.
    """
    try:
        data = await client.ping()
    except Exception as e:
        logger.warning(f"Editor ping failed: {str(e)}")
        raise EditorUnavailableError()
    return format_json(data)


async def list_blueprints(client: EditorClient, filter: Optional[str] = None) -> str:
    """Return the editor's Blueprint list as-is.

    The body is not checked for a success flag the way exports are.
    """
    try:
        data = await client.list_blueprints(filter)
    except Exception as e:
        logger.error(f"Error listing blueprints: {str(e)}", exc_info=True)
        raise tool_error_from_exception(e)

    if isinstance(data, dict) and data.get("success") is False:
        logger.warning(f"Editor reported failure listing blueprints: {data.get('error', 'Unknown error')}")
    return format_json(data)


async def export_asset(client: EditorClient, kind: ExportKind, path: str) -> str:
    """Export an asset through the editor and return the exported JSON.

    Args:
        client: Editor client
        kind: Blueprint, struct or enum
        path: Asset path

    Returns:
        Pretty-printed export data

    Raises:
        ToolError: "Export failed: <reason>" when the editor rejects the export,
            "Error: <message>" for transport, decode and file errors
    """
    logger.info(f"Export requested: kind={kind.value}, path={path}")
    try:
        envelope = await client.export(kind, path)

        if isinstance(envelope, ExportFailed):
            logger.warning(f"Editor failed to export {kind.value} '{path}': {envelope.error}")
            raise ExportFailedError(envelope.error)

        if envelope.output_path:
            data = await read_output_file(envelope.output_path)
        elif envelope.data is not None:
            data = envelope.data
        else:
            raise InvalidEnvelopeError("Export response did not include an output path")

        logger.info(f"Exported {kind.value} '{path}'")
        return format_json(data)
    except ToolError:
        raise
    except Exception as e:
        logger.error(f"Error exporting {kind.value} '{path}': {str(e)}", exc_info=True)
        raise tool_error_from_exception(e)


async def export_blueprint(client: EditorClient, path: str) -> str:
    return await export_asset(client, ExportKind.blueprint, path)


async def export_struct(client: EditorClient, path: str) -> str:
    return await export_asset(client, ExportKind.struct, path)


async def export_enum(client: EditorClient, path: str) -> str:
    return await export_asset(client, ExportKind.enum, path)
