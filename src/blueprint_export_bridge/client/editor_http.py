"""EditorClient - Client for the BlueprintExporter HTTP listener inside Unreal Editor."""

import logging
from typing import Any, Dict, Optional
from urllib.parse import quote
import httpx

from ..config import BridgeSettings
from ..constants import PING_ENDPOINT, LIST_ENDPOINT
from ..models import ExportEnvelope, ExportKind, parse_export_envelope

logger = logging.getLogger(__name__)

# Characters encodeURIComponent leaves untouched besides alphanumerics and "-_.~"
_QUERY_SAFE_CHARS = "!*'()"


def encode_query_value(value: str) -> str:
    """Percent-encode a query value, including "/" (``/Game/X`` -> ``%2FGame%2FX``)."""
    return quote(value, safe=_QUERY_SAFE_CHARS)


def build_request_path(endpoint: str, query: Optional[Dict[str, str]] = None) -> str:
    """Build the request path for an editor endpoint.

    Args:
        endpoint: Endpoint path (e.g. "/export")
        query: Optional query parameters; pass None for no query string

    Returns:
        Path with an encoded query string, e.g. "/export?path=%2FGame%2FBP_X"
    """
    if not query:
        return endpoint
    query_string = "&".join(f"{encode_query_value(k)}={encode_query_value(v)}" for k, v in query.items())
    return f"{endpoint}?{query_string}"


class EditorClient:
    """Client for communicating with the BlueprintExporter editor listener.

    Every request opens its own HTTP client; nothing is pooled between calls.
    """

    def __init__(self, settings: Optional[BridgeSettings] = None, transport: Optional[httpx.AsyncBaseTransport] = None):
        """Initialize the editor client.

        Args:
            settings: Optional settings. If not provided, loads from environment.
            transport: Optional httpx transport (used to stand in for the editor in tests)
        """
        self.settings = settings or BridgeSettings()
        self.base_url = self.settings.editor_base_url
        self._transport = transport

        logger.info(f"EditorClient initialized: {self.base_url}")

    def _new_http_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=httpx.Timeout(self.settings.editor_timeout),
            base_url=self.base_url,
            transport=self._transport,
        )

    async def get_json(self, endpoint: str, query: Optional[Dict[str, str]] = None) -> Any:
        """Perform a GET against the editor and decode the JSON body.

        Args:
            endpoint: Endpoint path (e.g. "/ping")
            query: Optional query parameters

        Returns:
            Decoded JSON body

        Raises:
            ConnectionError: If the editor cannot be reached
            TimeoutError: If the request times out
            httpx.HTTPStatusError: If the editor answers with an error status
            ValueError: If the body is not valid JSON
        """
        request_path = build_request_path(endpoint, query)
        logger.debug(f"GET {self.base_url}{request_path}")

        try:
            async with self._new_http_client() as client:
                response = await client.get(request_path)
                response.raise_for_status()
                return response.json()
        except httpx.ConnectError as e:
            logger.warning(f"Connection error calling editor endpoint '{endpoint}': {str(e)}")
            raise ConnectionError(f"Failed to connect to Unreal Editor at {self.base_url}: {str(e)}")
        except httpx.TimeoutException as e:
            logger.warning(f"Timeout calling editor endpoint '{endpoint}' (timeout={self.settings.editor_timeout}s)")
            raise TimeoutError(f"Request to Unreal Editor timed out: {str(e)}")
        except httpx.HTTPStatusError as e:
            logger.error(f"Editor returned HTTP {e.response.status_code} for endpoint '{endpoint}'")
            raise

    async def ping(self) -> Any:
        """Ping the editor listener.

        Returns:
            The editor's status body (e.g. {"status": "ok", "plugin": "BlueprintExporter", "port": 7233})
        """
        return await self.get_json(PING_ENDPOINT)

    async def list_blueprints(self, filter: Optional[str] = None) -> Any:
        """List Blueprint package names known to the editor's asset registry.

        Args:
            filter: Optional substring; omitted from the request when empty
        """
        query = {"filter": filter} if filter else None
        return await self.get_json(LIST_ENDPOINT, query)

    async def export(self, kind: ExportKind, path: str) -> ExportEnvelope:
        """Ask the editor to export an asset to a JSON file.

        Args:
            kind: Which export endpoint to call
            path: Asset path, e.g. "/Game/Core/Inventory/BP_InventoryVisual"

        Returns:
            Parsed export envelope
        """
        payload = await self.get_json(kind.endpoint, {"path": path})
        return parse_export_envelope(payload)
