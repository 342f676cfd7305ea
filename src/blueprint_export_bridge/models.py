"""Response envelope models for the BlueprintExporter editor listener.

The three export endpoints answer with ``{"success": bool, "error"?: str,
"output_path"?: str, "file_size"?: number}``. The bridge turns that into a
tagged result: :class:`ExportSucceeded` or :class:`ExportFailed`.
"""

from enum import Enum
from typing import Any, Dict, Literal, Optional, Union
from pydantic import BaseModel, ConfigDict

from .constants import EXPORT_BLUEPRINT_ENDPOINT, EXPORT_STRUCT_ENDPOINT, EXPORT_ENUM_ENDPOINT
from .errors import InvalidEnvelopeError


class ExportKind(str, Enum):
    """Kinds of asset the editor can export, mapped to their endpoints."""
    blueprint = "blueprint"
    struct = "struct"
    enum = "enum"

    @property
    def endpoint(self) -> str:
        return _EXPORT_ENDPOINTS[self]


_EXPORT_ENDPOINTS = {
    ExportKind.blueprint: EXPORT_BLUEPRINT_ENDPOINT,
    ExportKind.struct: EXPORT_STRUCT_ENDPOINT,
    ExportKind.enum: EXPORT_ENUM_ENDPOINT,
}


class ExportSucceeded(BaseModel):
    """Export finished; the artifact is on disk at ``output_path`` or inline in ``data``."""
    model_config = ConfigDict(extra='ignore')

    success: Literal[True] = True
    output_path: Optional[str] = None
    file_size: Optional[float] = None
    data: Optional[Any] = None


class ExportFailed(BaseModel):
    """Export was rejected by the editor."""
    model_config = ConfigDict(extra='ignore')

    success: Literal[False] = False
    error: str = "Unknown error"


ExportEnvelope = Union[ExportSucceeded, ExportFailed]


def parse_export_envelope(payload: Any) -> ExportEnvelope:
    """Parse an export endpoint response body.

    A missing or falsy ``success`` field counts as a failure.

    Args:
        payload: Decoded JSON body returned by the editor

    Returns:
        ExportSucceeded or ExportFailed

    Raises:
        InvalidEnvelopeError: If the body is not a JSON object
    """
    if not isinstance(payload, dict):
        raise InvalidEnvelopeError(
            f"Unexpected response from editor: expected a JSON object, got {type(payload).__name__}"
        )

    if not payload.get("success"):
        error = payload.get("error")
        if error is None:
            return ExportFailed()
        return ExportFailed(error=str(error))

    fields: Dict[str, Any] = {k: v for k, v in payload.items() if k != "success"}
    return ExportSucceeded(**fields)
