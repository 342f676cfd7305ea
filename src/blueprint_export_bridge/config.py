"""Configuration and settings for BlueprintExportBridge."""

import logging
import sys
from enum import Enum
from pathlib import Path
from typing import Optional
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import DEFAULT_EDITOR_PORT, DEFAULT_BRIDGE_PORT, DEFAULT_EDITOR_TIMEOUT


class MCPTransport(str, Enum):
    """MCP transport types."""
    stdio = "stdio"
    sse = "sse"
    http = "http"


class BridgeSettings(BaseSettings):
    """Bridge configuration settings."""
    model_config = SettingsConfigDict(env_prefix="blueprint_exporter_bridge_", env_file=".env", extra='ignore')

    # Editor listener (BlueprintExporter plugin) settings
    editor_host: str = "localhost"
    editor_port: int = DEFAULT_EDITOR_PORT
    editor_timeout: int = DEFAULT_EDITOR_TIMEOUT

    # Bridge server settings (only used by non-stdio transports)
    host: str = "127.0.0.1"
    port: int = DEFAULT_BRIDGE_PORT
    transport: MCPTransport = MCPTransport.stdio

    # Development mode
    debug: bool = False

    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = None
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @property
    def editor_base_url(self) -> str:
        """Base URL of the editor listener."""
        return f"http://{self.editor_host}:{self.editor_port}"

    @field_validator('editor_host')
    @classmethod
    def validate_host(cls, v: str) -> str:
        """Validate editor host is not blank."""
        if not v.strip():
            raise ValueError("Editor host must not be empty")
        return v.strip()

    @field_validator('editor_port', 'port')
    @classmethod
    def validate_port(cls, v: int) -> int:
        """Validate port is in valid range."""
        if not (1 <= v <= 65535):
            raise ValueError(f"Port must be between 1 and 65535, got {v}")
        return v

    @field_validator('editor_timeout')
    @classmethod
    def validate_timeout(cls, v: int) -> int:
        """Validate timeout is positive."""
        if v <= 0:
            raise ValueError(f"Timeout must be positive, got {v}")
        return v

    @field_validator('transport', mode='before')
    @classmethod
    def validate_transport(cls, v: str | MCPTransport) -> MCPTransport:
        """Validate transport type."""
        if isinstance(v, str) and not isinstance(v, MCPTransport):
            try:
                return MCPTransport(v.lower())
            except ValueError:
                raise ValueError(f"Invalid transport type: {v}. Must be one of: {', '.join(t.value for t in MCPTransport)}")
        return v

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = {'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'}
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of: {', '.join(sorted(valid_levels))}")
        return v.upper()


def setup_logging(settings: BridgeSettings):
    """Configure logging based on settings.

    Console output goes to stderr; stdout carries the MCP stdio stream.
    """
    if settings.debug:
        numeric_level = logging.DEBUG
    else:
        numeric_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    formatter = logging.Formatter(settings.log_format)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    # Remove existing handlers to avoid duplicates
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if settings.log_file:
        log_path = Path(settings.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(settings.log_file, encoding='utf-8')
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    logging.getLogger("blueprint_export_bridge").setLevel(numeric_level)

    if settings.debug:
        logging.getLogger(__name__).debug("Debug mode enabled - log level forced to DEBUG")
