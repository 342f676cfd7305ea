"""Constants for BlueprintExportBridge."""

# Default port numbers
DEFAULT_EDITOR_PORT = 7233
DEFAULT_BRIDGE_PORT = 7234

# Default timeout (in seconds) for requests to the editor listener
DEFAULT_EDITOR_TIMEOUT = 30

# MCP server name advertised to clients
SERVER_NAME = "blueprint-exporter"

# Editor listener endpoints
PING_ENDPOINT = "/ping"
LIST_ENDPOINT = "/list"
EXPORT_BLUEPRINT_ENDPOINT = "/export"
EXPORT_STRUCT_ENDPOINT = "/export-struct"
EXPORT_ENUM_ENDPOINT = "/export-enum"

# Indent used when re-serializing editor JSON for the agent
JSON_INDENT = 2
