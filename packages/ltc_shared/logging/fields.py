"""Canonical logging field names shared by ltc components."""

TIMESTAMP = "timestamp"
LEVEL = "level"
LOGGER = "logger"
MESSAGE = "message"
EVENT = "event"
EXCEPTION = "exception"

# Component identity.
COMPONENT_ID = "component_id"
SERVICE = "service"
ENVIRONMENT = "environment"

# Outbound HTTP exchange fields.
HTTP_METHOD = "http_method"
HTTP_PATH = "http_path"
HTTP_STATUS = "http_status"
DURATION_MS = "duration_ms"
BLOB_NAME = "blob_name"

BLOB_STORE_REQUEST_EVENT = "blob_store_request"
BLOB_STORE_RESPONSE_EVENT = "blob_store_response"
