DEFAULT_HOST = "localhost"
DEFAULT_PORT = 6379
DEFAULT_DB = 0
# Never valid in a host; connection names are namespaced with it
RESERVED_HOST_CHAR = "@"
DEFAULT_NAME_PREFIX = f"name{RESERVED_HOST_CHAR}"
# Per-command retry budget, after which the error reaches the caller
DEFAULT_MAX_RETRIES = 20

# Backoff Policy (milliseconds)
ONE_SECOND_MS = 1000
MAX_RECONNECT_DELAY_MS = 5000

# Lifecycle events
EVENT_CONNECT = "connect"
EVENT_READY = "ready"
EVENT_ERROR = "error"
EVENT_RECONNECTING = "reconnecting"
EVENT_CLOSE = "close"
EVENT_END = "end"

LIFECYCLE_EVENTS = (
    EVENT_CONNECT,
    EVENT_READY,
    EVENT_ERROR,
    EVENT_RECONNECTING,
    EVENT_CLOSE,
    EVENT_END,
)

# Errors
ERROR_INVALID_OPTIONS = "options must be a dict or ConnectionOptions, got {type}"
ERROR_INVALID_HOST = "host must not contain '{char}', got {host!r}"
ERROR_INVALID_PORT = "port must be between 1 and 65535, got {port}"
ERROR_INVALID_DB = "db must be non-negative, got {db}"
ERROR_UNKNOWN_EVENT = "Unknown connection event: {event}"
