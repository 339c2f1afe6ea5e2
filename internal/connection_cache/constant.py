from pkg.redis.constant import DEFAULT_NAME_PREFIX, RESERVED_HOST_CHAR

# Named connection keys carry RESERVED_HOST_CHAR, which no host:port key can
NAME_PREFIX = DEFAULT_NAME_PREFIX
KEY_SEPARATOR = ":"
FALLBACK_KEY = "localhost:6379"

ERROR_INVALID_NAME = "Use a string as first argument with connect_by_name!"
ERROR_INVALID_PREFIX = "name_prefix must contain '" + RESERVED_HOST_CHAR + "', got {prefix!r}"
