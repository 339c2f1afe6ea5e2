from pkg.redis.type import ConnectionOptions
from ..constant import FALLBACK_KEY, KEY_SEPARATOR, NAME_PREFIX


def make_key(options: ConnectionOptions) -> str:
    """Cache key for options, "host:port".

    Only host and port are looked at; two option sets differing in db or
    credentials share a key.
    """
    key = ""

    if options.host:
        key += str(options.host)

    if options.port:
        key += f"{KEY_SEPARATOR}{options.port}"

    return key or FALLBACK_KEY


def make_name_key(name: str, prefix: str = NAME_PREFIX) -> str:
    return f"{prefix}{name}"


def should_replace(current: ConnectionOptions, requested: ConnectionOptions) -> bool:
    """Whether a named connection must be rebuilt for ``requested``.

    True only when host AND port both changed. Changing just one of them
    keeps the existing connection.
    """
    return current.host != requested.host and current.port != requested.port
