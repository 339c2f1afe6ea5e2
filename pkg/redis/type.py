from dataclasses import dataclass, field, fields
from typing import Any, Mapping, Optional, Union

from .constant import *


@dataclass
class ConnectionOptions:
    """Options used to build a Redis connection.

    Attributes:
        host: Redis host (default: localhost)
        port: Redis port (default: 6379)
        db: Redis database number (default: 0)
        username: Redis username (optional, Redis 6+)
        password: Redis password (optional)
        max_retries: Retries per command before the error is raised
        extra: Any other keyword arguments, forwarded to the client as-is
    """

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    db: int = DEFAULT_DB
    username: Optional[str] = None
    password: Optional[str] = None
    max_retries: int = DEFAULT_MAX_RETRIES
    extra: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        """Validate configuration."""
        if self.host and RESERVED_HOST_CHAR in str(self.host):
            raise ValueError(
                ERROR_INVALID_HOST.format(char=RESERVED_HOST_CHAR, host=self.host)
            )
        if self.port and not 0 < int(self.port) <= 65535:
            raise ValueError(ERROR_INVALID_PORT.format(port=self.port))
        if self.db < 0:
            raise ValueError(ERROR_INVALID_DB.format(db=self.db))

    @classmethod
    def ensure(
        cls,
        options: Union["ConnectionOptions", Mapping[str, Any], None] = None,
        defaults: Optional["ConnectionOptions"] = None,
    ) -> "ConnectionOptions":
        """Return a copy of ``options`` with host and port always populated.

        Empty host or port (None, "" or 0) falls back to ``defaults``. Unknown
        mapping keys are collected into ``extra``. The input is never mutated.

        Args:
            options: Partial options, a ConnectionOptions instance or None
            defaults: Where missing values come from (default: localhost:6379)

        Returns:
            A new, fully populated ConnectionOptions

        Raises:
            TypeError: If options is neither a mapping nor ConnectionOptions
        """
        defaults = defaults or cls()

        if options is None:
            values: dict[str, Any] = {}
        elif isinstance(options, ConnectionOptions):
            values = {f.name: getattr(options, f.name) for f in fields(cls)}
        elif isinstance(options, Mapping):
            values = dict(options)
        else:
            raise TypeError(ERROR_INVALID_OPTIONS.format(type=type(options).__name__))

        known = {f.name for f in fields(cls)}
        extra = dict(defaults.extra)
        extra.update(values.pop("extra", None) or {})
        for key in list(values):
            if key not in known:
                extra[key] = values.pop(key)

        def pick(name: str) -> Any:
            value = values.get(name)
            return getattr(defaults, name) if value is None else value

        return cls(
            host=values.get("host") or defaults.host,
            port=values.get("port") or defaults.port,
            db=pick("db"),
            username=pick("username"),
            password=pick("password"),
            max_retries=pick("max_retries"),
            extra=extra,
        )


__all__ = [
    "ConnectionOptions",
]
