"""Use case for caching Redis connections."""

from typing import Mapping, Optional

from pkg.logger.logger import Logger
from pkg.redis.constant import RESERVED_HOST_CHAR
from pkg.redis.connection import ManagedConnection
from pkg.redis.factory import ConnectionFactory
from pkg.redis.type import ConnectionOptions
from ..constant import ERROR_INVALID_NAME, ERROR_INVALID_PREFIX, NAME_PREFIX
from ..errors import ErrInvalidConnectionName
from ..interface import IConnectionCacheUseCase, Options
from .helpers import make_key, make_name_key, should_replace
from .lifecycle import add_events, log_events
from .registry import ConnectionRegistry


class ConnectionCacheUseCase(IConnectionCacheUseCase):
    """Hands out one Redis connection per host:port, or per name.

    Connections are created lazily and removed from the cache when they
    emit ``end``. :meth:`reset` forgets every cached connection without
    closing it; :meth:`close_all` closes them first.

    Example:
        >>> cache = New()
        >>> a = cache.connect({"host": "localhost", "port": 6379})
        >>> b = cache.connect()
        >>> a is b
        True
        >>> analytics = cache.connect_by_name("analytics", {"port": 6380})
    """

    def __init__(
        self,
        factory: ConnectionFactory,
        registry: Optional[ConnectionRegistry] = None,
        defaults: Optional[ConnectionOptions] = None,
        name_prefix: str = NAME_PREFIX,
        logger: Optional[Logger] = None,
        log_connection_events: bool = True,
    ):
        """Initialize use case.

        Args:
            factory: Builds new connections
            registry: Connection registry (a new one by default)
            defaults: Where missing host/port/db come from (localhost:6379)
            name_prefix: Prefix for named connection keys, must contain "@"
            logger: Logger instance (optional)
            log_connection_events: Log each connection's lifecycle events
        """
        if RESERVED_HOST_CHAR not in name_prefix:
            raise ValueError(
                ERROR_INVALID_PREFIX.format(prefix=name_prefix)
            )

        self.factory = factory
        self.registry = registry if registry is not None else ConnectionRegistry()
        self.defaults = defaults or ConnectionOptions()
        self.name_prefix = name_prefix
        self.logger = logger
        self.log_connection_events = log_connection_events

    @property
    def connections(self) -> Mapping[str, ManagedConnection]:
        """Read-only snapshot of cached connections by key."""
        return self.registry.snapshot()

    def get(self, key: str) -> Optional[ManagedConnection]:
        return self.registry.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self.registry

    def __len__(self) -> int:
        return len(self.registry)

    def connect(self, options: Options = None) -> ManagedConnection:
        """Return the cached connection for the options' host:port.

        A new lazy connection is built and cached on a miss.

        Args:
            options: Partial connection options, dict or ConnectionOptions

        Returns:
            The same ManagedConnection for every call resolving to one key
        """
        options = ConnectionOptions.ensure(options, self.defaults)
        key = make_key(options)

        with self.registry.lock:
            existing = self.registry.get(key)
            if existing is not None:
                if self.logger:
                    self.logger.debug(f"[ConnectionCache] Reusing connection: {key}")
                return existing

            conn = self._create(key, options)
            self.registry.put(key, conn)

        if self.logger:
            self.logger.info(f"[ConnectionCache] Created connection: {key}")
        return conn

    def connect_by_name(self, name: str, options: Options = None) -> ManagedConnection:
        """Return the connection kept under ``name``.

        An existing named connection is replaced only when both host and
        port differ from the requested ones. The replaced connection is not
        closed.

        Args:
            name: Connection name
            options: Partial connection options, dict or ConnectionOptions

        Returns:
            ManagedConnection for the name

        Raises:
            ErrInvalidConnectionName: If name is not a string
        """
        if not isinstance(name, str):
            raise ErrInvalidConnectionName(ERROR_INVALID_NAME)

        options = ConnectionOptions.ensure(options, self.defaults)
        key = make_name_key(name, self.name_prefix)

        with self.registry.lock:
            existing = self.registry.get(key)
            if existing is not None and not should_replace(existing.options, options):
                if self.logger:
                    self.logger.debug(f"[ConnectionCache] Reusing named connection: {name}")
                return existing

            conn = self._create(key, options)
            self.registry.put(key, conn)

        if self.logger:
            action = "Replaced" if existing is not None else "Created"
            self.logger.info(
                f"[ConnectionCache] {action} named connection: {name} "
                f"({options.host}:{options.port})"
            )
        return conn

    def reset(self) -> None:
        """Forget every cached connection. Connections are left open."""
        dropped = self.registry.clear()
        if self.logger:
            self.logger.info(f"[ConnectionCache] Reset, dropped {len(dropped)} connections")

    async def close_all(self) -> None:
        """Close every cached connection, then empty the cache."""
        connections = self.registry.clear()
        for conn in connections:
            await conn.close()
        if self.logger:
            self.logger.info(f"[ConnectionCache] Closed {len(connections)} connections")

    def _create(self, key: str, options: ConnectionOptions) -> ManagedConnection:
        conn = self.factory.create(options)
        conn.name = key
        add_events(conn, self.registry, self.logger)
        if self.logger and self.log_connection_events:
            log_events(conn, self.logger)
        return conn
