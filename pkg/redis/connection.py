from collections import defaultdict
from typing import Any, Callable, Optional

from loguru import logger
from redis.commands import AsyncCoreCommands
from redis.exceptions import RedisError

from .constant import *
from .interface import IConnection
from .type import ConnectionOptions


class ManagedConnection(AsyncCoreCommands, IConnection):
    """Redis client wrapper with lifecycle events.

    Commands go through :meth:`execute_command` of the wrapped client, so the
    wrapper can be used wherever a ``redis.asyncio.Redis`` is expected and
    command failures are reported as ``error`` events. Anything else
    (pipeline, pubsub, connection_pool) is looked up on the client. The
    client is lazy: no socket is opened until the first command or an
    explicit :meth:`connect`.

    Events:
        connect: socket opened, before the handshake
        ready: handshake finished, commands can be sent
        error: a Redis error was raised (listener receives the exception)
        reconnecting: a retry delay was computed (receives attempt, delay_ms)
        close: the client was closed
        end: the connection is finished and will not reconnect

    Example:
        >>> conn = ManagedConnection(ConnectionOptions(port=6380))
        >>> conn.attach(redis.asyncio.Redis(port=6380))
        >>> conn.on("end", lambda: print("gone"))
        >>> await conn.set("counter", 1)
    """

    def __init__(self, options: ConnectionOptions, client: Any = None):
        self.options = options
        self.client = client
        self.name: Optional[str] = None
        self._listeners: dict[str, list[Callable[..., Any]]] = defaultdict(list)
        self._ended = False

    def attach(self, client: Any) -> "ManagedConnection":
        """Set the underlying client once it has been built."""
        self.client = client
        return self

    def __getattr__(self, item: str) -> Any:
        # Only reached for attributes the wrapper doesn't define
        if item in ("client", "_listeners") or self.client is None:
            raise AttributeError(item)
        return getattr(self.client, item)

    def __repr__(self) -> str:
        return (
            f"<ManagedConnection name={self.name!r} "
            f"host={self.options.host!r} port={self.options.port!r}>"
        )

    @property
    def ended(self) -> bool:
        return self._ended

    def on(self, event: str, listener: Callable[..., Any]) -> "ManagedConnection":
        if event not in LIFECYCLE_EVENTS:
            raise ValueError(ERROR_UNKNOWN_EVENT.format(event=event))
        self._listeners[event].append(listener)
        return self

    def once(self, event: str, listener: Callable[..., Any]) -> "ManagedConnection":
        def wrapper(*args: Any) -> None:
            self.off(event, wrapper)
            listener(*args)

        return self.on(event, wrapper)

    def off(self, event: str, listener: Callable[..., Any]) -> "ManagedConnection":
        try:
            self._listeners[event].remove(listener)
        except ValueError:
            pass
        return self

    def listeners(self, event: str) -> list[Callable[..., Any]]:
        return list(self._listeners.get(event, ()))

    def emit(self, event: str, *args: Any) -> bool:
        """Call every listener of ``event`` with ``args``.

        Returns:
            True if at least one listener was called
        """
        handlers = self.listeners(event)
        for handler in handlers:
            handler(*args)
        return bool(handlers)

    async def handle_connect(self, connection: Any) -> None:
        """Connect hook given to redis-py as ``redis_connect_func``.

        redis-py calls it each time a socket is opened, so it runs again
        after every successful reconnect.
        """
        self.emit(EVENT_CONNECT)
        try:
            await connection.on_connect()
        except RedisError as e:
            self.emit(EVENT_ERROR, e)
            raise
        self.emit(EVENT_READY)

    def handle_retry(self, attempt: int, delay_ms: int) -> None:
        self.emit(EVENT_RECONNECTING, attempt, delay_ms)

    async def execute_command(self, *args: Any, **options: Any) -> Any:
        try:
            return await self.client.execute_command(*args, **options)
        except RedisError as e:
            self.emit(EVENT_ERROR, e)
            raise

    async def connect(self) -> None:
        """Open the connection now by sending a PING."""
        try:
            await self.client.ping()
        except RedisError as e:
            self.emit(EVENT_ERROR, e)
            raise

    async def aclose(self) -> None:
        """Close the client, then emit ``close`` and ``end``.

        Calling it a second time does nothing.
        """
        if self._ended:
            return
        self._ended = True

        try:
            await self.client.aclose()
        except RedisError as e:
            logger.error(f"Redis close error for connection '{self.name}': {e}")
            self.emit(EVENT_ERROR, e)
        finally:
            self.emit(EVENT_CLOSE)
            self.emit(EVENT_END)

    async def close(self) -> None:
        await self.aclose()

    async def __aenter__(self) -> "ManagedConnection":
        return self

    async def __aexit__(self, exc_type, exc_value, traceback) -> None:
        await self.aclose()


__all__ = [
    "ManagedConnection",
]
