from typing import Any, Callable, Optional

import redis.asyncio as aioredis
from loguru import logger as _loguru_logger
from redis.asyncio.retry import Retry
from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import TimeoutError as RedisTimeoutError

from pkg.logger.logger import Logger
from .backoff import RetryStrategyBackoff, retry_strategy
from .connection import ManagedConnection
from .type import ConnectionOptions


class ConnectionFactory:
    """Builds lazily connecting Redis clients wrapped in ManagedConnection.

    The built client never opens a socket on construction. Reconnect delays
    come from ``strategy`` through redis-py's own retry loop.

    Args:
        client_class: Callable accepting redis-py client keyword arguments
            (default: redis.asyncio.Redis)
        strategy: Maps reconnect attempt to delay in milliseconds
        logger: Optional Logger, loguru's default logger otherwise
    """

    def __init__(
        self,
        client_class: Optional[Callable[..., Any]] = None,
        strategy: Callable[[int], int] = retry_strategy,
        logger: Optional[Logger] = None,
    ):
        self.client_class = client_class or aioredis.Redis
        self.strategy = strategy
        self.logger = logger or _loguru_logger

    def client_kwargs(self, conn: ManagedConnection) -> dict[str, Any]:
        """Keyword arguments passed to the client class for ``conn``."""
        options = conn.options
        backoff = RetryStrategyBackoff(self.strategy, on_retry=conn.handle_retry)

        kwargs: dict[str, Any] = {
            "host": options.host,
            "port": options.port,
            "db": options.db,
            "username": options.username,
            "password": options.password,
            "retry": Retry(backoff, options.max_retries),
            "retry_on_error": [RedisConnectionError, RedisTimeoutError],
            "redis_connect_func": conn.handle_connect,
        }
        kwargs.update(options.extra)
        return kwargs

    def create(self, options: ConnectionOptions) -> ManagedConnection:
        """Build a new connection for already normalized ``options``."""
        conn = ManagedConnection(options)
        conn.attach(self.client_class(**self.client_kwargs(conn)))
        self.logger.debug(
            f"Built Redis client for {options.host}:{options.port} db={options.db}"
        )
        return conn


__all__ = [
    "ConnectionFactory",
]
