"""Factory function for creating connection cache use case."""

from typing import Any, Callable, Optional

from config.config import Config
from pkg.logger.logger import Logger
from pkg.redis.factory import ConnectionFactory
from .usecase import ConnectionCacheUseCase


def New(
    config: Optional[Config] = None,
    logger: Optional[Logger] = None,
    client_class: Optional[Callable[..., Any]] = None,
) -> ConnectionCacheUseCase:
    """Create a new connection cache use case instance.

    Args:
        config: Loaded configuration (defaults apply when omitted)
        logger: Logger instance (optional)
        client_class: Redis client class (default: redis.asyncio.Redis)

    Returns:
        ConnectionCacheUseCase instance with an empty registry
    """
    config = config or Config()
    factory = ConnectionFactory(client_class=client_class, logger=logger)

    return ConnectionCacheUseCase(
        factory=factory,
        defaults=config.redis.default_options(),
        name_prefix=config.cache.name_prefix,
        logger=logger,
        log_connection_events=config.cache.log_events,
    )


__all__ = ["New"]
