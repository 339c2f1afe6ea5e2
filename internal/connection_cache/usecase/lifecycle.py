from typing import Optional

from pkg.logger.logger import Logger
from pkg.redis.connection import ManagedConnection
from pkg.redis.constant import *
from .registry import ConnectionRegistry


def add_events(
    conn: ManagedConnection,
    registry: ConnectionRegistry,
    logger: Optional[Logger] = None,
) -> ManagedConnection:
    """Drop ``conn`` from ``registry`` once it emits ``end``."""

    def on_end() -> None:
        removed = registry.remove_by_name(conn.name)
        if logger and removed:
            logger.info(f"[ConnectionCache] Connection ended, removed: {', '.join(removed)}")

    conn.on(EVENT_END, on_end)
    return conn


def log_events(conn: ManagedConnection, logger: Logger) -> ManagedConnection:
    """Log every lifecycle event of ``conn``."""
    label = f"[Redis {conn.name or conn.options.host}]"

    conn.on(EVENT_CONNECT, lambda: logger.debug(f"{label} Connected"))
    conn.on(EVENT_READY, lambda: logger.info(f"{label} Ready"))
    conn.on(EVENT_ERROR, lambda error: logger.error(f"{label} Error: {error}"))
    conn.on(
        EVENT_RECONNECTING,
        lambda attempt, delay_ms: logger.warning(
            f"{label} Reconnecting, attempt {attempt} in {delay_ms}ms"
        ),
    )
    conn.on(EVENT_CLOSE, lambda: logger.debug(f"{label} Closed"))
    conn.on(EVENT_END, lambda: logger.info(f"{label} Ended"))
    return conn


__all__ = ["add_events", "log_events"]
