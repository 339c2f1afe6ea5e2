"""Interface for cached Redis connections."""

from typing import Any, Callable, Optional, Protocol, runtime_checkable

from .type import ConnectionOptions


@runtime_checkable
class IConnection(Protocol):
    """Protocol for a Redis connection that reports its lifecycle.

    Listeners are plain callables invoked synchronously, in subscription order.
    """

    options: ConnectionOptions
    name: Optional[str]

    def on(self, event: str, listener: Callable[..., Any]) -> "IConnection":
        """Subscribe to a lifecycle event."""
        ...

    def once(self, event: str, listener: Callable[..., Any]) -> "IConnection":
        """Subscribe to the next occurrence of a lifecycle event."""
        ...

    def off(self, event: str, listener: Callable[..., Any]) -> "IConnection":
        """Remove a listener."""
        ...

    def emit(self, event: str, *args: Any) -> bool:
        """Invoke listeners for an event."""
        ...

    async def connect(self) -> None:
        """Open the connection now instead of on first use."""
        ...

    async def aclose(self) -> None:
        """Close the connection and signal termination."""
        ...

    async def close(self) -> None:
        """Alias of aclose."""
        ...


__all__ = ["IConnection"]
