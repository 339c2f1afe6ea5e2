from __future__ import annotations

from typing import Any, Mapping, Protocol, Union, runtime_checkable, TYPE_CHECKING

if TYPE_CHECKING:
    from pkg.redis.connection import ManagedConnection
    from pkg.redis.type import ConnectionOptions

Options = Union["ConnectionOptions", Mapping[str, Any], None]


@runtime_checkable
class IConnectionCacheUseCase(Protocol):
    @property
    def connections(self) -> Mapping[str, "ManagedConnection"]:
        ...

    def connect(self, options: Options = None) -> "ManagedConnection":
        ...

    def connect_by_name(self, name: str, options: Options = None) -> "ManagedConnection":
        ...

    def reset(self) -> None:
        ...

    async def close_all(self) -> None:
        ...


__all__ = ["IConnectionCacheUseCase", "Options"]
