"""Connection Cache Use Cases."""

from .usecase import ConnectionCacheUseCase
from .new import New

__all__ = ["ConnectionCacheUseCase", "New"]
