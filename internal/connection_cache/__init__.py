"""Connection Cache Domain: one Redis connection per host:port or name."""

from .interface import IConnectionCacheUseCase
from .errors import ErrInvalidConnectionName
from .usecase.new import New as NewConnectionCacheUseCase

__all__ = [
    # Interface
    "IConnectionCacheUseCase",
    # Errors
    "ErrInvalidConnectionName",
    # Factory
    "NewConnectionCacheUseCase",
]
