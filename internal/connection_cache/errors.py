"""Module-specific errors for connection_cache domain."""


class ErrInvalidConnectionName(TypeError):
    """Raised when connect_by_name gets a name that is not a string."""
    pass


__all__ = [
    "ErrInvalidConnectionName",
]
