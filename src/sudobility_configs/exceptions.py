"""Custom exception classes for sudobility-configs library."""


class ChainConfigError(Exception):
    """Base exception for chain configuration errors."""

    pass


class ChainNotFoundError(ChainConfigError, ValueError):
    """Raised when a chain identifier is not in the registry."""

    pass
