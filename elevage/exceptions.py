"""Custom exceptions for the elevage package."""


class ElevageError(Exception):
    """Base exception for elevage package."""
    pass


class ConfigurationError(ElevageError):
    """Configuration validation or loading error."""
    pass


class PersistenceError(ElevageError):
    """Save file could not be created or written."""
    pass
