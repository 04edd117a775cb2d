"""Backend-specific exceptions."""


class AdapterError(Exception):
    """Base exception for search backend errors."""


class ConnectionError(AdapterError):
    """Raised when the backend cannot be reached."""


class QueryError(AdapterError):
    """Raised when a search fails or returns incomplete results."""
