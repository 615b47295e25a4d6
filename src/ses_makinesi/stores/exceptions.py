"""Custom exceptions for page stores."""


class StoreError(Exception):
    """Base exception for all page store errors."""

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class StoreConnectionError(StoreError):
    """Raised when the database connection cannot be opened or is lost."""

    pass


class QueryError(StoreError):
    """Raised when the database rejects a query."""

    def __init__(self, message: str, statement: str | None = None, *args, **kwargs):
        self.statement = statement
        super().__init__(message, *args, **kwargs)
