"""
Custom Exceptions.

Application-specific exception classes for consistent error handling.
"""


class ApplicationError(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, code: str = "SYS_INTERNAL_ERROR") -> None:
        self.message = message
        self.code = code
        super().__init__(self.message)


class StorageError(ApplicationError):
    """Raised when a persistence operation fails (disk, constraint violation)."""

    def __init__(self, message: str = "Storage error", operation: str | None = None) -> None:
        self.operation = operation
        super().__init__(message, code="SYS_STORAGE_ERROR")


class NavigationError(ApplicationError):
    """Raised when a route is unknown or malformed."""

    def __init__(self, message: str = "Invalid route") -> None:
        super().__init__(message, code="NAV_INVALID_ROUTE")
