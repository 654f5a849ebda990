"""
Catalog Exceptions

Domain errors raised by the service layer.

The services never build HTTP responses themselves. They raise one of
these exceptions and the handler registered in app.main turns it into a
JSON response with the matching status code:

- InvalidInput -> 400 Bad Request
- NotFound     -> 404 Not Found
- Conflict     -> 409 Conflict
"""

from typing import Any, Optional


class CatalogError(Exception):
    """Base exception for catalog operations."""

    status_code: int = 400
    error_code: str = "CATALOG_ERROR"

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class InvalidInput(CatalogError):
    """Malformed or empty search input."""

    status_code = 400
    error_code = "INVALID_INPUT"


class NotFound(CatalogError):
    """The requested book (by id or ISBN) does not exist."""

    status_code = 404
    error_code = "NOT_FOUND"


class Conflict(CatalogError):
    """Another book already holds the requested ISBN."""

    status_code = 409
    error_code = "CONFLICT"


__all__ = ["CatalogError", "InvalidInput", "NotFound", "Conflict"]
