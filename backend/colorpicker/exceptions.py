"""
Color Picker API - Custom Exception Hierarchy
===============================================

What:  Application-specific exceptions for the error scenarios of the API.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return `{"error": <message>}` JSON bodies with the right status code.
Who:   Raised by route handlers and services; caught by global handlers.

Exception Hierarchy:
    ColorPickerError (base)      → 500 Internal Server Error
    ├── ValidationError          → 422 Unprocessable Entity (missing field)
    ├── NotFoundError            → 404 Not Found (natural key has no row)
    └── DatabaseError            → 500 Internal Server Error (store failure)
"""

from typing import Any, Dict, Optional


class ColorPickerError(Exception):
    """
    Base exception for all Color Picker application errors.

    Attributes:
        message:  User-facing error description (returned in the API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(ColorPickerError):
    """
    Raised when a request body is missing a required field.

    Only presence is checked: the first missing field (in the declared order)
    determines the message. Returned as 422 Unprocessable Entity.

    Example response:
        {"error": "Expected format { name: <string> }, missing name!"}
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class NotFoundError(ColorPickerError):
    """
    Raised when a lookup by natural key yields no row.

    The message is chosen by the caller, since each endpoint words it
    differently (e.g. "Could not find project named X!" for GET versus
    "No existing project with name of X" for PATCH).
    """

    def __init__(
        self,
        message: str,
        resource: str = "resource",
        key: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["resource"] = resource
        if key is not None:
            ctx["key"] = key
        super().__init__(message=message, context=ctx)
        self.resource = resource
        self.key = key


class DatabaseError(ColorPickerError):
    """
    Raised when a database statement fails.

    Covers connectivity loss and constraint violations (duplicate natural key,
    unknown project_id). The client only ever sees a generic message; the
    original error type is kept in `context` for the server log.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
