"""
Employee App Backend: Custom Exception Hierarchy
===================================================

What:  Application-specific exceptions carried from the service layer to the
       global exception handlers registered in main.py.
How:   Each exception carries a message and optional context dict. Handlers
       log the context server-side and return a generic JSON body.

Exception Hierarchy:
    EmployeeAppError (base)
    └── DatabaseError        → 500 Internal Server Error

No input validation error exists: the API accepts whatever the database
accepts, and type coercion failures keep FastAPI's 422.
"""

from typing import Any, Dict, Optional


class EmployeeAppError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
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


class DatabaseError(EmployeeAppError):
    """
    Raised when a database operation fails.

    When:    Connection lost, constraint violation, value too long for VARCHAR(100), etc.
    HTTP:    500 Internal Server Error

    The response message is always generic; the original error type and
    operation are kept in `context` for the server log.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
