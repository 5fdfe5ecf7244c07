"""
Employee App Backend: Pydantic Request/Response Schemas
=========================================================

What:  Pydantic models defining the API contract between frontend and backend.
How:   FastAPI validates request bodies against these models, serializes
       responses through them, and generates the OpenAPI docs from them.

Validation:
    Only type coercion is applied. `name` and `role` are optional strings
    (numbers are converted to their string form);
    empty or oversized values are passed through to the database unchanged.
"""

from typing import Optional

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class EmployeeCreate(BaseModel):
    """
    What:  Body of POST /employees.
    Why optional: A missing field is stored as NULL, matching the column definition.
    """
    name: Optional[str] = Field(default=None, description="Employee name (up to 100 characters)")
    role: Optional[str] = Field(default=None, description="Employee role (up to 100 characters)")

    model_config = {"coerce_numbers_to_str": True}


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class EmployeeResponse(BaseModel):
    """
    What:  Full representation of a stored employee row.
    Who:   Returned by POST /employees (single) and GET /employees (array items).
    """
    id: int = Field(description="Database-assigned identifier")
    name: Optional[str] = Field(default=None, description="Employee name")
    role: Optional[str] = Field(default=None, description="Employee role")

    model_config = {"from_attributes": True}


class ErrorResponse(BaseModel):
    """
    What:  Error body returned by the global exception handlers.

    Example:
        {
            "error": "server_error",
            "message": "An internal error occurred. Please try again later.",
            "request_id": "1a2b3c4d"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Health check response: service status plus database connectivity."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
