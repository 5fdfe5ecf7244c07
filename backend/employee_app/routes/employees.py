"""
Employee App Backend: Employee Route Handlers
================================================

What:  POST /employees (create), GET /employees (list), DELETE /employees/{id} (delete).
How:   Extracts the body or path parameter, delegates to EmployeeService,
       returns JSON (or plain text for delete).
Who:   Called by the bundled frontend and any HTTP client.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
from sqlalchemy.ext.asyncio import AsyncSession

from employee_app.database import get_db_session
from employee_app.schemas.employee import (
    EmployeeCreate,
    EmployeeResponse,
    ErrorResponse,
)
from employee_app.services.employee_service import employee_service

logger = logging.getLogger(__name__)

# ── Router Configuration ──────────────────────────────────────────────────
router = APIRouter(prefix="/employees", tags=["Employees"])


@router.post(
    "",
    response_model=EmployeeResponse,
    responses={
        200: {"description": "The inserted row", "model": EmployeeResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Create an employee",
)
async def create_employee(
    payload: Optional[EmployeeCreate] = None,
    db: AsyncSession = Depends(get_db_session),
) -> EmployeeResponse:
    """
    Insert one employee and return it, including the generated id.

    Example:
        POST /employees {"name": "Alice", "role": "Engineer"}
        → {"id": 1, "name": "Alice", "role": "Engineer"}

    A request without a body inserts a row of NULLs.
    """
    if payload is None:
        payload = EmployeeCreate()
    return await employee_service.create_employee(
        db=db,
        name=payload.name,
        role=payload.role,
    )


@router.get(
    "",
    response_model=List[EmployeeResponse],
    responses={
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="List all employees",
)
async def list_employees(
    db: AsyncSession = Depends(get_db_session),
) -> List[EmployeeResponse]:
    """Return every stored employee as a JSON array."""
    return await employee_service.list_employees(db=db)


@router.delete(
    "/{employee_id}",
    response_class=PlainTextResponse,
    responses={
        200: {"description": "Always 'Deleted', whether or not the row existed"},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Delete an employee by id",
)
async def delete_employee(
    employee_id: str,
    db: AsyncSession = Depends(get_db_session),
) -> PlainTextResponse:
    """
    Delete the employee with the given id.

    Args:
        employee_id: Raw path segment. It is converted to an integer by the
                     service; a value that is not an integer fails there and
                     gets the same generic 500 as any other database failure.
    """
    await employee_service.delete_employee(db=db, employee_id=employee_id)
    return PlainTextResponse("Deleted")
