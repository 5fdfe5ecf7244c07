"""
Employee App Backend: Employee Service
=========================================

What:  Create, list and delete operations over the `employees` table.
How:   Each operation issues exactly one SQL statement through the session it
       is given, and translates SQLAlchemy failures into DatabaseError.
Who:   Called by the /employees route handlers.

Design:
    EmployeeService holds no state; the per-request AsyncSession is passed
    into every call, so tests can hand it a mock session or a session bound
    to a throwaway SQLite database.
"""

import logging
from typing import List, Optional, Union

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from employee_app.exceptions import DatabaseError
from employee_app.models.employee import Employee
from employee_app.schemas.employee import EmployeeResponse

logger = logging.getLogger(__name__)


class EmployeeService:
    """
    Record logic for employees.

    Responsibilities:
        - create_employee(): INSERT one row, return it with its generated id
        - list_employees():  SELECT every row
        - delete_employee(): DELETE by id, silently ignoring unknown ids
    """

    async def create_employee(
        self,
        db: AsyncSession,
        name: Optional[str] = None,
        role: Optional[str] = None,
    ) -> EmployeeResponse:
        """
        Insert a new employee and return the stored row.

        No duplicate detection and no validation: whatever the database
        rejects (e.g. a name longer than 100 characters on PostgreSQL)
        surfaces as DatabaseError.

        Args:
            db:   Async database session
            name: Employee name, stored as given (None → NULL)
            role: Employee role, stored as given (None → NULL)

        Returns:
            EmployeeResponse including the database-assigned id

        Raises:
            DatabaseError: The INSERT or its commit failed
        """
        employee = Employee(name=name, role=role)
        try:
            db.add(employee)
            await db.flush()  # INSERT ... RETURNING id
            await db.commit()
        except SQLAlchemyError as e:
            logger.error("Database error creating employee: %s", str(e))
            raise DatabaseError(
                context={"operation": "create", "error_type": type(e).__name__},
            )

        logger.info("Employee created: id=%s", employee.id)
        return EmployeeResponse.model_validate(employee)

    async def list_employees(self, db: AsyncSession) -> List[EmployeeResponse]:
        """
        Return every employee row.

        Rows are ordered by primary key, i.e. insertion order.

        Raises:
            DatabaseError: The SELECT failed
        """
        try:
            result = await db.execute(select(Employee).order_by(Employee.id))
            employees = list(result.scalars().all())
        except SQLAlchemyError as e:
            logger.error("Database error listing employees: %s", str(e), exc_info=True)
            raise DatabaseError(
                context={"operation": "list", "error_type": type(e).__name__},
            )

        return [EmployeeResponse.model_validate(employee) for employee in employees]

    async def delete_employee(self, db: AsyncSession, employee_id: Union[int, str]) -> int:
        """
        Delete the employee with the given id.

        Deleting an id that does not exist is a no-op, not an error. An id
        that cannot be bound as an integer key is rejected like any other
        database failure.

        Args:
            db:          Async database session
            employee_id: Primary key of the row to remove, as int or raw path text

        Returns:
            Number of rows removed (0 or 1)

        Raises:
            DatabaseError: The id is not an integer, or the DELETE or its commit failed
        """
        try:
            key = int(employee_id)
        except (TypeError, ValueError):
            logger.error("Rejected non-integer employee id %r", employee_id)
            raise DatabaseError(
                context={
                    "operation": "delete",
                    "employee_id": employee_id,
                    "error_type": "InvalidIdentifier",
                },
            )

        try:
            result = await db.execute(delete(Employee).where(Employee.id == key))
            await db.commit()
        except SQLAlchemyError as e:
            logger.error("Database error deleting employee %s: %s", employee_id, str(e))
            raise DatabaseError(
                context={
                    "operation": "delete",
                    "employee_id": employee_id,
                    "error_type": type(e).__name__,
                },
            )

        deleted = result.rowcount or 0
        if deleted:
            logger.info("Employee deleted: id=%s", employee_id)
        else:
            logger.info("Delete requested for unknown employee id=%s (no-op)", employee_id)
        return deleted


employee_service = EmployeeService()
