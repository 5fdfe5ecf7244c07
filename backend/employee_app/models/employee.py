"""
Employee App Backend: Employee SQLAlchemy Model
==================================================

What:  ORM model representing the `employees` table.
Who:   Used by EmployeeService for insert/select/delete and by the schema bootstrap.

Table Design:
    - id:   SERIAL primary key on PostgreSQL; assigned by the database sequence,
            immutable and never reused (AUTOINCREMENT on SQLite for the same guarantee)
    - name: VARCHAR(100), nullable, no uniqueness constraint
    - role: VARCHAR(100), nullable

Lifecycle:
    Created on POST /employees, never updated, removed by DELETE /employees/{id}.
"""

from typing import Optional

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from employee_app.database import Base


class Employee(Base):
    """A single employee record: generated id plus free-form name and role."""

    __tablename__ = "employees"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    name: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)

    role: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)

    # SQLite would otherwise reuse the id of a deleted last row
    __table_args__ = {"sqlite_autoincrement": True}

    def __repr__(self) -> str:
        """Developer-friendly string representation for debugging."""
        return f"<Employee(id={self.id}, name={self.name!r}, role={self.role!r})>"
