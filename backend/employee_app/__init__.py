"""
Employee App Backend: Application Package Initializer
=======================================================

What: Marks the `employee_app` directory as a Python package.
Who:  Used by uvicorn (`employee_app.main:app`), pytest, and the console script.

Architecture Note:
    The backend follows the same thin layering for every request:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Record Logic)     │  ← One SQL statement per operation
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Database handle on app.state
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
