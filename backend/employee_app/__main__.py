"""
Employee App Backend: Command-Line Entry Point
=================================================

What:  Runs the API under uvicorn on port 3000.
Who:   `python -m employee_app` and the `employee-app` console script.
"""

import uvicorn

from employee_app.config import settings
from employee_app.main import SERVER_PORT


def run() -> None:
    """Start uvicorn serving employee_app.main:app on BACKEND_HOST:3000."""
    uvicorn.run(
        "employee_app.main:app",
        host=settings.backend_host,
        port=SERVER_PORT,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
