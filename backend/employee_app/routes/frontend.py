"""
Employee App Backend: Frontend Static Files
==============================================

What:  Serves the pre-built frontend: GET / returns index.html, and any path
       not claimed by an API route is looked up in the frontend directory.
How:   An explicit root route plus a Starlette StaticFiles mount at "/".
       Files are returned byte-for-byte with a content type guessed from
       the file name.

Ordering:
    The mount matches every path, so `mount_frontend()` must be called after
    all API routers are included.
"""

import logging
from pathlib import Path

from fastapi import FastAPI
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles

logger = logging.getLogger(__name__)


def mount_frontend(app: FastAPI, directory: str) -> None:
    """
    Register the root route and the static mount for `directory`.

    Args:
        app:       Application to register on
        directory: Folder containing index.html and its assets
    """
    frontend_dir = Path(directory).resolve()
    index_file = frontend_dir / "index.html"

    @app.get("/", include_in_schema=False)
    async def index() -> FileResponse:
        return FileResponse(index_file)

    app.mount("/", StaticFiles(directory=str(frontend_dir)), name="frontend")
    logger.debug("Serving frontend from %s", frontend_dir)
