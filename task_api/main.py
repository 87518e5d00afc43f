"""FastAPI application entry point."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from . import __version__
from .config import get_settings
from .logging_setup import setup_logging
from .routers import tasks
from .services import TaskService
from .storage import TaskStore

logger = logging.getLogger(__name__)


async def internal_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Answer unexpected exceptions with a generic 500."""
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content="Internal Server Error")


def create_app(service: TaskService | None = None) -> FastAPI:
    """Build the application around ``service`` (a fresh in-memory one by default)."""
    app = FastAPI(
        title="Task API",
        description="In-memory task management service",
        version=__version__,
    )
    app.state.task_service = service or TaskService(TaskStore())
    app.include_router(tasks.router)
    app.add_exception_handler(Exception, internal_error_handler)
    return app


app = create_app()


def main():
    """Run the application with uvicorn."""
    import uvicorn

    settings = get_settings()
    setup_logging(settings.log_level, settings.log_file)
    logger.info("Listening on http://%s:%d", settings.host, settings.port)

    uvicorn.run(
        "task_api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        log_config=None,
    )


if __name__ == "__main__":
    main()
