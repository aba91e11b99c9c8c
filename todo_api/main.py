"""Main FastAPI application for the todo API."""

from __future__ import annotations

import logging
import uuid
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, Response, status
from fastapi.responses import PlainTextResponse

from todo_api.api.routes import router as api_router
from todo_api.database import InMemoryDatabase
from todo_api.errors import TodoNotFoundError
from todo_api.logging_utils import configure_logging, reset_request_id, set_request_id
from todo_api.settings import get_settings

logger = logging.getLogger(__name__)


def create_app(database: Optional[InMemoryDatabase] = None) -> FastAPI:
    """Build an application bound to its own in-memory database."""
    settings = get_settings()
    configure_logging(settings.log_level)
    if database is None:
        database = InMemoryDatabase(name=settings.database_name)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Starting %s with in-memory database %s", settings.title, database.name)
        yield
        logger.info("Shutting down %s", settings.title)

    app = FastAPI(
        title=settings.title,
        description="A minimal todo item API over an in-memory store",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.database = database

    @app.middleware("http")
    async def request_id_middleware(request: Request, call_next):
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        request_token = set_request_id(request_id)
        try:
            response = await call_next(request)
        finally:
            reset_request_id(request_token)
        response.headers["X-Request-ID"] = request_id
        return response

    @app.exception_handler(TodoNotFoundError)
    async def todo_not_found_handler(request: Request, exc: TodoNotFoundError) -> Response:
        return Response(status_code=status.HTTP_404_NOT_FOUND)

    @app.get("/", response_class=PlainTextResponse)
    def root() -> str:
        return "Hello World"

    app.include_router(api_router)
    return app


app = create_app()


def main() -> None:
    """Serve the application with uvicorn."""
    import uvicorn

    settings = get_settings()
    logger.info("Starting on %s:%s", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
