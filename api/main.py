"""FastAPI application for the GolfBuddy API."""

import logging
import sys
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.config import Settings
from api.middleware import RequestLoggingMiddleware
from database.connection import db
from database.db_manager import DatabaseManager

logger = logging.getLogger(__name__)

# Parameter locations FastAPI prefixes to validation error paths.
_LOCATIONS = {"body", "query", "path", "header"}


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("pymongo").setLevel(logging.WARNING)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Connect to MongoDB on startup, close on shutdown."""
    settings: Settings = app.state.settings
    database = await db.initialize(settings.mongo_uri, settings.db_name)
    app.state.db_manager = DatabaseManager(database)
    yield
    await db.close()


def describe_validation_errors(errors) -> str:
    """Turn pydantic errors into one message naming the offending fields."""
    fields = []
    for err in errors:
        if err.get("type") == "json_invalid":
            return "Invalid request body"
        name = ".".join(str(p) for p in err.get("loc", ()) if p not in _LOCATIONS)
        if name and name not in fields:
            fields.append(name)
    if not fields:
        return "Invalid request body"
    return "Missing or invalid fields: " + ", ".join(fields)


def register_exception_handlers(app: FastAPI) -> None:
    """Every error response is {"message": ...}; internals are never exposed."""

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError):
        message = describe_validation_errors(exc.errors())
        logger.info("Rejected %s %s: %s", request.method, request.url.path, message)
        return JSONResponse(status_code=400, content={"message": message})

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"message": "Internal server error"})


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings.from_env()
    setup_logging(settings.log_level)
    settings.warn_if_insecure()

    app = FastAPI(
        title="GolfBuddy API",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLoggingMiddleware)
    register_exception_handlers(app)

    from api.routers import auth, competitions, courses, users
    app.include_router(courses.router, tags=["courses"])
    app.include_router(competitions.router, prefix="/competitions", tags=["competitions"])
    app.include_router(users.router, prefix="/users", tags=["users"])
    app.include_router(auth.router, prefix="/auth", tags=["auth"])

    @app.get("/")
    async def root():
        return {"ok": True, "name": "GolfBuddy API"}

    @app.get("/health")
    async def health():
        healthy = await db.health_check()
        return {"status": "ok" if healthy else "degraded", "database": healthy}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=app.state.settings.host, port=app.state.settings.port)
