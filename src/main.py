"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from src.api import history, tasks, users
from src.config import get_settings
from src.database import init_db

settings = get_settings()

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    """Set the root log level from settings."""
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown events."""
    configure_logging()
    if settings.create_tables_on_startup:
        init_db()
        logger.info("Database tables created")
    yield


app = FastAPI(
    title="Task Handler API",
    description="Kanban task lists with per-category ordering and activity history",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials="*" not in settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routers
app.include_router(users.router)
app.include_router(tasks.router)
app.include_router(history.router)


@app.get("/", response_class=PlainTextResponse)
async def root():
    return "Task Handler is running"


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "environment": settings.environment}
