import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from tortoise import Tortoise

from .core import config
from .core.errors import register_exception_handlers
from .core.logging_config import configure_logging
from .features.auth.router import router as auth_router
from .features.volunteers.router import router as volunteers_router
from .features.crises.router import router as crises_router
from .features.reports.router import router as reports_router

configure_logging(config.LOG_LEVEL, config.LOG_NAMESPACES)
logger = logging.getLogger("relief_admin.main")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Handles startup and shutdown events, such as connecting to the database.
    """
    logger.info("Starting application...")
    await Tortoise.init(config=config.TORTOISE_ORM)
    logger.info("Tortoise-ORM has been initialized.")

    yield

    await Tortoise.close_connections()
    logger.info("Tortoise-ORM connections have been closed.")


app = FastAPI(
    title="Relief Admin API",
    description="Back office for volunteers, crises and relief finance reports.",
    version="0.1.0",
    lifespan=lifespan,
)
register_exception_handlers(app)


@app.get("/")
async def read_root(request: Request):
    """
    Root endpoint for the API.
    """
    client_host = request.client.host if request.client else "unknown client"
    logger.info(f"Root endpoint '/' accessed by {client_host}")
    return {"message": "Welcome to the Relief Admin API!"}


app.include_router(auth_router, prefix="/api/v1")
app.include_router(volunteers_router, prefix="/api/v1")
app.include_router(crises_router, prefix="/api/v1")
app.include_router(reports_router, prefix="/api/v1")
