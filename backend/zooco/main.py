"""
ZOOCO - Daily pet-care reminders
FastAPI Application Entry Point
"""
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from zooco.api import pets, reminders
from zooco.config import Settings, StorageBackend, settings as default_settings
from zooco.core.clock import Clock, utcnow
from zooco.core.errors import ZoocoError
from zooco.core.logging import logger
from zooco.core.timeslots import local_zone
from zooco.core.validation import describe_errors
from zooco.repositories.base import PetRepository, ReminderRepository
from zooco.services.pets import PetService
from zooco.services.reminders import ReminderService


def create_app(
    settings: Optional[Settings] = None,
    pet_repository: Optional[PetRepository] = None,
    reminder_repository: Optional[ReminderRepository] = None,
    clock: Clock = utcnow,
) -> FastAPI:
    """
    Build the application and its object graph.

    Repositories are created here from settings unless handed in, and the
    services built on them live on `app.state` for the routes to use.
    """
    settings = settings or default_settings
    engine = None

    if pet_repository is None or reminder_repository is None:
        if settings.storage_backend == StorageBackend.DATABASE:
            from zooco.database import create_engine, create_session_factory
            from zooco.repositories.sql import SqlPetRepository, SqlReminderRepository

            engine = create_engine(settings.database_url)
            session_factory = create_session_factory(engine)
            pet_repository = pet_repository or SqlPetRepository(session_factory, clock)
            reminder_repository = reminder_repository or SqlReminderRepository(
                session_factory, clock
            )
        else:
            from zooco.repositories.memory import (
                MemoryPetRepository,
                MemoryReminderRepository,
            )

            pet_repository = pet_repository or MemoryPetRepository({}, clock)
            reminder_repository = reminder_repository or MemoryReminderRepository({}, clock)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan events."""
        # Startup
        if engine is not None:
            from zooco.database import create_tables

            # In production, manage the schema with migrations
            await create_tables(engine)
        logger.info("ZOOCO API started with %s storage", settings.storage_backend.value)
        yield
        # Shutdown
        if engine is not None:
            await engine.dispose()

    app = FastAPI(
        title="ZOOCO API",
        description="Daily pet-care reminders",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.state.pet_service = PetService(pet_repository, clock)
    app.state.reminder_service = ReminderService(
        reminder_repository,
        pet_repository,
        clock,
        local_zone(settings.timezone),
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(ZoocoError)
    async def zooco_error_handler(request: Request, exc: ZoocoError):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        message = describe_errors(exc) or "Invalid request"
        logger.warning("Rejected %s %s: %s", request.method, request.url.path, message)
        return JSONResponse(status_code=400, content={"error": message})

    # Include routers
    app.include_router(pets.router, prefix="/api/pets", tags=["Pets"])
    app.include_router(reminders.router, prefix="/api/reminders", tags=["Reminders"])

    @app.get("/")
    async def root():
        """Health check endpoint."""
        return {"status": "healthy", "service": "ZOOCO API", "version": "1.0.0"}

    @app.get("/health")
    async def health_check():
        """Detailed health check."""
        return {
            "status": "healthy",
            "storage": settings.storage_backend.value,
            "timezone": settings.timezone,
        }

    return app


app = create_app()


def run() -> None:
    import uvicorn

    uvicorn.run(
        "zooco.main:app",
        host=default_settings.host,
        port=default_settings.port,
        reload=default_settings.debug,
    )
