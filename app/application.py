"""FastAPI application factory."""

import asyncio
import logging
from contextlib import asynccontextmanager

from fastapi import APIRouter, FastAPI

from app.api import create_api_router
from app.config import get_settings
from app.services.seeder import SemesterSeeder
from app.storage.manager import close_store, init_store
from app.utils.exception_handlers import register_exception_handlers

logger = logging.getLogger(__name__)

# Create main router
router = APIRouter()


@router.get("/")
async def root():
    """Root endpoint."""
    return {"message": "Study Portal API", "version": get_settings().api_version}


@router.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown events."""
    # Startup
    store = await init_store()
    if store.name == "remote" and get_settings().seed_defaults:
        await app.state.semester_seeder.ensure_defaults(store)
    yield
    # Shutdown
    await close_store()


def create_app() -> FastAPI:
    """Create and configure FastAPI application."""
    settings = get_settings()
    app = FastAPI(
        title=settings.api_title,
        description="Semester, subject and notes storage for the student portal",
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )

    # Process-wide coordination shared by every SemesterService
    app.state.semester_seeder = SemesterSeeder()
    app.state.semester_order_lock = asyncio.Lock()

    register_exception_handlers(app)

    # Setup routes
    app.include_router(router)
    app.include_router(create_api_router())

    return app
