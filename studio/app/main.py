from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.staticfiles import StaticFiles
from contextlib import asynccontextmanager
from typing import Optional
import logging

from studio import __version__
from studio.app.config import Settings, get_settings
from studio.app.exceptions import register_exception_handlers
from studio.app.logging_config import setup_logging
from studio.app.middleware import register_middleware
from studio.api.router import api_router
from studio.db.base import build_engine, build_session_factory, init_db
from studio.services.storage.local import LocalStorage

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    # Startup
    init_db(app.state.engine)
    logger.info(f"Starting {settings.APP_NAME} ({settings.ENVIRONMENT}), uploads in {settings.UPLOAD_DIR}")
    yield
    # Shutdown
    app.state.engine.dispose()
    logger.info("Shutting down...")


def create_application(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the application and the store objects it serves.

    Args:
        settings: Settings to use instead of the environment (tests)
    """
    settings = settings or get_settings()
    setup_logging(settings)

    application = FastAPI(
        title=settings.APP_NAME,
        debug=settings.DEBUG,
        version=__version__,
        lifespan=lifespan,
    )

    engine = build_engine(settings.SQLALCHEMY_DATABASE_URL)
    application.state.settings = settings
    application.state.engine = engine
    application.state.session_factory = build_session_factory(engine)
    application.state.storage = LocalStorage(settings.UPLOAD_DIR, url_prefix="/uploads")

    # Middleware
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    application.add_middleware(GZipMiddleware, minimum_size=1000)
    register_middleware(application)
    register_exception_handlers(application)

    # Routers
    application.include_router(api_router, prefix=settings.API_PREFIX)
    application.mount("/uploads", StaticFiles(directory=settings.UPLOAD_DIR), name="uploads")

    @application.get("/health")
    async def health_check():
        return {"status": "healthy", "environment": settings.ENVIRONMENT}

    return application


app = create_application()
