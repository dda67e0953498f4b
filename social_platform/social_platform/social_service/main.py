"""
Social Service - accounts, follow relationships and direct messages
"""
from contextlib import asynccontextmanager
from typing import Optional
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import uvicorn

from .auth import TokenIssuer
from .config import Settings, settings as default_settings
from .db import create_db_engine, create_session_factory, init_db
from .errors import ServiceError
from .routes import health, users

SERVICE_NAME = "Social Service"
SERVICE_VERSION = "1.0.0"

# Configure logging
logging.basicConfig(
    level=getattr(logging, default_settings.LOG_LEVEL.upper()),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the application with its own engine, session factory and token issuer.

    Nothing is shared between apps, so tests can create isolated instances
    against separate databases.
    """
    settings = settings or default_settings
    engine = create_db_engine(settings.DATABASE_URL, echo=settings.DB_ECHO)

    @asynccontextmanager
    async def lifespan(_app: FastAPI):
        """Initialize database on startup, release connections on shutdown"""
        init_db(engine)
        yield
        engine.dispose()

    app = FastAPI(
        title=SERVICE_NAME,
        description="Accounts, follow relationships and direct messages",
        version=SERVICE_VERSION,
        lifespan=lifespan
    )
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)
    app.state.token_issuer = TokenIssuer(
        settings.JWT_SECRET,
        algorithm=settings.JWT_ALGORITHM,
        expire_minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(ServiceError)
    async def service_error_handler(request: Request, exc: ServiceError):
        return JSONResponse(status_code=exc.status_code, content={"message": exc.message})

    # Include routers
    app.include_router(users.router, prefix=settings.API_PREFIX)
    app.include_router(health.router)

    @app.get("/")
    async def root():
        """Root endpoint"""
        return {
            "service": SERVICE_NAME,
            "version": SERVICE_VERSION,
            "status": "running"
        }

    return app


app = create_app()


def run() -> None:
    """Serve the default application with uvicorn."""
    logger.info(f"Starting server on port {default_settings.PORT}")
    uvicorn.run(
        app,
        host=default_settings.HOST,
        port=default_settings.PORT,
        log_level=default_settings.LOG_LEVEL.lower(),
    )
