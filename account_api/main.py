"""
Account API - registration, login and role-guarded user endpoints
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import settings
from .db import init_db
from .logging_config import configure_logging
from .middleware import register_middleware
from .routes import admin, auth, health, users

configure_logging(settings.LOG_LEVEL, settings.LOG_DIR)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    """Initialize database on startup"""
    init_db()
    yield


def create_application() -> FastAPI:
    # Interactive docs only in development
    docs_enabled = settings.is_development
    app = FastAPI(
        title="Account API",
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None,
    )

    # CORS wraps the error boundary
    register_middleware(app)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(auth.router)
    app.include_router(users.router)
    app.include_router(admin.router)
    return app


app = create_application()
