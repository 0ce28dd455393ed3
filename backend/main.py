# backend/main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text

from backend.config.logging_config import setup_logging
from backend.config.settings import get_settings
from backend.core.errors import register_exception_handlers
from backend.database.session import engine

# single entry point that carries every router under /api/*
from backend.gateway.gateway_router import api_router

logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"


def _database_ok() -> bool:
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return True
    except Exception:
        logger.exception("Database connection failed")
        return False


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("API is starting (env=%s)", get_settings().app_env)
    if _database_ok():
        logger.info("Database connected")
    yield
    logger.info("Shutting down")


def create_app() -> FastAPI:
    settings = get_settings()
    setup_logging(settings.log_level)

    app = FastAPI(
        title="Business Administration Dashboard API",
        description="Financial and sales administration endpoints under /api",
        version=API_VERSION,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "PATCH", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    register_exception_handlers(app)

    @app.get("/health")
    def health():
        status = {"status": "healthy", "service": "bm-admin-api", "version": API_VERSION}
        if _database_ok():
            status["database"] = "connected"
        else:
            status["database"] = "error"
            status["status"] = "degraded"
        return status

    app.include_router(api_router)

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "backend.main:app",
        host="0.0.0.0",
        port=settings.port,
        reload=settings.is_development,
        log_level=settings.log_level.lower(),
    )
