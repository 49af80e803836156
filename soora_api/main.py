# soora_api/main.py
import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from soora_api import __version__
from soora_api.config.logging_config import configure_logging
from soora_api.config.settings import get_settings
from soora_api.database.session import engine, init_db
from soora_api.gateway.gateway_router import gateway_router
from soora_api.services.errors import register_exception_handlers

logger = logging.getLogger("soora_api")


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    logger.info("Soora API starting (region=%s, port=%s)", settings.region, settings.port)

    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        init_db()
        logger.info("Database connected")
    except SQLAlchemyError:
        logger.exception("Database connection failed")

    yield
    logger.info("Shutting down")


def create_app() -> FastAPI:
    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Soora API",
        description="E-commerce backend: catalog, profiles, addresses, orders and admin dashboard",
        version=__version__,
        debug=settings.debug,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    @app.get("/health")
    async def health():
        return {
            "status": "OK",
            "message": "Soora API is running",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "region": get_settings().region,
        }

    @app.get("/")
    async def root():
        return {
            "message": "Soora API",
            "version": __version__,
            "api_base": "/api",
            "docs": "/docs",
            "endpoints": {
                "health": "/health",
                "products": "/api/products",
                "users": "/api/users",
                "orders": "/api/orders",
                "delivery": "/api/delivery",
                "admin": "/api/admin",
            },
        }

    app.include_router(gateway_router)

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "soora_api.main:app",
        host="0.0.0.0",
        port=settings.port,
        reload=settings.debug,
        log_level="debug" if settings.debug else "info",
    )
