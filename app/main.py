from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.v1.router import api_router_v1
from app.core.config import Settings, settings as default_settings
from app.core.logging import logger, setup_logging
from app.database import build_engine, build_session_factory, init_models


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or default_settings
    setup_logging(settings.LOG_LEVEL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        engine = build_engine(
            settings.DATABASE_URL,
            echo=settings.ENVIRONMENT == "development",
            pool_pre_ping=settings.DATABASE_POOL_PRE_PING,
        )
        app.state.engine = engine
        app.state.session_factory = build_session_factory(engine)

        # In production, manage the schema with migrations
        if settings.ENVIRONMENT == "development":
            await init_models(engine)
            logger.info("Tables created (development only)")

        logger.info("%s %s started", settings.PROJECT_NAME, settings.PROJECT_VERSION)
        try:
            yield
        finally:
            await engine.dispose()
            logger.info("Database engine disposed")

    app = FastAPI(
        title=settings.PROJECT_NAME,
        description="Customer and reservation records for the Lunchly restaurant",
        openapi_url=f"{settings.API_V1_STR}/openapi.json",
        version=settings.PROJECT_VERSION,
        lifespan=lifespan,
    )

    if settings.BACKEND_CORS_ORIGINS:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=[str(origin) for origin in settings.BACKEND_CORS_ORIGINS],
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    app.include_router(api_router_v1, prefix=settings.API_V1_STR)

    @app.get("/health", tags=["Health Check"])
    async def health_check():
        return {"status": "healthy", "environment": settings.ENVIRONMENT}

    return app


app = create_app()
