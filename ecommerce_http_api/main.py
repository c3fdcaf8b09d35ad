from __future__ import annotations

"""
Entry point for the e-commerce HTTP API.

This module creates the FastAPI application, wires up middleware and error
handlers, and mounts the user, product and order routers under a common
prefix.

Intended usage:
    uvicorn ecommerce_http_api.main:app --host 0.0.0.0 --port 8080
or:
    python -m ecommerce_http_api.main
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Dict, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ecommerce_http_api.config import Settings, get_config
from ecommerce_http_api.db.models import Base
from ecommerce_http_api.db.seed import seed_demo_data
from ecommerce_http_api.db.session import build_engine, build_session_factory, db_session
from ecommerce_http_api.errors import register_exception_handlers
from ecommerce_http_api.logging import get_logger
from ecommerce_http_api.logging.config import configure_logging
from ecommerce_http_api.routers import orders, products, users

logger = get_logger(__name__)


# ---------------------------------------------------------------------------
# Application factory
# ---------------------------------------------------------------------------


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application instance.

    Passing ``settings`` bypasses the environment entirely, which is how
    the test-suite points the app at an in-memory database.
    """
    settings = settings or get_config()
    configure_logging(settings)

    engine = build_engine(settings.database_url, echo=settings.database_echo)
    session_factory = build_session_factory(engine)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info(
            "app_starting",
            version=settings.version,
            env=settings.app_env.value,
            api_prefix=settings.api_prefix,
            database_url=engine.url.render_as_string(hide_password=True),
        )
        Base.metadata.create_all(bind=engine)

        if settings.seed_data:
            with db_session(session_factory) as db:
                added = seed_demo_data(db)
            logger.info("seed_complete", **added)

        yield

        logger.info("app_stopping")
        engine.dispose()

    docs_enabled = settings.docs_enabled
    app = FastAPI(
        title="E-commerce HTTP API",
        description="Users, products and orders with soft deletion.",
        version=settings.version,
        debug=settings.debug,
        lifespan=lifespan,
        openapi_url="/openapi.json" if docs_enabled else None,
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
    )
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = session_factory

    # CORS configuration
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Simple health check
    @app.get("/health", tags=["system"])
    async def health() -> Dict[str, str]:
        return {
            "status": "ok",
            "version": settings.version,
        }

    # Business routers
    app.include_router(users.router, prefix=settings.api_prefix)
    app.include_router(products.router, prefix=settings.api_prefix)
    app.include_router(orders.router, prefix=settings.api_prefix)

    return app


# ASGI application for uvicorn / gunicorn
app = create_app()


if __name__ == "__main__":
    import uvicorn

    cfg = get_config()
    uvicorn.run(
        "ecommerce_http_api.main:app",
        host=cfg.host,
        port=cfg.port,
        reload=cfg.reload,
    )
