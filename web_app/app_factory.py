"""FastAPI application factory."""

from typing import Optional

from fastapi import FastAPI

from redirector.database.base import MappingStoreBase
from redirector.resolver import SlugResolver
from redirector.registrar import SlugRegistrar

from .api import api_router
from .web import web_router
from .errors import register_exception_handlers
from .middleware.logging import LoggingMiddleware


def create_app(
    config,
    store: Optional[MappingStoreBase] = None,
    resolver: Optional[SlugResolver] = None,
    registrar: Optional[SlugRegistrar] = None,
    logger=None,
) -> FastAPI:
    """Create and configure FastAPI application.

    When a store is given, a resolver and registrar are built from it and the
    config unless passed explicitly. Without a store the caller is expected
    to fill ``app.state`` in a lifespan handler.

    Args:
        config: Configuration instance
        store: Mapping store instance
        resolver: Optional resolver instance
        registrar: Optional registrar instance
        logger: Optional logger for components and request logging

    Returns:
        Configured FastAPI app
    """
    app = FastAPI(
        title="Slug Redirect",
        description="Redirects short slugs to registered URLs",
        version="1.0.0",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json",
    )

    if store is not None:
        resolver = resolver or SlugResolver(store, config.default_url, logger=logger)
        registrar = registrar or SlugRegistrar(store, config.api_key, logger=logger)

    # Store instances in app state for access in routes
    app.state.config = config
    app.state.store = store
    app.state.resolver = resolver
    app.state.registrar = registrar

    app.add_middleware(LoggingMiddleware, logger=logger)
    register_exception_handlers(app)

    # API routes first so /api/... is never taken for a slug
    app.include_router(api_router, prefix="/api", tags=["API"])
    app.include_router(web_router, tags=["Slugs"])

    return app
