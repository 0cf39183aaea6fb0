#!/usr/bin/env python3
"""
Main entry point for the slug redirect service.

Concurrency: The server handles multiple connections simultaneously via async I/O
(FastAPI + asyncpg connection pool). Set WORKERS > 1 for multi-process scaling
across CPU cores (each worker has its own DB pool).

Usage:
    python app.py

Environment variables:
    DEFAULT_URL - Redirect target for unknown slugs (required)
    CONNECTION_STRING - postgresql://... or memory:// (required)
    API_KEY - Secret required to register slugs (required)
    CREATE_TABLES - Set to true to create the urls table at startup
    PORT - Port to listen on
    WORKERS - Number of uvicorn worker processes (default 1)
    LOG_LEVEL - Logging level
"""

import signal
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from pydantic import ValidationError

from config import load_config
from redirector.database.factory import create_store
from redirector.resolver import SlugResolver
from redirector.registrar import SlugRegistrar
from redirector.common.logging_config import setup_logging
from web_app import create_app


APP_FACTORY = "app:create_app_from_env"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown."""
    config = app.state.config
    logger = app.state.logger

    logger.info("Starting slug redirect service...")

    store = create_store(config, logger=logger)
    if config.create_tables:
        await store.ensure_schema()

    app.state.store = store
    app.state.resolver = SlugResolver(store, config.default_url, logger=logger)
    app.state.registrar = SlugRegistrar(store, config.api_key, logger=logger)

    logger.info("Service started successfully")

    yield

    logger.info("Shutting down slug redirect service...")
    await store.close()
    logger.info("Service stopped")


def build_app(config, logger) -> FastAPI:
    """Create the app with the startup/shutdown lifespan attached."""
    app = create_app(config=config, logger=logger)
    app.state.logger = logger
    app.router.lifespan_context = lifespan
    return app


def create_app_from_env() -> FastAPI:
    """App factory run inside each uvicorn worker process when WORKERS > 1.

    Every worker loads its own config and logging and opens its own pool.
    """
    config = load_config()
    logger = setup_logging(
        level=config.log_level,
        log_file=config.log_file,
        json_format=config.log_json,
    )
    return build_app(config, logger)


def main():
    """Main entry point."""
    try:
        config = load_config()
    except ValidationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        sys.exit(1)

    logger = setup_logging(
        level=config.log_level,
        log_file=config.log_file,
        json_format=config.log_json,
    )

    logger.info("Slug Redirect Service")
    logger.info(f"Configuration: {config.safe_dump()}")

    # Fail fast on an unsupported connection string
    try:
        create_store(config, logger=logger)
    except ValueError as e:
        logger.error(str(e))
        sys.exit(1)

    if config.workers > 1:
        # uvicorn only spawns worker processes from an import string; its
        # supervisor handles SIGINT/SIGTERM for the children.
        logger.info(f"Starting {config.workers} workers on {config.host}:{config.port}")
        uvicorn.run(
            APP_FACTORY,
            factory=True,
            host=config.host,
            port=config.port,
            workers=config.workers,
            log_level=config.log_level.lower(),
            access_log=True,
        )
        return

    app = build_app(config, logger)

    # Single process: async I/O handles many concurrent connections.
    uvicorn_config = uvicorn.Config(
        app,
        host=config.host,
        port=config.port,
        log_level=config.log_level.lower(),
        access_log=True,
    )

    server = uvicorn.Server(uvicorn_config)

    def handle_signal(signum, frame):
        logger.info(f"Received signal {signum}, initiating graceful shutdown...")
        server.should_exit = True

    signal.signal(signal.SIGINT, handle_signal)
    signal.signal(signal.SIGTERM, handle_signal)

    try:
        logger.info(f"Starting server on {config.host}:{config.port}")
        server.run()
    except Exception as e:
        logger.error(f"Server error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
