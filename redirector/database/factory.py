"""Select a mapping store implementation from the connection string."""

import logging
from typing import Optional
from urllib.parse import urlparse

from .base import MappingStoreBase
from .memory import InMemoryMappingStore
from .postgres import PostgresMappingStore


POSTGRES_SCHEMES = {"postgres", "postgresql"}
MEMORY_SCHEMES = {"memory"}


def create_store(config, logger: Optional[logging.Logger] = None) -> MappingStoreBase:
    """Build the store named by ``config.connection_string``.

    Args:
        config: Configuration instance
        logger: Optional logger

    Returns:
        A store instance (no connection is opened yet)

    Raises:
        ValueError: If the connection string scheme is not supported
    """
    scheme = urlparse(config.connection_string).scheme.lower()

    if scheme in POSTGRES_SCHEMES:
        return PostgresMappingStore(
            db_config=config.connection_string,
            pool_min_size=config.pool_min_size,
            pool_max_size=config.pool_max_size,
            command_timeout_seconds=config.command_timeout_seconds,
            logger=logger,
        )

    if scheme in MEMORY_SCHEMES:
        return InMemoryMappingStore(db_config=config.connection_string, logger=logger)

    raise ValueError(f"Unsupported CONNECTION_STRING scheme: {scheme!r}")
