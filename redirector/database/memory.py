"""In-process implementation of the mapping store.

Used by the test suite and for local runs with ``CONNECTION_STRING=memory://``.
Mappings live in a dict owned by the store; they are lost on restart and are
not shared between worker processes.
"""

import logging
from typing import Dict, Optional

from .base import MappingStoreBase
from .models import (
    Mapping,
    LookupResult,
    Found,
    Missing,
    InsertResult,
    Created,
    Conflict,
)


class InMemoryMappingStore(MappingStoreBase):
    """Dict-backed slug mapping storage."""

    def __init__(
        self,
        db_config: str = "memory://",
        logger: Optional[logging.Logger] = None,
    ):
        super().__init__(db_config)
        self.logger = logger or logging.getLogger(__name__)
        self._rows: Dict[str, str] = {}

    async def find_by_slug(self, slug: str) -> LookupResult:
        url = self._rows.get(slug)
        if url is None:
            return Missing(slug=slug)
        return Found(mapping=Mapping(slug=slug, url=url))

    async def insert_unique(self, slug: str, url: str) -> InsertResult:
        # Check-and-set without an await in between, so it is atomic on the loop.
        if slug in self._rows:
            self.logger.info(f"Slug already registered: {slug!r}")
            return Conflict(slug=slug)
        self._rows[slug] = url
        self.logger.info(f"Created mapping: {slug} -> {url}")
        return Created(mapping=Mapping(slug=slug, url=url))

    async def ensure_schema(self) -> None:
        pass

    async def health_check(self) -> bool:
        return True

    async def close(self) -> None:
        pass

    def __len__(self) -> int:
        return len(self._rows)
