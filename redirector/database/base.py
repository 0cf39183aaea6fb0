"""Abstract base class for mapping store implementations."""

from abc import ABC, abstractmethod

from .models import LookupResult, InsertResult


class MappingStoreBase(ABC):
    """Abstract base class for slug mapping storage.

    Implementations never raise from ``find_by_slug`` or ``insert_unique``;
    every outcome, including driver and connection errors, is returned as a
    typed result.
    """

    def __init__(self, db_config: str):
        """Initialize store.

        Args:
            db_config: Store connection string
        """
        self.db_config = db_config

    @abstractmethod
    async def find_by_slug(self, slug: str) -> LookupResult:
        """Look up the mapping for a slug.

        Args:
            slug: The slug to lookup

        Returns:
            Found, Missing, or LookupFailed on any store error
        """
        pass

    @abstractmethod
    async def insert_unique(self, slug: str, url: str) -> InsertResult:
        """Insert a new mapping atomically.

        When several callers insert the same slug concurrently, exactly one
        gets Created and the others get Conflict.

        Args:
            slug: The slug to register
            url: The destination URL

        Returns:
            Created, Conflict if the slug exists, or InsertFailed
        """
        pass

    @abstractmethod
    async def ensure_schema(self) -> None:
        """Create the mappings table if it does not exist."""
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        """Check if the store is reachable.

        Returns:
            True if healthy, False otherwise
        """
        pass

    @abstractmethod
    async def close(self) -> None:
        """Close store connections."""
        pass
