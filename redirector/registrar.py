"""Slug registration under API key control."""

import logging
from typing import Optional

from .database.base import MappingStoreBase
from .database.models import Mapping, Created, Conflict, InsertFailed
from .common.credentials import api_key_matches
from .common.validators import is_valid_url, is_valid_slug
from .errors import (
    UnauthorizedError,
    ValidationError,
    SlugConflictError,
    InternalError,
)


class SlugRegistrar:
    """Create new slug mappings.

    Steps run strictly in order and stop at the first failure:
    authorization, input validation, then a single unique insert.
    """

    def __init__(
        self,
        store: MappingStoreBase,
        api_key: str,
        logger: Optional[logging.Logger] = None,
    ):
        """Initialize registrar.

        Args:
            store: Mapping store
            api_key: Configured registration secret
            logger: Optional logger
        """
        self.store = store
        self._api_key = api_key
        self.logger = logger or logging.getLogger(__name__)

    async def register(self, slug: str, url: str, supplied_api_key: Optional[str]) -> Mapping:
        """Register a new slug.

        Args:
            slug: Slug taken from the request path
            url: Destination URL
            supplied_api_key: API key sent by the caller

        Returns:
            The created Mapping

        Raises:
            UnauthorizedError: API key mismatch (nothing else is attempted)
            ValidationError: Empty slug or malformed URL
            SlugConflictError: Slug already registered
            InternalError: Any other store failure
        """
        if not api_key_matches(supplied_api_key, self._api_key):
            self.logger.warning(f"Rejected registration of {slug!r}: wrong API key")
            raise UnauthorizedError()

        is_valid, error = is_valid_slug(slug)
        if not is_valid:
            self.logger.info(f"Rejected registration: {error}")
            raise ValidationError(error)

        is_valid, error = is_valid_url(url)
        if not is_valid:
            self.logger.info(f"Rejected registration of {slug!r}: {error}")
            raise ValidationError(error)

        try:
            result = await self.store.insert_unique(slug, url)
        except Exception as e:
            self.logger.exception(f"Unexpected store error registering {slug!r}: {e}")
            raise InternalError(details={"slug": slug}) from e

        if isinstance(result, Created):
            self.logger.info(f"Registered slug: {slug} -> {url}")
            return result.mapping

        if isinstance(result, Conflict):
            raise SlugConflictError(details={"slug": slug})

        if isinstance(result, InsertFailed):
            self.logger.error(f"Registration of {slug!r} failed: {result.error}")
        else:
            self.logger.error(f"Unexpected insert result {result!r} for {slug!r}")
        raise InternalError(details={"slug": slug})
