"""Slug resolution: map a slug to its redirect target."""

import logging
from dataclasses import dataclass
from typing import Optional

from .database.base import MappingStoreBase
from .database.models import Found, Missing, LookupFailed, LookupResult


PERMANENT_REDIRECT = 301


@dataclass(frozen=True)
class RedirectTarget:
    """Where to send the client."""

    url: str
    status_code: int = PERMANENT_REDIRECT
    fallback: bool = False


class SlugResolver:
    """Resolve slugs to redirect targets, falling back to the default URL.

    ``resolve`` never raises: a missing slug and any store failure both
    produce a redirect to the default URL, and the failure is only logged.
    """

    def __init__(
        self,
        store: MappingStoreBase,
        default_url: str,
        logger: Optional[logging.Logger] = None,
    ):
        """Initialize resolver.

        Args:
            store: Mapping store
            default_url: Redirect target for unknown slugs and failures
            logger: Optional logger
        """
        self.store = store
        self.default_url = default_url
        self.logger = logger or logging.getLogger(__name__)

    async def resolve(self, slug: str) -> RedirectTarget:
        """Resolve a slug.

        Args:
            slug: The slug from the request path

        Returns:
            RedirectTarget for the mapped URL or the default URL
        """
        try:
            result = await self.store.find_by_slug(slug)
        except Exception as e:
            self.logger.exception(f"Unexpected store error resolving {slug!r}: {e}")
            return self._fallback()

        return self._target_for(result)

    def _target_for(self, result: LookupResult) -> RedirectTarget:
        if isinstance(result, Found):
            self.logger.debug(f"Resolved {result.mapping.slug} -> {result.mapping.url}")
            return RedirectTarget(url=result.mapping.url)

        if isinstance(result, Missing):
            self.logger.info(f"Slug not found: {result.slug!r}, redirecting to default URL")
        elif isinstance(result, LookupFailed):
            self.logger.error(
                f"Lookup failed for {result.slug!r}, redirecting to default URL: {result.error}"
            )
        else:
            self.logger.error(f"Unexpected lookup result {result!r}, redirecting to default URL")

        return self._fallback()

    def _fallback(self) -> RedirectTarget:
        return RedirectTarget(url=self.default_url, fallback=True)
