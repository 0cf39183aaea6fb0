"""Tests for slug resolution."""

import pytest

from redirector.resolver import SlugResolver, RedirectTarget

from .conftest import DEFAULT_URL


@pytest.mark.asyncio
class TestSlugResolver:
    """Test slug resolver."""

    async def test_registered_slugs_resolve_to_their_url(self, store, resolver, sample_mappings):
        for slug, url in sample_mappings.items():
            await store.insert_unique(slug, url)

        for slug, url in sample_mappings.items():
            target = await resolver.resolve(slug)
            assert target == RedirectTarget(url=url, status_code=301, fallback=False)

    async def test_unknown_slug_resolves_to_default(self, store, resolver):
        await store.insert_unique("docs", "https://example.com/documentation")

        target = await resolver.resolve("missing")

        assert target.url == DEFAULT_URL
        assert target.status_code == 301
        assert target.fallback

    async def test_store_failure_resolves_to_default(self, unreachable_store, logger):
        resolver = SlugResolver(unreachable_store, DEFAULT_URL, logger=logger)

        target = await resolver.resolve("docs")

        assert target.url == DEFAULT_URL
        assert target.status_code == 301
        assert target.fallback

    async def test_store_exception_resolves_to_default(self, exploding_store, logger):
        resolver = SlugResolver(exploding_store, DEFAULT_URL, logger=logger)

        target = await resolver.resolve("docs")

        assert target.url == DEFAULT_URL
        assert target.fallback

    async def test_failure_is_logged(self, unreachable_store, caplog):
        resolver = SlugResolver(unreachable_store, DEFAULT_URL)

        with caplog.at_level("ERROR"):
            await resolver.resolve("docs")

        assert "connection refused" in caplog.text

    async def test_resolve_is_idempotent(self, store, resolver):
        await store.insert_unique("docs", "https://example.com/documentation")

        first = await resolver.resolve("docs")
        second = await resolver.resolve("docs")

        assert first == second
        assert len(store) == 1

    async def test_mapped_url_not_revalidated(self, store, resolver):
        """Whatever the store holds is returned as-is."""
        await store.insert_unique("odd", "relative/path")

        target = await resolver.resolve("odd")

        assert target.url == "relative/path"
        assert not target.fallback
