"""Tests that the server handles concurrent registration and redirects correctly.

Uniqueness under concurrency comes from the store alone; these tests assert
that many simultaneous requests for the same slug produce exactly one winner.
"""

import asyncio

import pytest

from redirector.errors import SlugConflictError

from .conftest import API_KEY, DEFAULT_URL


@pytest.mark.asyncio
class TestConcurrentRequests:
    """Prove the server handles many simultaneous requests."""

    async def test_concurrent_registration_same_slug(self, client, store):
        """N parallel POSTs for one new slug: one 201, N-1 conflicts."""
        concurrency = 20
        tasks = [
            client.post("/race", json={"apiKey": API_KEY, "url": f"https://example.com/{i}"})
            for i in range(concurrency)
        ]
        responses = await asyncio.gather(*tasks, return_exceptions=True)

        statuses = []
        for i, r in enumerate(responses):
            if isinstance(r, Exception):
                pytest.fail(f"Request {i} raised: {r}")
            statuses.append(r.status_code)

        assert statuses.count(201) == 1
        assert statuses.count(400) == concurrency - 1
        for r in responses:
            if r.status_code == 400:
                assert r.json()["message"] == "Slug already registered"

        winner = next(r for r in responses if r.status_code == 201).json()
        redirect = await client.get("/race", follow_redirects=False)
        assert redirect.headers["location"] == winner["url"]
        assert len(store) == 1

    async def test_concurrent_registrar_calls_same_slug(self, registrar):
        concurrency = 30
        results = await asyncio.gather(
            *[registrar.register("race", f"https://example.com/{i}", API_KEY) for i in range(concurrency)],
            return_exceptions=True,
        )

        registered = [r for r in results if not isinstance(r, Exception)]
        conflicts = [r for r in results if isinstance(r, SlugConflictError)]
        assert len(registered) == 1
        assert len(conflicts) == concurrency - 1

    async def test_concurrent_registration_distinct_slugs(self, client, store):
        concurrency = 30
        tasks = [
            client.post(f"/page-{i}", json={"apiKey": API_KEY, "url": f"https://example.com/page_{i}"})
            for i in range(concurrency)
        ]
        responses = await asyncio.gather(*tasks)

        assert all(r.status_code == 201 for r in responses)
        assert len(store) == concurrency

    async def test_concurrent_redirect_requests(self, client, store):
        """Many concurrent GET /{slug} requests, hits and misses, all redirect."""
        await store.insert_unique("target", "https://example.com/redirect-target")

        tasks = (
            [client.get("/target", follow_redirects=False) for _ in range(20)]
            + [client.get("/nowhere", follow_redirects=False) for _ in range(20)]
        )
        responses = await asyncio.gather(*tasks, return_exceptions=True)

        for i, r in enumerate(responses):
            if isinstance(r, Exception):
                pytest.fail(f"Request {i} raised: {r}")
            assert r.status_code == 301, f"Request {i}: status {r.status_code}"
            expected = "https://example.com/redirect-target" if i < 20 else DEFAULT_URL
            assert r.headers.get("location") == expected
