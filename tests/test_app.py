"""Tests for service startup and shutdown wiring."""

import pytest

import app as entrypoint
from redirector.database.memory import InMemoryMappingStore
from redirector.resolver import SlugResolver
from redirector.registrar import SlugRegistrar
from web_app import create_app


@pytest.mark.asyncio
async def test_lifespan_builds_components(config, logger):
    config = config.model_copy(update={"create_tables": True})
    app = create_app(config=config, logger=logger)
    app.state.logger = logger

    async with entrypoint.lifespan(app):
        assert isinstance(app.state.store, InMemoryMappingStore)
        assert isinstance(app.state.resolver, SlugResolver)
        assert isinstance(app.state.registrar, SlugRegistrar)
        assert app.state.resolver.default_url == config.default_url

        target = await app.state.resolver.resolve("anything")
        assert target.url == config.default_url


def test_main_exits_on_missing_config(monkeypatch, tmp_path):
    for name in ("DEFAULT_URL", "CONNECTION_STRING", "API_KEY"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)

    with pytest.raises(SystemExit) as excinfo:
        entrypoint.main()

    assert excinfo.value.code == 1


@pytest.fixture
def service_env(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("DEFAULT_URL", "https://example.com/home")
    monkeypatch.setenv("CONNECTION_STRING", "memory://")
    monkeypatch.setenv("API_KEY", "secret")
    monkeypatch.delenv("WORKERS", raising=False)
    return monkeypatch


@pytest.mark.asyncio
async def test_create_app_from_env(service_env):
    app = entrypoint.create_app_from_env()

    assert app.state.config.default_url == "https://example.com/home"
    async with app.router.lifespan_context(app):
        assert isinstance(app.state.store, InMemoryMappingStore)


def test_main_multiple_workers_uses_uvicorn_supervisor(service_env):
    service_env.setenv("WORKERS", "3")
    calls = []
    service_env.setattr(entrypoint.uvicorn, "run", lambda target, **kwargs: calls.append((target, kwargs)))

    entrypoint.main()

    assert len(calls) == 1
    target, kwargs = calls[0]
    assert target == "app:create_app_from_env"
    assert kwargs["factory"] is True
    assert kwargs["workers"] == 3


def test_main_single_worker_runs_in_process(service_env):
    servers = []

    class FakeServer:
        def __init__(self, config):
            self.config = config
            self.ran = False
            servers.append(self)

        def run(self):
            self.ran = True

    service_env.setattr(entrypoint.uvicorn, "Server", FakeServer)
    service_env.setattr(entrypoint.uvicorn, "run", lambda *a, **kw: pytest.fail("uvicorn.run called"))
    service_env.setattr(entrypoint.signal, "signal", lambda *args: None)

    entrypoint.main()

    assert len(servers) == 1
    assert servers[0].ran
    assert servers[0].config.app.router.lifespan_context is entrypoint.lifespan
