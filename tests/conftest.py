"""Root conftest — shared fixtures: isolated metrics registry, call logger, app client.

Invariants:
    - Every test gets a fresh CollectorRegistry (no global REGISTRY collisions)
    - Call records go to a dedicated logger captured with caplog
"""

import logging

import pytest
from httpx import ASGITransport, AsyncClient
from prometheus_client import CollectorRegistry

from stringsvc.config import Settings
from stringsvc.infrastructure.metrics import create_instruments
from stringsvc.main import create_app

CALL_LOGGER = "tests.stringsvc.calls"


@pytest.fixture
def registry():
    return CollectorRegistry()


@pytest.fixture
def instruments(registry):
    return create_instruments(registry)


@pytest.fixture
def call_logger():
    return logging.getLogger(CALL_LOGGER)


@pytest.fixture
def sample(registry):
    """Read a sample value (None when never recorded) from the test registry."""

    def read(name: str, **labels: str) -> float | None:
        return registry.get_sample_value(f"my_group_string_service_{name}", labels)

    return read


@pytest.fixture
def test_settings():
    return Settings()


@pytest.fixture
def make_client(test_settings, registry, call_logger):
    """Build an AsyncClient for an app wired with an optional custom service."""

    def build(service=None, raise_app_exceptions: bool = True) -> AsyncClient:
        app = create_app(
            settings=test_settings,
            registry=registry,
            call_logger=call_logger,
            service=service,
        )
        return AsyncClient(
            transport=ASGITransport(
                app=app, raise_app_exceptions=raise_app_exceptions,
            ),
            base_url="http://test",
        )

    return build


@pytest.fixture
async def client(make_client):
    async with make_client() as c:
        yield c
