"""Pytest configuration and shared fixtures."""

import random

import pytest
from fastapi.testclient import TestClient

from image_relay.core import PromptEnhancer, ServiceFallbackDispatcher
from image_relay.utils.config import DEFAULT_SUFFIXES


@pytest.fixture
def rng():
    """Seeded randomness source for deterministic enhancement."""
    return random.Random(1234)


@pytest.fixture
def enhancer(rng):
    return PromptEnhancer(rng=rng)


@pytest.fixture
def make_dispatcher(enhancer):
    """Build a dispatcher over the given services."""
    def factory(services, **kwargs):
        return ServiceFallbackDispatcher(enhancer=enhancer, services=services, **kwargs)
    return factory


@pytest.fixture
def suffixes():
    return list(DEFAULT_SUFFIXES)


@pytest.fixture
def client():
    """Test client with the real lifespan (config/services.yaml or defaults)."""
    from image_relay.main import app

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def use_dispatcher():
    """Swap the dispatcher the /ai endpoints see."""
    from image_relay.main import app
    from image_relay.api.ai import get_dispatcher

    def install(dispatcher):
        app.dependency_overrides[get_dispatcher] = lambda: dispatcher
        return dispatcher

    yield install

    app.dependency_overrides.clear()
