"""Shared test fixtures: a throwaway SQLite pool with every table seeded."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from app.database import ConnectionPool, get_pool
from app.services.registry import build_services, get_services, initialize_all


@pytest.fixture
def pool(tmp_path):
    """A pool over a temporary SQLite file; closed after the test."""
    p = ConnectionPool(f"sqlite:///{tmp_path / 'logistics.db'}", pool_min=1, pool_max=3, pool_timeout=5)
    yield p
    p.shutdown(grace_period=0)


@pytest.fixture
def services(pool):
    """Every table service, with the full schema built and seeded."""
    s = build_services(pool)
    assert initialize_all(s)
    return s


@pytest.fixture
def client(pool, services):
    from fastapi.testclient import TestClient
    from app.main import app

    app.dependency_overrides[get_pool] = lambda: pool
    app.dependency_overrides[get_services] = lambda: services
    yield TestClient(app)
    app.dependency_overrides.clear()
