"""Shared test fixtures for portfolio_api."""

import pytest
from fastapi.testclient import TestClient

from portfolio_api.app.core.store import Store
from portfolio_api.app.main import create_app, create_portfolio_app


@pytest.fixture
def planner_store():
    """An empty id‑keyed store, as used by the planner service."""
    return Store(asset_key="id")


@pytest.fixture
def portfolio_store():
    """An empty ticker‑keyed store, as used by the portfolio service."""
    return Store(asset_key="ticker")


@pytest.fixture
def planner_client(planner_store):
    return TestClient(create_app(planner_store))


@pytest.fixture
def portfolio_client(portfolio_store):
    return TestClient(create_portfolio_app(portfolio_store))
