"""
Shared pytest fixtures and configuration for all tests.
"""

import os
import random
from collections.abc import Generator
from typing import Any
from unittest.mock import MagicMock

import pytest
import strawberry
from fastapi import FastAPI
from fastapi.testclient import TestClient

from dicegraph.dice import DiceRoller
from dicegraph.store import MessageStore


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def message_store() -> MessageStore:
    """A fresh, empty message store."""
    return MessageStore()


@pytest.fixture
def dice_roller() -> DiceRoller:
    """A dice roller over its own seeded source."""
    return DiceRoller(random.Random(20240101))


@pytest.fixture
def graphql_context(message_store: MessageStore, dice_roller: DiceRoller) -> dict[str, Any]:
    """Context dict as built for each GraphQL request, minus the request."""
    return {"request": MagicMock(), "store": message_store, "dice": dice_roller}


@pytest.fixture
def mock_info(graphql_context: dict[str, Any]) -> MagicMock:
    """Create a mock GraphQL info object carrying the store and the roller."""
    info = MagicMock(spec=strawberry.Info)
    info.context = graphql_context
    return info


@pytest.fixture
def app(message_store: MessageStore, dice_roller: DiceRoller) -> FastAPI:
    from dicegraph.api.app import create_app

    return create_app(message_store=message_store, dice_roller=dice_roller)


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    with TestClient(app) as test_client:
        yield test_client


# Test markers
def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: mark test as unit test")
    config.addinivalue_line("markers", "integration: mark test as integration test")
