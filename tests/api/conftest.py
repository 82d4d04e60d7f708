"""Shared fixtures for HTTP tests.

Architecture:
- Real FastAPI app through TestClient (lifespan not started, no database)
- Handlers replaced through app.dependency_overrides
"""

from typing import Any

import pytest
from fastapi.testclient import TestClient

from src.core.result import Failure, Success
from src.main import app


class MockHandler:
    """Stand-in for any command or query handler.

    Returns a fixed result and records the messages it received.
    """

    def __init__(self, result: Success[Any] | Failure[Any]) -> None:
        self._result = result
        self.received: list[Any] = []

    async def handle(self, message: Any) -> Success[Any] | Failure[Any]:
        self.received.append(message)
        return self._result


class RaisingHandler:
    async def handle(self, message: Any) -> Any:
        raise RuntimeError("handler exploded")


@pytest.fixture
def client():
    """Provide test client."""
    return TestClient(app)


@pytest.fixture
def override_handler():
    """Install a handler for a container factory; overrides are cleared after the test.

    Usage:
        def test_something(client, override_handler):
            handler = override_handler(get_get_rental_handler, Success(value=dto))
            client.get(...)
            assert handler.received[0].rental_id == rental_id
    """
    installed: list[Any] = []

    def install(factory: Any, result: Any) -> Any:
        handler = result if hasattr(result, "handle") else MockHandler(result)
        app.dependency_overrides[factory] = lambda: handler
        installed.append(factory)
        return handler

    yield install

    for factory in installed:
        app.dependency_overrides.pop(factory, None)
