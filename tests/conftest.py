"""
Test Configuration Module
"""

import logging
from typing import Any, AsyncGenerator
from unittest.mock import MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from header_relay.main import app


class RecordingEmitter:
    """ResponseEmitter that records every envelope instead of writing it"""

    def __init__(self):
        self.calls: list[tuple[int, Any]] = []

    def emit(self, status_code: int, payload: Any) -> None:
        self.calls.append((status_code, payload))


@pytest.fixture
def emitter() -> RecordingEmitter:
    """Recording response emitter"""
    return RecordingEmitter()


@pytest.fixture
def mock_logger() -> MagicMock:
    """Logger double for asserting on diagnostics"""
    return MagicMock(spec=logging.Logger)


@pytest_asyncio.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    """HTTP client bound to the FastAPI app"""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides = {}
