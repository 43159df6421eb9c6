import json
from functools import partial
from unittest.mock import Mock

import httpx
import pytest
from fastapi.testclient import TestClient

from comment_client.core.config import Settings
from comment_client.main import app
from comment_client.routers.v1.actions import (
    get_orchestrator_factory,
    get_region_store,
    get_settings,
)
from comment_client.services import CommentClient, StatisticsClient
from comment_client.transport import HttpTransport
from comment_client.ui import MappingInputSource, NoticeCollector, RegionStore, UIOrchestrator

BASE_URL = "http://sentiment.test/api"


class ServiceStub:
    """Stands in for the sentiment service: records requests, replays canned answers"""

    def __init__(self):
        self.requests = []
        self.responses = []

    def answer(self, *responses):
        self.responses.extend(responses)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        response = self.responses.pop(0) if self.responses else httpx.Response(200, json={})
        if isinstance(response, Exception):
            raise response
        return response

    def json_body(self, index: int = 0):
        return json.loads(self.requests[index].content)


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def service_stub():
    return ServiceStub()


@pytest.fixture
def http_client(service_stub):
    return httpx.AsyncClient(base_url=BASE_URL, transport=httpx.MockTransport(service_stub))


@pytest.fixture
def transport(http_client):
    return HttpTransport(client=http_client)


@pytest.fixture
def mock_comment_client():
    return Mock(spec=CommentClient)


@pytest.fixture
def mock_stats_client():
    return Mock(spec=StatisticsClient)


@pytest.fixture
def region_store():
    return RegionStore()


@pytest.fixture
def notifier():
    return NoticeCollector()


@pytest.fixture
def make_orchestrator(mock_comment_client, mock_stats_client, region_store, notifier):
    """Build an orchestrator reading the given control values"""
    def _make(values=None, **kwargs):
        return UIOrchestrator(
            comment_client=mock_comment_client,
            stats_client=mock_stats_client,
            source=MappingInputSource(values),
            sink=region_store,
            notifier=kwargs.pop("notifier", notifier),
            **kwargs
        )
    return _make


@pytest.fixture
def test_client(mock_comment_client, mock_stats_client, region_store):
    """Create a test client with mocked dependencies"""
    # Store original dependencies
    original_dependencies = app.dependency_overrides.copy()

    factory = partial(
        UIOrchestrator,
        comment_client=mock_comment_client,
        stats_client=mock_stats_client,
        sink=region_store,
        quick_stats_sizes=[10, 50, 100]
    )
    app.dependency_overrides[get_orchestrator_factory] = lambda: factory
    app.dependency_overrides[get_region_store] = lambda: region_store
    app.dependency_overrides[get_settings] = lambda: Settings(QUICK_STATS_SIZES=[10, 50, 100])

    # Create test client
    client = TestClient(app)

    yield client

    # Restore original dependencies
    app.dependency_overrides = original_dependencies
