import httpx
import pytest

from comment_client.schemas.sentiment import StatisticsSummary
from comment_client.services import StatisticsClient

pytestmark = pytest.mark.anyio


class TestStatisticsClient:
    @pytest.fixture
    def stats_client(self, transport):
        return StatisticsClient(transport=transport)

    @pytest.mark.parametrize("sample_size", [10, "10"])
    async def test_stats_path(self, stats_client, service_stub, sample_size):
        await stats_client.stats(sample_size)

        assert len(service_stub.requests) == 1
        assert service_stub.requests[0].method == "GET"
        assert service_stub.requests[0].url.path == "/api/sentiment/stats/10"

    async def test_stats_result(self, stats_client, service_stub):
        service_stub.answer(httpx.Response(200, json={"positivo": 62.5, "negativo": 37.5}))

        result = await stats_client.stats(8)

        assert isinstance(result, StatisticsSummary)
        assert result.positive_percent == 62.5
        assert result.negative_percent == 37.5

    async def test_sample_size_is_passed_through(self, stats_client, service_stub):
        service_stub.answer(httpx.Response(400, json={"error": "A quantidade deve ser maior que zero"}))

        result = await stats_client.stats("abc")

        assert service_stub.requests[0].url.path == "/api/sentiment/stats/abc"
        assert result.positive_percent is None

    async def test_wrong_field_types_read_as_missing(self, stats_client, service_stub):
        # Arrange
        service_stub.answer(httpx.Response(500, json={"positivo": "n/a", "negativo": None}))

        # Act
        result = await stats_client.stats(10)

        # Assert
        assert result.positive_percent is None
        assert result.negative_percent is None

    async def test_non_object_body(self, stats_client, service_stub):
        service_stub.answer(httpx.Response(200, json=[]))

        result = await stats_client.stats(10)

        assert result == StatisticsSummary()
