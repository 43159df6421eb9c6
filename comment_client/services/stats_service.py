import logging
from typing import Union

from comment_client.schemas.sentiment import StatisticsSummary
from comment_client.transport import HttpTransport


logger = logging.getLogger(__name__)


class StatisticsClient:
    """Aggregate sentiment statistics over the most recent comments"""

    def __init__(self, transport: HttpTransport):
        self.transport = transport

    async def stats(self, sample_size: Union[int, str]) -> StatisticsSummary:
        """
        Fetch positive/negative percentages

        Args:
            sample_size: Number of recent comments to aggregate, passed
                through to the service as given

        Returns:
            Positive and negative percentages
        """
        logger.info(f"Fetching stats: {sample_size}")
        data = await self.transport.request(f"/sentiment/stats/{sample_size}")
        return StatisticsSummary.model_validate(data)
