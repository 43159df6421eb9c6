from typing import Optional

from pydantic import Field

from comment_client.schemas.sentiment.base import ServiceAnswer


class StatisticsSummary(ServiceAnswer):
    """Positive/negative share over the most recent comments"""

    positive_percent: Optional[float] = Field(None, alias="positivo")
    negative_percent: Optional[float] = Field(None, alias="negativo")
