from comment_client.services.comment_service import CommentClient
from comment_client.services.stats_service import StatisticsClient

__all__ = ["CommentClient", "StatisticsClient"]
