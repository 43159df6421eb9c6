from comment_client.schemas.sentiment.batch import BatchUploadResult
from comment_client.schemas.sentiment.comment import Comment
from comment_client.schemas.sentiment.statistics import StatisticsSummary

__all__ = ["Comment", "StatisticsSummary", "BatchUploadResult"]
