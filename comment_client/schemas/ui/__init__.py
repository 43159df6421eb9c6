from comment_client.schemas.ui.action_response import ActionResponse
from comment_client.schemas.ui.requests import (
    CreateCommentRequest,
    CustomStatsRequest,
    DeleteCommentRequest,
    SearchCommentRequest,
    UpdateCommentRequest,
)

__all__ = [
    "ActionResponse",
    "CreateCommentRequest",
    "SearchCommentRequest",
    "UpdateCommentRequest",
    "DeleteCommentRequest",
    "CustomStatsRequest",
]
