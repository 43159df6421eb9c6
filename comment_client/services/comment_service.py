import logging
from typing import Any, Union

from comment_client.schemas.sentiment import BatchUploadResult, Comment
from comment_client.transport import HttpTransport


logger = logging.getLogger(__name__)

CommentId = Union[int, str]


class CommentClient:
    """Create, read, update, delete and batch-upload comments"""

    def __init__(self, transport: HttpTransport):
        """
        Initialize the comment client

        Args:
            transport: Transport bound to the sentiment service
        """
        self.transport = transport

    async def create(self, text: str) -> Comment:
        """
        Submit a new comment for classification

        Args:
            text: Comment text, sent as given

        Returns:
            The service's answer, usually prediction and probability only
        """
        logger.info("Creating comment")
        data = await self.transport.request("/sentiment", method="POST", json={"text": text})
        return Comment.model_validate(data)

    async def read(self, comment_id: CommentId) -> Comment:
        logger.info(f"Fetching comment {comment_id}")
        data = await self.transport.request(f"/sentiment/{comment_id}")
        return Comment.model_validate(data)

    async def update(self, comment_id: CommentId, text: str) -> Comment:
        logger.info(f"Updating comment {comment_id}")
        data = await self.transport.request(
            f"/sentiment/{comment_id}", method="PUT", json={"text": text}
        )
        return Comment.model_validate(data)

    async def delete(self, comment_id: CommentId) -> None:
        logger.info(f"Deleting comment {comment_id}")
        await self.transport.send(f"/sentiment/{comment_id}", method="DELETE")

    async def upload_batch(self, file: Any) -> BatchUploadResult:
        """
        Upload a file of comments for bulk classification

        Args:
            file: Anything httpx accepts as a multipart file: a binary file
                object or a ``(filename, content, content_type)`` tuple

        Returns:
            Per-row outcomes of the upload
        """
        logger.info("Uploading comment batch")
        data = await self.transport.request("/sentiment/lote", method="POST", files={"file": file})
        return BatchUploadResult.model_validate(data)
