import logging
from typing import Any, Dict, Optional

import httpx

from comment_client.core.exceptions import RemoteStatusError, TransportError


logger = logging.getLogger(__name__)


class HttpTransport:
    """Single-round-trip JSON calls against the sentiment service"""

    def __init__(self, client: httpx.AsyncClient, raise_for_status: bool = False):
        """
        Initialize the transport

        Args:
            client: Async HTTP client already bound to the service base URL
            raise_for_status: Treat non-2xx answers as failures instead of
                decoding their body like any other response
        """
        self.client = client
        self.raise_for_status = raise_for_status

    async def request(
        self,
        path: str,
        method: str = "GET",
        json: Optional[Dict[str, Any]] = None,
        files: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """
        Perform one call and return the decoded JSON body

        Args:
            path: Resource path relative to the base URL
            method: HTTP method
            json: Object to send as a JSON body
            files: Multipart form fields, in the httpx ``files`` format

        Returns:
            The parsed JSON body, whatever its status code
        """
        response = await self._send(path, method, json=json, files=files)
        try:
            body = response.json()
        except ValueError as e:
            logger.error(f"Non-JSON body from {method} {path}: {str(e)}")
            raise TransportError(f"Invalid JSON from {method} {path}") from e

        if self.raise_for_status and response.is_error:
            raise RemoteStatusError(response.status_code, body)
        return body

    async def send(self, path: str, method: str = "GET") -> None:
        """Perform one call without decoding the response body"""
        response = await self._send(path, method)
        if self.raise_for_status and response.is_error:
            raise RemoteStatusError(response.status_code)

    async def _send(self, path: str, method: str, **kwargs) -> httpx.Response:
        try:
            return await self.client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            logger.error(f"{method} {path} failed: {str(e)}")
            raise TransportError(f"{method} {path} failed: {str(e)}") from e
