from typing import Any, Optional


class TransportError(Exception):
    """Raised when a call to the sentiment service cannot produce a JSON body"""


class RemoteStatusError(TransportError):
    """Raised for non-2xx answers when status checking is enabled"""

    def __init__(self, status_code: int, body: Optional[Any] = None):
        self.status_code = status_code
        self.body = body
        super().__init__(f"Sentiment service answered HTTP {status_code}: {body}")
