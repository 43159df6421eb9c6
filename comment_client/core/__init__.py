from comment_client.core.config import Settings, settings
from comment_client.core.exceptions import RemoteStatusError, TransportError

__all__ = ["Settings", "settings", "TransportError", "RemoteStatusError"]
