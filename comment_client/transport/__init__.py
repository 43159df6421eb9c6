from comment_client.transport.http_transport import HttpTransport

__all__ = ["HttpTransport"]
