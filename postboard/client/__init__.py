from .api import PostsClient
from .errors import ClientError, DecodeError, TransportError

__all__ = ["PostsClient", "ClientError", "DecodeError", "TransportError"]
