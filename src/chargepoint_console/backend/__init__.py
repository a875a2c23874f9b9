"""Backend access: the shared HTTP client and response decoding."""

from .client import create_backend_client, get_backend_client
from .codec import adapter_for, decode_response, encode_body

__all__ = [
    "adapter_for",
    "create_backend_client",
    "decode_response",
    "encode_body",
    "get_backend_client",
]
