"""Typed async client for the Shopify Admin REST API."""

from .__version__ import __version__
from .core.errors import (
    PartialListError,
    RateLimitError,
    ResponseDecodingError,
    ResponseError,
    ShopifyError,
    ShopifyTransportError,
)
from .services.client import ClientConfig, ShopifyClient
from .services.pagination import Pagination, extract_pagination

__all__ = [
    "__version__",
    "ClientConfig",
    "ShopifyClient",
    "Pagination",
    "extract_pagination",
    "ShopifyError",
    "ResponseError",
    "RateLimitError",
    "ResponseDecodingError",
    "ShopifyTransportError",
    "PartialListError"
]
