# src/shopify_admin/services/__init__.py
"""Admin API client and resource services."""

from .base import ReadOnlyResourceService, ResourceService
from .client import ClientConfig, RequestMetrics, ShopifyClient, load_client_config
from .collections import SmartCollectionService
from .metafields import MetafieldService
from .pagination import Pagination, collect_all, extract_pagination, iterate_pages
from .payments import PaymentsTransactionService, PayoutService
from .products import ProductListingService, ProductService

__all__ = [
    "ClientConfig",
    "RequestMetrics",
    "ShopifyClient",
    "load_client_config",
    "ReadOnlyResourceService",
    "ResourceService",
    "MetafieldService",
    "ProductService",
    "ProductListingService",
    "SmartCollectionService",
    "PayoutService",
    "PaymentsTransactionService",
    "Pagination",
    "extract_pagination",
    "iterate_pages",
    "collect_all"
]
