# src/shopify_admin/schemas/__init__.py
"""
Pydantic schemas for API resources and request options.

These schemas define the wire structure of Admin API payloads and the typed
query options each endpoint accepts.
"""

from .collection import Rule, SmartCollection, SmartCollectionListOptions
from .common import CountOptions, GetOptions, ListOptions, QueryOptions
from .image import Image
from .metafield import Metafield, MetafieldType
from .payout import Payout, PayoutsListOptions, PayoutStatus
from .product import Product, ProductListOptions, ProductStatus
from .product_listing import ProductListing
from .transaction import (
    PaymentsTransaction,
    PaymentsTransactionsListOptions,
    PaymentsTransactionType,
)

__all__ = [
    "CountOptions", "GetOptions", "ListOptions", "QueryOptions",
    "Image",
    "Metafield", "MetafieldType",
    "Payout", "PayoutsListOptions", "PayoutStatus",
    "PaymentsTransaction", "PaymentsTransactionsListOptions", "PaymentsTransactionType",
    "Product", "ProductListOptions", "ProductStatus",
    "ProductListing",
    "Rule", "SmartCollection", "SmartCollectionListOptions",
]
