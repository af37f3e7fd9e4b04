# src/shopify_admin/schemas/product.py
"""Product-related Pydantic schemas."""
from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict

from .common import ListOptions
from .image import Image
from .metafield import Metafield


class ProductStatus(str, Enum):
    """Publication status of a product."""

    ACTIVE = "active"
    ARCHIVED = "archived"
    DRAFT = "draft"


class Product(BaseModel):
    """A product in the shop catalogue."""

    id: int | None = None
    title: str | None = None
    body_html: str | None = None
    vendor: str | None = None
    product_type: str | None = None
    handle: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    published_at: datetime | None = None
    published_scope: str | None = None
    tags: str | None = None
    status: ProductStatus | None = None
    template_suffix: str | None = None
    options: list[dict[str, Any]] | None = None
    variants: list[dict[str, Any]] | None = None
    image: Image | None = None
    images: list[Image] | None = None
    metafields_global_title_tag: str | None = None
    metafields_global_description_tag: str | None = None
    metafields: list[Metafield] | None = None
    admin_graphql_api_id: str | None = None

    model_config = ConfigDict(extra="allow")


class ProductListOptions(ListOptions):
    """Filters accepted by `products.json`."""

    collection_id: int | None = None
    product_type: str | None = None
    vendor: str | None = None
    handle: str | None = None
    published_at_min: datetime | None = None
    published_at_max: datetime | None = None
    published_status: str | None = None
    presentment_currencies: str | None = None
    status: list[ProductStatus] | None = None
