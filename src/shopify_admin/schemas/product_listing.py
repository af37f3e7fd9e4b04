"""Product listing schemas.

A product listing is a product published to the calling sales channel; its
identifier travels as `product_id` on the wire.
"""
from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .image import Image


class ProductListing(BaseModel):
    """A product published to the current sales channel."""

    id: int | None = Field(None, alias="product_id")
    title: str | None = None
    body_html: str | None = None
    vendor: str | None = None
    product_type: str | None = None
    handle: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    published_at: datetime | None = None
    tags: str | None = None
    available: bool | None = None
    options: list[dict[str, Any]] | None = None
    variants: list[dict[str, Any]] | None = None
    images: list[Image] | None = None

    model_config = ConfigDict(extra="allow", populate_by_name=True)
