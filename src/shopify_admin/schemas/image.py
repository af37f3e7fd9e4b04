"""Image schema shared by products and collections."""
from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class Image(BaseModel):
    """An image attached to a product or collection."""

    id: int | None = None
    product_id: int | None = None
    position: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    width: int | None = None
    height: int | None = None
    src: str | None = None
    attachment: str | None = None
    alt: str | None = None
    filename: str | None = None
    variant_ids: list[int] | None = None

    model_config = ConfigDict(extra="allow")
