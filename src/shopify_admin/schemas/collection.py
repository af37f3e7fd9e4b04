"""Smart collection schemas."""
from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from .common import ListOptions
from .image import Image
from .metafield import Metafield


class Rule(BaseModel):
    """A condition a product must satisfy to join a smart collection."""

    column: str
    relation: str
    condition: str


class SmartCollection(BaseModel):
    """A collection whose membership is computed from rules."""

    id: int | None = None
    handle: str | None = None
    title: str | None = None
    updated_at: datetime | None = None
    body_html: str | None = None
    sort_order: str | None = None
    template_suffix: str | None = None
    image: Image | None = None
    published: bool | None = None
    published_at: datetime | None = None
    published_scope: str | None = None
    rules: list[Rule] | None = None
    disjunctive: bool | None = None
    metafields: list[Metafield] | None = None

    model_config = ConfigDict(extra="allow")


class SmartCollectionListOptions(ListOptions):
    """Filters accepted by `smart_collections.json`."""

    title: str | None = None
    product_id: int | None = None
    handle: str | None = None
    published_at_min: datetime | None = None
    published_at_max: datetime | None = None
    published_status: str | None = None
