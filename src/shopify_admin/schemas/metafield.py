"""Metafield schemas."""
from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict


class MetafieldType(str, Enum):
    """Value types accepted by the metafields endpoints."""

    BOOLEAN = "boolean"
    COLOR = "color"
    DATE = "date"
    DATE_TIME = "date_time"
    DIMENSION = "dimension"
    JSON = "json"
    MONEY = "money"
    MULTI_LINE_TEXT_FIELD = "multi_line_text_field"
    NUMBER_DECIMAL = "number_decimal"
    NUMBER_INTEGER = "number_integer"
    RATING = "rating"
    RICH_TEXT_FIELD = "rich_text_field"
    SINGLE_LINE_TEXT_FIELD = "single_line_text_field"
    URL = "url"
    VOLUME = "volume"
    WEIGHT = "weight"


class Metafield(BaseModel):
    """A namespaced key/value pair attached to another resource."""

    id: int | None = None
    key: str | None = None
    value: Any = None
    type: MetafieldType | str | None = None
    namespace: str | None = None
    description: str | None = None
    owner_id: int | None = None
    owner_resource: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    admin_graphql_api_id: str | None = None

    model_config = ConfigDict(extra="allow")
