"""Shared Pydantic schemas for request options."""
from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field

from shopify_admin.utils.query import encode_query_value

logger = logging.getLogger(__name__)


class QueryOptions(BaseModel):
    """Base class for typed query-string options.

    Fields left at `None` are omitted from the query string; list fields are
    sent comma-separated.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    def to_query_params(self) -> dict[str, str]:
        """Encode the set fields as query parameters."""

        params: dict[str, str] = {}
        for name, value in self.model_dump(by_alias=True, exclude_none=True).items():
            if isinstance(value, list | tuple) and not value:
                continue
            params[name] = encode_query_value(value)
        return params


class ListOptions(QueryOptions):
    """Options accepted by every paginated list endpoint.

    `page_info` is the opaque cursor handed out in `Link` headers. Once a
    cursor is set the server rejects any other filter, so only `page_info`
    and `limit` are encoded in that case.
    """

    CURSOR_FIELDS: ClassVar[frozenset[str]] = frozenset({"page_info", "limit"})

    page_info: str | None = Field(None, description="Opaque pagination cursor.")
    limit: int | None = Field(None, ge=0, description="Page size.")
    since_id: int | None = None
    created_at_min: datetime | None = None
    created_at_max: datetime | None = None
    updated_at_min: datetime | None = None
    updated_at_max: datetime | None = None
    order: str | None = None
    fields: str | None = None
    ids: list[int] | None = None

    def to_query_params(self) -> dict[str, str]:
        params = super().to_query_params()
        if not self.page_info:
            return params

        dropped = sorted(set(params) - self.CURSOR_FIELDS)
        if dropped:
            logger.debug("Dropping filters %s from cursor request", dropped)
        return {key: value for key, value in params.items() if key in self.CURSOR_FIELDS}


class CountOptions(QueryOptions):
    """Options accepted by `count.json` endpoints."""

    status: str | None = None
    created_at_min: datetime | None = None
    created_at_max: datetime | None = None
    updated_at_min: datetime | None = None
    updated_at_max: datetime | None = None


class GetOptions(QueryOptions):
    """Options accepted by single-resource endpoints."""

    fields: str | None = None


def query_params(options: QueryOptions | None) -> dict[str, Any] | None:
    """Encode optional options, returning `None` when there is nothing to send."""

    if options is None:
        return None
    return options.to_query_params() or None
