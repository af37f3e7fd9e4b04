"""Generic resource services built on top of `ShopifyClient`.

A resource service knows three things about its endpoint: the path it lives
under, the JSON key wrapping a single entity and the key wrapping a
collection. Everything else (pagination, counting, CRUD) is shared.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from typing import TYPE_CHECKING, Any, ClassVar, Generic, TypeVar

from pydantic import BaseModel

from shopify_admin.core.errors import ShopifyError
from shopify_admin.schemas.common import CountOptions, GetOptions, ListOptions
from shopify_admin.services.pagination import Pagination, collect_all, iterate_pages

if TYPE_CHECKING:
    from shopify_admin.services.client import ShopifyClient

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)
OptionsT = TypeVar("OptionsT", bound=ListOptions)


class ReadOnlyResourceService(Generic[ModelT, OptionsT]):
    """Listing and retrieval for a single resource type."""

    base_path: str
    resource_key: ClassVar[str]
    collection_key: ClassVar[str]
    model: ClassVar[type[BaseModel]]

    def __init__(self, client: ShopifyClient) -> None:
        self.client = client

    def _path(self, *segments: Any) -> str:
        return "/".join([self.base_path, *(str(segment) for segment in segments)]) + ".json"

    def _decode_one(self, payload: dict[str, Any]) -> ModelT | None:
        data = payload.get(self.resource_key)
        if data is None:
            return None
        return self.model.model_validate(data)  # type: ignore[return-value]

    def _decode_many(self, payload: dict[str, Any]) -> list[ModelT]:
        return [
            self.model.model_validate(item)  # type: ignore[misc]
            for item in payload.get(self.collection_key) or []
        ]

    async def list_with_pagination(
        self, options: OptionsT | ListOptions | None = None
    ) -> tuple[list[ModelT], Pagination]:
        """Fetch one page.

        Returns:
            The page's entities and the cursors for the adjacent pages.
        """

        payload, pagination = await self.client.list_with_pagination(self._path(), options)
        return self._decode_many(payload), pagination

    async def list(self, options: OptionsT | ListOptions | None = None) -> list[ModelT]:
        """Fetch one page, discarding pagination."""

        items, _ = await self.list_with_pagination(options)
        return items

    async def list_all(self, options: OptionsT | ListOptions | None = None) -> list[ModelT]:
        """Fetch every page and return the concatenated entities.

        Raises:
            PartialListError: If a page fails after earlier pages succeeded
                (or on the very first page); `items` holds what was fetched.
        """

        return await collect_all(self.list_with_pagination, options)

    async def iterate(
        self, options: OptionsT | ListOptions | None = None
    ) -> AsyncIterator[ModelT]:
        """Yield entities one by one, fetching pages lazily."""

        async for items, _ in iterate_pages(self.list_with_pagination, options):
            for item in items:
                yield item

    async def get(self, resource_id: int, options: GetOptions | None = None) -> ModelT | None:
        payload = await self.client.get(self._path(resource_id), options)
        return self._decode_one(payload)


class ResourceService(ReadOnlyResourceService[ModelT, OptionsT]):
    """Full CRUD for a resource type."""

    def _wrap(self, entity: ModelT) -> dict[str, Any]:
        return {
            self.resource_key: entity.model_dump(mode="json", by_alias=True, exclude_none=True)
        }

    async def count(self, options: CountOptions | None = None) -> int:
        return await self.client.count(self._path("count"), options)

    async def create(self, entity: ModelT) -> ModelT | None:
        payload = await self.client.post(self._path(), self._wrap(entity))
        return self._decode_one(payload)

    async def update(self, entity: ModelT) -> ModelT | None:
        resource_id = getattr(entity, "id", None)
        if resource_id is None:
            raise ShopifyError(f"Cannot update {self.resource_key} without an id")

        payload = await self.client.put(self._path(resource_id), self._wrap(entity))
        return self._decode_one(payload)

    async def delete(self, resource_id: int) -> None:
        logger.debug("Deleting %s %s", self.resource_key, resource_id)
        await self.client.delete(self._path(resource_id))
