"""Metafields attached to an owning resource."""

from __future__ import annotations

from typing import TYPE_CHECKING

from shopify_admin.schemas.common import ListOptions
from shopify_admin.schemas.metafield import Metafield
from shopify_admin.services.base import ResourceService

if TYPE_CHECKING:
    from shopify_admin.services.client import ShopifyClient


class MetafieldService(ResourceService[Metafield, ListOptions]):
    """CRUD for the metafields of one owner, e.g. `products/1/metafields`.

    Owning services hand these out through their `metafields(resource_id)`
    method rather than exposing the endpoints themselves.
    """

    resource_key = "metafield"
    collection_key = "metafields"
    model = Metafield

    def __init__(self, client: ShopifyClient, resource: str, resource_id: int) -> None:
        super().__init__(client)
        self.resource = resource
        self.resource_id = resource_id
        self.base_path = f"{resource}/{resource_id}/metafields"
